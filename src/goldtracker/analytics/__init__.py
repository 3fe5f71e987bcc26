"""Investment window analytics over price series."""

from goldtracker.analytics.optimizer import (
    find_best_investment,
    find_best_investment_brute_force,
)

__all__ = ["find_best_investment", "find_best_investment_brute_force"]
