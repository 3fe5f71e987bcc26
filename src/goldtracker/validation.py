"""Input validation for the date range and investment amount.

The date range state is derived, never stored: evaluate_date_range is a
pure function of (start, end, today) and is recomputed on every change, so
the "enabled" flag and the error message cannot drift apart.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation

from goldtracker.exceptions import InvalidPrincipalError

MISSING_DATES = "Please select both start and end dates."
START_NOT_BEFORE_END = "Start date should be earlier than the end date."
START_NOT_IN_PAST = "Start date should be today or earlier."
END_IN_FUTURE = "End date should not exceed today."
MISSING_PRINCIPAL = "Please enter the investment value."


@dataclass(frozen=True)
class DateRangeState:
    """Whether a price fetch may be issued for the range, and why not."""

    enabled: bool
    error: str = ""

    def to_dict(self) -> dict:
        return {"enabled": self.enabled, "error": self.error}


def evaluate_date_range(
    start: date | None,
    end: date | None,
    today: date,
    max_days: int = 365,
) -> DateRangeState:
    """Validate a requested quotation range.

    Rules are checked in order and the first failing rule wins.

    Args:
        start: First day of the range, or None when not selected.
        end: Last day of the range, or None when not selected.
        today: Current date; the range may not reach into the future.
        max_days: Longest allowed span in days between start and end.

    Returns:
        DateRangeState with enabled=True and an empty error when the range
        can be fetched.
    """
    if start is None or end is None:
        return DateRangeState(enabled=False, error=MISSING_DATES)
    if start >= end:
        return DateRangeState(enabled=False, error=START_NOT_BEFORE_END)
    if start >= today:
        return DateRangeState(enabled=False, error=START_NOT_IN_PAST)
    if end > today:
        return DateRangeState(enabled=False, error=END_IN_FUTURE)
    if (end - start).days > max_days:
        return DateRangeState(
            enabled=False,
            error=f"Date range must not exceed {max_days} days.",
        )
    return DateRangeState(enabled=True)


def default_date_range(today: date) -> tuple[date, date]:
    """First day of the current month through today."""
    return today.replace(day=1), today


def parse_date(raw: str | None) -> date | None:
    """Parse an ISO date from a form field; blank or malformed input is None."""
    if raw is None or not raw.strip():
        return None
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        return None


def parse_principal(raw: str | Decimal | None) -> Decimal:
    """Parse the investment amount entered by the user.

    Raises:
        InvalidPrincipalError: blank, non-numeric, non-finite or not positive.
    """
    if isinstance(raw, Decimal):
        value = raw
    else:
        if raw is None or not str(raw).strip():
            raise InvalidPrincipalError(MISSING_PRINCIPAL)
        try:
            value = Decimal(str(raw).strip())
        except InvalidOperation as e:
            raise InvalidPrincipalError(f"Invalid investment value: {raw!r}") from e

    if not value.is_finite():
        raise InvalidPrincipalError(f"Invalid investment value: {raw!r}")
    if value <= Decimal("0"):
        raise InvalidPrincipalError("Investment value must be greater than zero.")
    return value
