"""Custom exceptions for the gold tracker.

Optimizer, fetch and chart exceptions live here to avoid circular
imports between modules.
"""


class TrackerError(Exception):
    """Base exception for all tracker errors."""


class InvalidPrincipalError(TrackerError):
    """Raised when the investment amount is missing, malformed or not positive."""


class InvalidPriceError(TrackerError):
    """Raised when a non-positive price reaches the optimizer."""


class PriceFetchError(TrackerError):
    """Raised when the gold price series cannot be retrieved."""


class ChartSurfaceBusyError(TrackerError):
    """Raised when a chart is attached to a surface that already holds one."""
