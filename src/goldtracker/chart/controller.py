"""Lifecycle manager for the single live price chart.

SeriesChartController owns the one chart resource bound to the currently
displayed price series. Replacing the series destroys the old chart before
the new one is built, so two charts never share a drawing surface.

States:
    EMPTY --replace_series--> BOUND   (construct)
    BOUND --replace_series--> BOUND   (destroy old, construct new)
    BOUND --shutdown-------> EMPTY   (destroy)
    EMPTY --shutdown-------> EMPTY   (no-op)

Not safe for concurrent use: callers serialize access (one event loop).
"""

from collections.abc import Callable
from enum import Enum

from goldtracker.chart.resource import ChartResource
from goldtracker.logging import get_logger
from goldtracker.models import PriceSeries

logger = get_logger(__name__)


class ChartState(str, Enum):
    """Controller lifecycle state."""

    EMPTY = "empty"
    BOUND = "bound"


class SeriesChartController:
    """Holds the displayed price series and its single live chart.

    Args:
        chart_factory: Builds a chart resource bound to a series. Called
            exactly once per replace_series, always after the previous
            resource has been destroyed.
    """

    def __init__(self, chart_factory: Callable[[PriceSeries], ChartResource]) -> None:
        self._chart_factory = chart_factory
        self._chart: ChartResource | None = None
        self._series: PriceSeries = ()

    @property
    def state(self) -> ChartState:
        return ChartState.BOUND if self._chart is not None else ChartState.EMPTY

    @property
    def series(self) -> PriceSeries:
        """Series bound to the live chart; empty when no chart is live."""
        return self._series

    def replace_series(self, series: PriceSeries) -> None:
        """Bind a new series, destroying the previous chart first.

        An empty series still builds an (empty) chart. If construction
        fails, the controller is left EMPTY and the error propagates.
        """
        self._release()
        self._chart = self._chart_factory(series)
        self._series = series
        logger.info("chart_replaced", points=len(series))

    def shutdown(self) -> None:
        """Destroy the live chart, if any. Safe to call repeatedly."""
        if self._release():
            logger.info("chart_shutdown")

    def _release(self) -> bool:
        """Destroy and forget the live chart. Returns True if one was live."""
        chart, self._chart = self._chart, None
        self._series = ()
        if chart is None:
            return False
        chart.destroy()
        return True
