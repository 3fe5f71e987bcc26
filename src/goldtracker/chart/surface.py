"""Drawing surface shared by the chart resource and the page renderer.

The surface stands for the page canvas: it accepts one chart at a time,
the way browser charting libraries refuse to draw a second chart on a
canvas that is still in use. The dashboard reads the attached chart's
render config from here; nothing else about the chart is exposed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from goldtracker.exceptions import ChartSurfaceBusyError
from goldtracker.logging import get_logger

if TYPE_CHECKING:
    from goldtracker.chart.line_chart import LineChart

logger = get_logger(__name__)


class ChartSurface:
    """A named canvas slot holding at most one attached chart."""

    def __init__(self, surface_id: str = "priceChart") -> None:
        self.surface_id = surface_id
        self._chart: LineChart | None = None

    @property
    def occupied(self) -> bool:
        return self._chart is not None

    @property
    def config(self) -> dict[str, Any] | None:
        """Render config of the attached chart, or None when the canvas is blank."""
        return self._chart.config if self._chart is not None else None

    def attach(self, chart: LineChart) -> None:
        """Bind a chart to this surface.

        Raises:
            ChartSurfaceBusyError: another chart is still attached.
        """
        if self._chart is not None:
            raise ChartSurfaceBusyError(
                f"surface {self.surface_id!r} is already in use by another chart"
            )
        self._chart = chart
        logger.debug("chart_attached", surface=self.surface_id, points=chart.points)

    def detach(self, chart: LineChart) -> None:
        """Unbind a chart. Detaching a chart that is not attached does nothing."""
        if self._chart is chart:
            self._chart = None
            logger.debug("chart_detached", surface=self.surface_id)
