"""Chart.js line chart of a gold price series.

Builds the configuration object the dashboard hands to Chart.js and keeps
it attached to a ChartSurface for as long as the chart is alive.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from goldtracker.chart.resource import ChartResource
from goldtracker.chart.surface import ChartSurface
from goldtracker.models import PriceSeries

TEAL = "rgba(75, 192, 192, 1)"
TEAL_FILL = "rgba(75, 192, 192, 0.2)"
GOLD = "rgba(255, 215, 0, 1)"
BLACK = "rgba(0, 0, 0, 1)"


def build_line_config(series: PriceSeries, label: str = "Gold Prices") -> dict[str, Any]:
    """Chart.js config for a daily price line over a time axis.

    Prices are converted to float here; the chart is a display concern and
    Chart.js only understands JSON numbers.
    """
    return {
        "type": "line",
        "data": {
            "labels": [point.date.isoformat() for point in series],
            "datasets": [
                {
                    "label": label,
                    "data": [float(point.price) for point in series],
                    "borderColor": TEAL,
                    "backgroundColor": TEAL_FILL,
                    "borderWidth": 3,
                    "pointRadius": 4,
                    "pointBackgroundColor": TEAL,
                    "pointBorderColor": GOLD,
                    "pointHoverRadius": 4,
                    "pointHoverBorderColor": BLACK,
                }
            ],
        },
        "options": {
            "scales": {
                "x": {
                    "type": "time",
                    "time": {"unit": "day", "displayFormats": {"day": "yyyy-MM-dd"}},
                    "position": "bottom",
                },
                "y": {"type": "linear", "position": "left"},
            },
            "elements": {"line": {"tension": 0.3}},
            "plugins": {
                "tooltip": {
                    "backgroundColor": "rgba(0, 0, 0, 0.7)",
                    "titleColor": "#fff",
                    "bodyColor": "#fff",
                    "borderColor": "rgba(255, 255, 255, 0.7)",
                }
            },
        },
    }


class LineChart(ChartResource):
    """A live line chart occupying a ChartSurface.

    Attaches itself on construction; raises ChartSurfaceBusyError if the
    surface still holds a previous chart.
    """

    def __init__(self, surface: ChartSurface, series: PriceSeries) -> None:
        self._surface = surface
        self.points = len(series)
        self.config = build_line_config(series)
        self._destroyed = False
        surface.attach(self)

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def destroy(self) -> None:
        if self._destroyed:
            return
        self._surface.detach(self)
        self._destroyed = True


def line_chart_factory(surface: ChartSurface) -> Callable[[PriceSeries], LineChart]:
    """Return a factory building line charts on the given surface."""

    def _build(series: PriceSeries) -> LineChart:
        return LineChart(surface, series)

    return _build
