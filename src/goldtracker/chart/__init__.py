"""Price chart resource, drawing surface, and lifecycle controller."""

from goldtracker.chart.controller import ChartState, SeriesChartController
from goldtracker.chart.line_chart import LineChart, build_line_config, line_chart_factory
from goldtracker.chart.resource import ChartResource
from goldtracker.chart.surface import ChartSurface

__all__ = [
    "ChartResource",
    "ChartState",
    "ChartSurface",
    "LineChart",
    "SeriesChartController",
    "build_line_config",
    "line_chart_factory",
]
