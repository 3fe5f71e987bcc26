"""Abstract chart resource interface.

A chart resource is a rendered visualization bound to exactly one price
series. SeriesChartController owns the only live instance and is the only
caller of destroy(); application code never holds a reference to it.
"""

from abc import ABC, abstractmethod


class ChartResource(ABC):
    """Abstract base class for live chart instances."""

    @abstractmethod
    def destroy(self) -> None:
        """Release the drawing surface held by this chart."""
        ...
