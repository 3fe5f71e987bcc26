"""Tracker session: the per-page state of the gold tracker.

Composes the fetch client, the chart controller and the optimizer. The
optimizer and the controller never talk to each other; the session hands
the same series to both.

Collaboration rules:
- A fetch failure never reaches replace_series; the previous chart stays.
- Returns are computed on the series the chart was just rebuilt from.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import date
from decimal import Decimal
from typing import Any

from goldtracker.analytics.optimizer import find_best_investment
from goldtracker.chart.controller import SeriesChartController
from goldtracker.config import TrackerSettings
from goldtracker.data.nbp_client import NbpGoldPriceClient
from goldtracker.exceptions import InvalidPrincipalError, PriceFetchError
from goldtracker.logging import get_logger
from goldtracker.models import InvestmentResult, PriceSeries
from goldtracker.validation import (
    DateRangeState,
    default_date_range,
    evaluate_date_range,
    parse_principal,
)

logger = get_logger(__name__)

FETCH_FAILED = "Could not fetch gold prices. Please try again."


class TrackerSession:
    """Date range, fetched series, chart and last investment result.

    Args:
        client: Gold price source.
        controller: Owner of the live chart.
        settings: Range limits and currency.
        today_fn: Clock used for validation and defaults.
    """

    def __init__(
        self,
        client: NbpGoldPriceClient,
        controller: SeriesChartController,
        settings: TrackerSettings,
        today_fn: Callable[[], date] = date.today,
    ) -> None:
        self._client = client
        self._controller = controller
        self._settings = settings
        self._today_fn = today_fn

        self.start_date: date | None = None
        self.end_date: date | None = None
        self.series: PriceSeries = ()
        self.principal: Decimal | None = None
        self.result: InvestmentResult | None = None
        self.error = ""
        self._restore_defaults()

    def _restore_defaults(self) -> None:
        self.start_date, self.end_date = default_date_range(self._today_fn())
        self.series = ()
        self.principal = None
        self.result = None
        self.error = ""

    @property
    def date_range(self) -> DateRangeState:
        """Validation state of the current inputs, derived on every access."""
        return self.check_range(self.start_date, self.end_date)

    def check_range(self, start: date | None, end: date | None) -> DateRangeState:
        """Validate a range against today without changing the session."""
        return evaluate_date_range(
            start,
            end,
            self._today_fn(),
            max_days=self._settings.max_range_days,
        )

    def set_date_range(self, start: date | None, end: date | None) -> DateRangeState:
        """Update the requested range and return its validation state."""
        self.start_date = start
        self.end_date = end
        state = self.date_range
        self.error = state.error
        return state

    async def update_graph(self) -> bool:
        """Fetch the series for the current range and rebuild the chart.

        Returns:
            True if the chart now shows freshly fetched data.
        """
        state = self.date_range
        if not state.enabled:
            self.error = state.error
            return False

        try:
            series = await asyncio.to_thread(
                self._client.fetch_gold_prices, self.start_date, self.end_date
            )
        except PriceFetchError as e:
            logger.warning(
                "update_graph_failed",
                start=str(self.start_date),
                end=str(self.end_date),
                error=str(e),
            )
            self.error = FETCH_FAILED
            return False

        self.series = series
        self._controller.replace_series(series)
        self.error = ""
        return True

    async def calculate_returns(self, raw_principal: str | Decimal | None) -> InvestmentResult | None:
        """Refresh the series and find the best buy/sell window for the principal.

        When the refresh is not possible (invalid range or fetch failure) the
        optimizer runs on the series already on display.
        """
        try:
            principal = parse_principal(raw_principal)
        except InvalidPrincipalError as e:
            self.error = str(e)
            self.principal = None
            self.result = None
            return None

        self.principal = principal
        await self.update_graph()

        self.result = find_best_investment(self.series, principal)
        logger.info(
            "returns_calculated",
            principal=str(principal),
            points=len(self.series),
            profitable=self.result is not None,
        )
        return self.result

    def reset(self) -> None:
        """Restore the initial inputs and tear down the chart."""
        self._controller.shutdown()
        self._restore_defaults()
        logger.info("session_reset")

    def shutdown(self) -> None:
        self._controller.shutdown()

    def snapshot(self) -> dict[str, Any]:
        """Serializable view of the session for templates and the JSON API."""
        state = self.date_range
        return {
            "start_date": self.start_date.isoformat() if self.start_date else "",
            "end_date": self.end_date.isoformat() if self.end_date else "",
            "today": self._today_fn().isoformat(),
            "enabled": state.enabled,
            "error": self.error,
            "principal": str(self.principal) if self.principal is not None else "",
            "currency": self._settings.currency,
            "points": len(self.series),
            "chart_state": self._controller.state.value,
            "result": self.result.to_dict() if self.result else None,
        }
