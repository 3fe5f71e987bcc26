"""Shared test fixtures for the gold tracker."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from goldtracker.config import AppSettings, NbpSettings, TrackerSettings
from goldtracker.models import PricePoint

TODAY = date(2024, 3, 15)


@pytest.fixture
def mock_settings() -> AppSettings:
    """Return AppSettings with test defaults (no retry delay, short timeout)."""
    return AppSettings(
        log_level="DEBUG",
        nbp=NbpSettings(
            base_url="https://nbp.test/api",
            timeout_seconds=1.0,
            max_retries=3,
            retry_base_delay=0.0,
        ),
        tracker=TrackerSettings(),
    )


@pytest.fixture
def march_series() -> tuple[PricePoint, ...]:
    """Five March quotations; best window buys on the 7th and sells on the 8th."""
    prices = [
        (date(2024, 3, 4), "100"),
        (date(2024, 3, 5), "90"),
        (date(2024, 3, 6), "120"),
        (date(2024, 3, 7), "80"),
        (date(2024, 3, 8), "130"),
    ]
    return tuple(PricePoint(date=d, price=Decimal(p)) for d, p in prices)


@pytest.fixture
def mock_client(march_series) -> MagicMock:
    """Mock NbpGoldPriceClient returning the March series."""
    client = MagicMock()
    client.fetch_gold_prices = MagicMock(return_value=march_series)
    return client
