"""National Bank of Poland gold price client.

Fetches daily gold quotations (PLN per gram, 1000 fineness) from the NBP
public API via urllib.request (stdlib), with exponential backoff retry.

API notes:
- Endpoint: /cenyzlota/{startDate}/{endDate}, dates as YYYY-MM-DD
- Response items look like {"data": "2024-01-02", "cena": 254.27}
- 404 "Brak danych" means no quotations in the range (weekends, holidays)
- 400 is returned for ranges longer than 367 days
"""

import http.client
import json
import time
import urllib.error
import urllib.request
from datetime import date
from decimal import Decimal, InvalidOperation

from goldtracker.config import NbpSettings
from goldtracker.exceptions import PriceFetchError
from goldtracker.logging import get_logger
from goldtracker.models import PricePoint, PriceSeries

logger = get_logger(__name__)


class _PermanentFetchError(Exception):
    """Fetch failure that retrying cannot fix."""


def parse_gold_prices(payload: object) -> PriceSeries:
    """Convert an NBP JSON payload into a date-ordered price series.

    Raises:
        ValueError: payload is not a list of {"data", "cena"} records.
    """
    if not isinstance(payload, list):
        raise ValueError(f"expected a JSON list, got {type(payload).__name__}")

    points = []
    for item in payload:
        try:
            points.append(
                PricePoint(
                    date=date.fromisoformat(item["data"]),
                    price=Decimal(str(item["cena"])),
                )
            )
        except (KeyError, TypeError, ValueError, InvalidOperation) as e:
            raise ValueError(f"malformed quotation record: {item!r}") from e

    return tuple(sorted(points, key=lambda p: p.date))


class NbpGoldPriceClient:
    """Retrieves gold price series for a date range.

    Usage:
        client = NbpGoldPriceClient(settings.nbp)
        series = client.fetch_gold_prices(date(2024, 1, 1), date(2024, 1, 31))
    """

    def __init__(self, settings: NbpSettings) -> None:
        self._settings = settings

    def _url(self, start: date, end: date) -> str:
        base = self._settings.base_url.rstrip("/")
        return f"{base}/cenyzlota/{start.isoformat()}/{end.isoformat()}?format=json"

    def fetch_gold_prices(self, start: date, end: date) -> PriceSeries:
        """Fetch daily gold prices between start and end (inclusive).

        Returns:
            Series ordered by date; empty when NBP has no quotations in range.

        Raises:
            PriceFetchError: the request failed after all retries, or the
                response could not be parsed.
        """
        url = self._url(start, end)
        max_retries = self._settings.max_retries
        base_delay = self._settings.retry_base_delay

        for attempt in range(max_retries):
            try:
                series = self._fetch_once(url)
            except _PermanentFetchError as e:
                logger.error("gold_price_fetch_failed", url=url, error=str(e), attempts=attempt + 1)
                raise PriceFetchError(str(e)) from e
            except (OSError, http.client.HTTPException, ValueError) as e:
                # OSError: URLError, timeouts, resets. HTTPException: truncated reads.
                if attempt == max_retries - 1:
                    logger.error(
                        "gold_price_fetch_failed",
                        url=url,
                        error=str(e),
                        attempts=max_retries,
                    )
                    raise PriceFetchError(
                        f"could not fetch gold prices for {start} to {end}: {e}"
                    ) from e

                delay = base_delay * (2**attempt)
                logger.warning(
                    "gold_price_fetch_retry",
                    attempt=attempt + 1,
                    max_retries=max_retries,
                    delay=delay,
                    error=str(e),
                )
                time.sleep(delay)
                continue

            logger.info(
                "gold_prices_fetched",
                start=start.isoformat(),
                end=end.isoformat(),
                points=len(series),
            )
            return series

        raise PriceFetchError("max_retries must be at least 1")

    def _fetch_once(self, url: str) -> PriceSeries:
        headers = {"Accept": "application/json", "User-Agent": "GoldTracker/0.1"}
        req = urllib.request.Request(url, headers=headers)

        try:
            with urllib.request.urlopen(req, timeout=self._settings.timeout_seconds) as resp:
                payload = json.loads(resp.read())
        except urllib.error.HTTPError as e:
            if e.code == 404:
                return ()
            if 400 <= e.code < 500:
                raise _PermanentFetchError(f"NBP rejected request ({e.code}): {e.reason}") from e
            raise

        return parse_gold_prices(payload)
