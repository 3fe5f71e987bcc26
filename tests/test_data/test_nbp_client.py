"""Tests for NbpGoldPriceClient.

All tests patch urllib.request.urlopen to avoid real API calls.
"""

import http.client
import json
import urllib.error
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest

from goldtracker.data.nbp_client import NbpGoldPriceClient, parse_gold_prices
from goldtracker.exceptions import PriceFetchError
from goldtracker.models import PricePoint

# ---------------------------------------------------------------------------
# Sample payload (mimics /api/cenyzlota/{start}/{end}?format=json)
# ---------------------------------------------------------------------------

MOCK_PAYLOAD = [
    {"data": "2024-01-02", "cena": 254.27},
    {"data": "2024-01-03", "cena": 251.9},
    {"data": "2024-01-04", "cena": 252.15},
]

START = date(2024, 1, 1)
END = date(2024, 1, 31)


def _response(payload: object) -> MagicMock:
    """Context-manager mock mimicking the object returned by urlopen."""
    resp = MagicMock()
    resp.read.return_value = json.dumps(payload).encode()
    resp.__enter__.return_value = resp
    resp.__exit__.return_value = False
    return resp


def _http_error(code: int) -> urllib.error.HTTPError:
    return urllib.error.HTTPError("https://nbp.test/api", code, "error", {}, None)


@pytest.fixture
def client(mock_settings) -> NbpGoldPriceClient:
    return NbpGoldPriceClient(mock_settings.nbp)


class TestParseGoldPrices:
    def test_parses_records(self) -> None:
        series = parse_gold_prices(MOCK_PAYLOAD)
        assert series[0] == PricePoint(date=date(2024, 1, 2), price=Decimal("254.27"))
        assert [p.price for p in series] == [
            Decimal("254.27"),
            Decimal("251.9"),
            Decimal("252.15"),
        ]

    def test_sorts_by_date(self) -> None:
        series = parse_gold_prices(list(reversed(MOCK_PAYLOAD)))
        assert [p.date.day for p in series] == [2, 3, 4]

    def test_empty_list(self) -> None:
        assert parse_gold_prices([]) == ()

    @pytest.mark.parametrize(
        "payload",
        [
            {"data": "2024-01-02", "cena": 254.27},
            [{"date": "2024-01-02", "cena": 254.27}],
            [{"data": "not-a-date", "cena": 254.27}],
            [{"data": "2024-01-02", "cena": "abc"}],
            ["2024-01-02"],
        ],
    )
    def test_malformed_payload(self, payload) -> None:
        with pytest.raises(ValueError):
            parse_gold_prices(payload)


class TestFetchGoldPrices:
    def test_success(self, client) -> None:
        with patch("urllib.request.urlopen", return_value=_response(MOCK_PAYLOAD)) as urlopen:
            series = client.fetch_gold_prices(START, END)

        assert len(series) == 3
        request = urlopen.call_args.args[0]
        assert request.full_url == (
            "https://nbp.test/api/cenyzlota/2024-01-01/2024-01-31?format=json"
        )
        assert urlopen.call_args.kwargs["timeout"] == 1.0

    def test_not_found_is_empty_series(self, client) -> None:
        with patch("urllib.request.urlopen", side_effect=_http_error(404)) as urlopen:
            assert client.fetch_gold_prices(START, END) == ()
        assert urlopen.call_count == 1

    def test_bad_request_is_not_retried(self, client) -> None:
        with patch("urllib.request.urlopen", side_effect=_http_error(400)) as urlopen:
            with pytest.raises(PriceFetchError):
                client.fetch_gold_prices(START, END)
        assert urlopen.call_count == 1

    def test_retries_then_succeeds(self, client) -> None:
        side_effect = [
            urllib.error.URLError("connection reset"),
            _http_error(503),
            _response(MOCK_PAYLOAD),
        ]
        with patch("urllib.request.urlopen", side_effect=side_effect) as urlopen:
            series = client.fetch_gold_prices(START, END)

        assert len(series) == 3
        assert urlopen.call_count == 3

    def test_gives_up_after_max_retries(self, client) -> None:
        with patch(
            "urllib.request.urlopen",
            side_effect=urllib.error.URLError("unreachable"),
        ) as urlopen:
            with pytest.raises(PriceFetchError):
                client.fetch_gold_prices(START, END)
        assert urlopen.call_count == 3

    def test_malformed_body_raises_after_retries(self, client) -> None:
        with patch("urllib.request.urlopen", return_value=_response({"error": "x"})):
            with pytest.raises(PriceFetchError):
                client.fetch_gold_prices(START, END)

    def test_backoff_delays(self, mock_settings) -> None:
        settings = mock_settings.nbp.model_copy(update={"retry_base_delay": 1.0})
        client = NbpGoldPriceClient(settings)
        with (
            patch("urllib.request.urlopen", side_effect=TimeoutError("slow")),
            patch("goldtracker.data.nbp_client.time.sleep") as sleep,
        ):
            with pytest.raises(PriceFetchError):
                client.fetch_gold_prices(START, END)

        assert [c.args[0] for c in sleep.call_args_list] == [1.0, 2.0]

    @pytest.mark.parametrize(
        "error",
        [
            http.client.RemoteDisconnected("Remote end closed connection"),
            ConnectionResetError(104, "Connection reset by peer"),
            http.client.IncompleteRead(b""),
        ],
        ids=["remote_disconnected", "connection_reset", "incomplete_read"],
    )
    def test_dropped_connection_is_retried_then_raised(self, client, error) -> None:
        with patch("urllib.request.urlopen", side_effect=error) as urlopen:
            with pytest.raises(PriceFetchError):
                client.fetch_gold_prices(START, END)
        assert urlopen.call_count == 3

    def test_connection_dropped_while_reading_body(self, client) -> None:
        broken = _response(MOCK_PAYLOAD)
        broken.read.side_effect = http.client.IncompleteRead(b"[{")
        side_effect = [broken, _response(MOCK_PAYLOAD)]
        with patch("urllib.request.urlopen", side_effect=side_effect) as urlopen:
            series = client.fetch_gold_prices(START, END)

        assert len(series) == 3
        assert urlopen.call_count == 2
