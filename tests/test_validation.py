"""Tests for date range and principal validation."""

from datetime import date
from decimal import Decimal

import pytest

from goldtracker.exceptions import InvalidPrincipalError
from goldtracker.validation import (
    END_IN_FUTURE,
    MISSING_DATES,
    MISSING_PRINCIPAL,
    START_NOT_BEFORE_END,
    START_NOT_IN_PAST,
    DateRangeState,
    default_date_range,
    evaluate_date_range,
    parse_date,
    parse_principal,
)

TODAY = date(2024, 3, 15)


class TestEvaluateDateRange:
    """Rules apply in order; the first failing one sets the message."""

    def test_valid_range(self) -> None:
        state = evaluate_date_range(date(2024, 3, 1), date(2024, 3, 15), TODAY)
        assert state == DateRangeState(enabled=True, error="")

    @pytest.mark.parametrize(
        "start,end",
        [(None, date(2024, 3, 10)), (date(2024, 3, 1), None), (None, None)],
    )
    def test_missing_dates(self, start, end) -> None:
        state = evaluate_date_range(start, end, TODAY)
        assert not state.enabled
        assert state.error == MISSING_DATES

    def test_start_equal_to_end(self) -> None:
        state = evaluate_date_range(date(2024, 3, 10), date(2024, 3, 10), TODAY)
        assert not state.enabled
        assert state.error == START_NOT_BEFORE_END

    def test_start_after_end(self) -> None:
        state = evaluate_date_range(date(2024, 3, 12), date(2024, 3, 10), TODAY)
        assert state.error == START_NOT_BEFORE_END

    def test_start_today(self) -> None:
        state = evaluate_date_range(TODAY, date(2024, 3, 20), TODAY)
        assert not state.enabled
        assert state.error == START_NOT_IN_PAST

    def test_end_in_future(self) -> None:
        state = evaluate_date_range(date(2024, 3, 1), date(2024, 3, 16), TODAY)
        assert not state.enabled
        assert state.error == END_IN_FUTURE

    def test_range_too_long(self) -> None:
        state = evaluate_date_range(date(2023, 3, 14), TODAY, TODAY)
        assert not state.enabled
        assert "365" in state.error

    def test_range_at_limit(self) -> None:
        start = date(2023, 3, 16)  # 365 days before TODAY (2024 is a leap year)
        assert (TODAY - start).days == 365
        assert evaluate_date_range(start, TODAY, TODAY).enabled

    def test_custom_limit(self) -> None:
        state = evaluate_date_range(date(2024, 3, 1), TODAY, TODAY, max_days=7)
        assert not state.enabled
        assert state.error == "Date range must not exceed 7 days."

    def test_to_dict(self) -> None:
        state = evaluate_date_range(None, None, TODAY)
        assert state.to_dict() == {"enabled": False, "error": MISSING_DATES}


class TestDefaults:
    def test_default_range_is_month_to_date(self) -> None:
        assert default_date_range(TODAY) == (date(2024, 3, 1), TODAY)

    def test_default_range_on_first_of_month_is_disabled(self) -> None:
        first = date(2024, 3, 1)
        start, end = default_date_range(first)
        assert not evaluate_date_range(start, end, first).enabled


class TestParseDate:
    def test_iso(self) -> None:
        assert parse_date("2024-03-01") == date(2024, 3, 1)

    @pytest.mark.parametrize("raw", [None, "", "   ", "03/01/2024", "2024-13-01"])
    def test_blank_or_malformed(self, raw) -> None:
        assert parse_date(raw) is None


class TestParsePrincipal:
    @pytest.mark.parametrize(
        "raw,expected",
        [("1000", Decimal("1000")), (" 250.50 ", Decimal("250.50")), (Decimal("1"), Decimal("1"))],
    )
    def test_valid(self, raw, expected) -> None:
        assert parse_principal(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "  "])
    def test_missing(self, raw) -> None:
        with pytest.raises(InvalidPrincipalError, match=MISSING_PRINCIPAL):
            parse_principal(raw)

    @pytest.mark.parametrize("raw", ["abc", "NaN", "Infinity", "1e", Decimal("NaN")])
    def test_malformed(self, raw) -> None:
        with pytest.raises(InvalidPrincipalError):
            parse_principal(raw)

    @pytest.mark.parametrize("raw", ["0", "-10", "0.00"])
    def test_not_positive(self, raw) -> None:
        with pytest.raises(InvalidPrincipalError):
            parse_principal(raw)
