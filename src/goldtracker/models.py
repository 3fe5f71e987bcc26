"""Shared data models for the gold tracker.

CRITICAL: All monetary values use Decimal. Never use float for prices or
amounts; floats appear only in chart payloads handed to the browser.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class PricePoint:
    """A single daily gold quotation (PLN per gram of fine gold)."""

    date: date
    price: Decimal

    def to_dict(self) -> dict:
        """Serialize to dict for JSON output."""
        return {"date": self.date.isoformat(), "price": str(self.price)}


# Ordered by non-decreasing date. Duplicate dates are tolerated.
PriceSeries = tuple[PricePoint, ...]


@dataclass(frozen=True)
class InvestmentResult:
    """Best single buy/sell window found in a price series.

    Attributes:
        principal: Amount invested at buy_date.
        profit: Absolute gain (not a ratio) from selling at sell_date.
            Always strictly positive; unprofitable series yield no result.
        buy_date: Date of the buy observation.
        sell_date: Date of the sell observation (strictly after buy in the series).
        buy_price: Price at buy_date.
        sell_price: Price at sell_date.
    """

    principal: Decimal
    profit: Decimal
    buy_date: date
    sell_date: date
    buy_price: Decimal
    sell_price: Decimal

    @property
    def final_value(self) -> Decimal:
        """Principal plus profit."""
        return self.principal + self.profit

    def to_dict(self) -> dict:
        """Serialize to dict for JSON output.

        Returns:
            Dict with Decimal values as strings and dates in ISO format.
        """
        return {
            "principal": str(self.principal),
            "profit": str(self.profit),
            "final_value": str(self.final_value),
            "buy_date": self.buy_date.isoformat(),
            "sell_date": self.sell_date.isoformat(),
            "buy_price": str(self.buy_price),
            "sell_price": str(self.sell_price),
        }
