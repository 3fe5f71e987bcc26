"""Best single buy/sell window over a daily price series.

Given an ordered price series and a principal, finds the pair of
observations (buy index < sell index) maximizing the absolute return:

    profit(i, j) = principal * (price[j] - price[i]) / price[i]

Fractional units are assumed: the principal buys principal / price[i]
units with no lot-size rounding.

Two implementations are provided. ``find_best_investment`` is a single
pass over the series tracking the running minimum; it is the one the
application uses. ``find_best_investment_brute_force`` checks every pair
and serves as the reference the single pass must agree with, including
the tie-break (earliest buy, then earliest sell).

For a fixed positive principal the profit ranks pairs exactly like the
price ratio price[j] / price[i]. Candidates are compared on that ratio as
an exact Fraction, so Decimal context rounding can never make two
different windows look equal. The Decimal profit is computed once, for
the winning pair.

Prices are assumed positive (validated upstream). A non-positive price
raises InvalidPriceError rather than producing a meaningless profit.

CRITICAL: All money computations use Decimal. Never use float.
"""

from decimal import Decimal
from fractions import Fraction

from goldtracker.exceptions import InvalidPriceError, InvalidPrincipalError
from goldtracker.logging import get_logger
from goldtracker.models import InvestmentResult, PricePoint, PriceSeries

logger = get_logger(__name__)

_ZERO = Decimal("0")
_ONE = Fraction(1)


def _check_principal(principal: Decimal) -> None:
    if principal <= _ZERO:
        raise InvalidPrincipalError(f"principal must be positive, got {principal}")


def _check_price(point: PricePoint) -> None:
    if point.price <= _ZERO:
        raise InvalidPriceError(
            f"non-positive price {point.price} on {point.date.isoformat()}"
        )


def _ratio(buy_price: Decimal, sell_price: Decimal) -> Fraction:
    """Exact sell/buy price ratio; orders pairs the same way profit does."""
    return Fraction(sell_price) / Fraction(buy_price)


def _profit(principal: Decimal, buy_price: Decimal, sell_price: Decimal) -> Decimal:
    """Absolute gain from buying at buy_price and selling at sell_price."""
    return principal * (sell_price - buy_price) / buy_price


def _to_result(
    series: PriceSeries,
    principal: Decimal,
    ratio: Fraction,
    buy: int,
    sell: int,
) -> InvestmentResult | None:
    if ratio <= _ONE:
        logger.debug("no_profitable_window", points=len(series))
        return None

    profit = _profit(principal, series[buy].price, series[sell].price)
    result = InvestmentResult(
        principal=principal,
        profit=profit,
        buy_date=series[buy].date,
        sell_date=series[sell].date,
        buy_price=series[buy].price,
        sell_price=series[sell].price,
    )
    logger.debug(
        "best_investment_computed",
        points=len(series),
        buy_date=result.buy_date.isoformat(),
        sell_date=result.sell_date.isoformat(),
        profit=str(profit),
    )
    return result


def find_best_investment(
    series: PriceSeries,
    principal: Decimal,
) -> InvestmentResult | None:
    """Find the most profitable buy/sell pair in a single pass.

    Keeps the index of the lowest price seen so far (first occurrence on
    ties) and evaluates selling at each later index against it. A candidate
    replaces the best only when strictly greater, so the earliest optimal
    pair is reported, identical to the pairwise scan.

    Args:
        series: Price points ordered by non-decreasing date.
        principal: Amount invested at the buy date. Must be positive.

    Returns:
        InvestmentResult for the best window, or None if the series has
        fewer than two points or no pair yields a positive profit.

    Raises:
        InvalidPrincipalError: principal is not positive.
        InvalidPriceError: a price in the series is not positive.
    """
    _check_principal(principal)
    if len(series) < 2:
        return None

    _check_price(series[0])
    min_index = 0
    best_ratio: Fraction | None = None
    best_buy = best_sell = 0

    for j in range(1, len(series)):
        _check_price(series[j])
        ratio = _ratio(series[min_index].price, series[j].price)
        if best_ratio is None or ratio > best_ratio:
            best_ratio = ratio
            best_buy, best_sell = min_index, j
        if series[j].price < series[min_index].price:
            min_index = j

    return _to_result(series, principal, best_ratio, best_buy, best_sell)


def find_best_investment_brute_force(
    series: PriceSeries,
    principal: Decimal,
) -> InvestmentResult | None:
    """Find the most profitable buy/sell pair by checking every pair.

    O(n^2) reference implementation. Scans buy index ascending, then sell
    index ascending, keeping the first strictly greater profit.

    Args:
        series: Price points ordered by non-decreasing date.
        principal: Amount invested at the buy date. Must be positive.

    Returns:
        Same as find_best_investment.

    Raises:
        InvalidPrincipalError: principal is not positive.
        InvalidPriceError: a price in the series is not positive.
    """
    _check_principal(principal)
    if len(series) < 2:
        return None

    for point in series:
        _check_price(point)

    best_ratio: Fraction | None = None
    best_buy = best_sell = 0

    for i in range(len(series) - 1):
        for j in range(i + 1, len(series)):
            ratio = _ratio(series[i].price, series[j].price)
            if best_ratio is None or ratio > best_ratio:
                best_ratio = ratio
                best_buy, best_sell = i, j

    return _to_result(series, principal, best_ratio, best_buy, best_sell)
