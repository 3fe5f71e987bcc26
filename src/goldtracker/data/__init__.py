"""Gold price retrieval from the NBP public API."""

from goldtracker.data.nbp_client import NbpGoldPriceClient, parse_gold_prices

__all__ = ["NbpGoldPriceClient", "parse_gold_prices"]
