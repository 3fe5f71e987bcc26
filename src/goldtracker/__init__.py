"""Gold price tracker with best buy/sell window analysis."""

__version__ = "0.1.0"
