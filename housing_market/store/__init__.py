"""In-memory catalog of advertised properties."""

from housing_market.store.market import MAX_PRICE, HousingMarket

__all__ = ["HousingMarket", "MAX_PRICE"]
