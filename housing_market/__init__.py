"""Housing market: advertise, search and bid on properties."""

from housing_market.exceptions import ConfigurationError, HousingMarketError, InvalidArgumentError
from housing_market.models import (
    Apartment,
    Bid,
    Customer,
    Garage,
    House,
    HousingType,
    LatLong,
    Picture,
    Property,
    energy_factor,
)
from housing_market.sinks import show_advertisements
from housing_market.store import MAX_PRICE, HousingMarket

__all__ = [
    "Apartment",
    "Bid",
    "ConfigurationError",
    "Customer",
    "Garage",
    "House",
    "HousingMarket",
    "HousingMarketError",
    "HousingType",
    "InvalidArgumentError",
    "LatLong",
    "MAX_PRICE",
    "Picture",
    "Property",
    "energy_factor",
    "show_advertisements",
]
