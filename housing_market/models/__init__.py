"""Domain models for the housing market."""

from housing_market.models.base import Bid, Customer, LatLong, Picture
from housing_market.models.enums import HousingType
from housing_market.models.property import (
    Apartment,
    Garage,
    House,
    Property,
    energy_factor,
)

__all__ = [
    "Apartment",
    "Bid",
    "Customer",
    "Garage",
    "House",
    "HousingType",
    "LatLong",
    "Picture",
    "Property",
    "energy_factor",
]
