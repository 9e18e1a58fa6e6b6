"""Value types shared by all property variants."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Customer:
    """Prospective buyer placing bids."""

    name: str
    email: str


@dataclass(frozen=True)
class Bid:
    """An accepted offer on a property."""

    price_offered: int
    customer: Customer
    time_of_bid: datetime

    def __str__(self) -> str:
        return (
            f"Bid(price_offered={self.price_offered}, customer={self.customer}, "
            f"time_of_bid={self.time_of_bid.isoformat()})"
        )


@dataclass(frozen=True)
class Picture:
    """Photo attached to an advertisement."""

    description: str
    image_url: str


@dataclass(frozen=True)
class LatLong:
    """Geographic coordinate in decimal degrees."""

    latitude: float
    longitude: float
