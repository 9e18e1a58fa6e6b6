"""Property variants offered on the housing market.

A property is one of a closed set of variants (``Garage``, ``Apartment``,
``House``). All variants share an address, a living area, an optional
asking price, an append-only ledger of accepted bids and a set of
pictures. Each variant estimates its own monthly costs.
"""

from __future__ import annotations

import logging
import random
import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone

from housing_market.config import DEFAULT_INTEREST_RATE, LocationConfig
from housing_market.exceptions import InvalidArgumentError
from housing_market.models.base import Bid, Customer, LatLong, Picture
from housing_market.models.enums import HousingType

logger = logging.getLogger(__name__)

HOUSE_ENERGY_FACTORS = {
    HousingType.DETACHED: 15.0,
    HousingType.BUNGALOW: 15.0,
    HousingType.SEMI_DETACHED: 13.0,
    HousingType.TERRACED: 11.0,
}


@dataclass(eq=False)
class Property(ABC):
    """Advertised real estate property.

    Bids are owned by the property and can only be added through
    :meth:`submit_bid`; :attr:`bids` is a read-only snapshot.
    """

    address: str
    living_area: int  # m2
    price_asked: int | None = None  # None means "price on request"
    pictures: list[Picture] = field(default_factory=list, init=False, repr=False)
    _bids: list[Bid] = field(default_factory=list, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __setattr__(self, name: str, value: object) -> None:
        # Checked on every assignment, including the one in __init__
        if name == "living_area" and value < 0:  # type: ignore[operator]
            raise InvalidArgumentError(f"living_area must not be negative, got {value}")
        if name == "price_asked" and value is not None and value <= 0:  # type: ignore[operator]
            raise InvalidArgumentError(f"price_asked must be positive, got {value}")
        super().__setattr__(name, value)

    @property
    def bids(self) -> tuple[Bid, ...]:
        """Accepted bids in the order they were placed."""
        with self._lock:
            return tuple(self._bids)

    @property
    def highest_bid(self) -> Bid | None:
        """The most recent accepted bid, which is also the highest."""
        with self._lock:
            return self._bids[-1] if self._bids else None

    @property
    def energy_factor(self) -> float:
        return energy_factor(self)

    @abstractmethod
    def monthly_payments(self, interest_rate: float = DEFAULT_INTEREST_RATE) -> int | None:
        """Estimated monthly costs (mortgage, energy, maintenance).

        Returns ``None`` when no asking price is set.
        """

    def get_monthly_payments(self, interest_rate: float = DEFAULT_INTEREST_RATE) -> int | None:
        return self.monthly_payments(interest_rate)

    def submit_bid(
        self,
        customer: Customer,
        price_offered: int,
        *,
        delay_seconds: float = 0.0,
    ) -> Bid | None:
        """Place a bid on this property.

        The bid is recorded only when it beats every accepted bid so far.
        A losing bid is silently ignored.

        Parameters
        ----------
        customer : Customer
            Bidder.
        price_offered : int
            Offered price, must be positive.
        delay_seconds : float
            Pause after processing, accepted or not.

        Returns
        -------
        Bid | None
            The recorded bid, or ``None`` if it did not beat the highest bid.

        Raises
        ------
        InvalidArgumentError
            If ``price_offered`` is not positive.
        """
        if price_offered <= 0:
            raise InvalidArgumentError("argument price_offered should be positive.")

        bid: Bid | None = None
        with self._lock:
            if not self._bids or price_offered > self._bids[-1].price_offered:
                bid = Bid(price_offered, customer, datetime.now(timezone.utc))
                self._bids.append(bid)

        if bid is not None:
            logger.debug("Accepted bid of %d by %s on %s", price_offered, customer.name, self.address)
        else:
            logger.debug("Ignored bid of %d by %s on %s", price_offered, customer.name, self.address)

        if delay_seconds > 0:
            time.sleep(delay_seconds)
        return bid

    do_offer = submit_bid

    def add_picture(self, picture: Picture) -> None:
        self.pictures.append(picture)

    def remove_picture(self, picture: Picture) -> None:
        """Remove a picture; unknown pictures are ignored."""
        if picture in self.pictures:
            self.pictures.remove(picture)

    def get_location(
        self,
        rng: random.Random | None = None,
        reference: LocationConfig | None = None,
    ) -> LatLong:
        """Approximate location, scattered around the reference point.

        Pass a seeded ``random.Random`` for reproducible coordinates.
        """
        rng = rng or random
        reference = reference or LocationConfig()
        jitter = reference.jitter_degrees
        return LatLong(
            reference.reference_latitude + rng.uniform(-jitter, jitter),
            reference.reference_longitude + rng.uniform(-jitter, jitter),
        )

    def describe(self, interest_rate: float = DEFAULT_INTEREST_RATE) -> str:
        """Advertisement text for this property."""
        price = self.price_asked if self.price_asked is not None else "price information on request."
        return (
            f"{type(self).__name__} at {self.address}"
            f" price: {price} living area: {self.living_area}"
            f"\n\testimated monthly costs (mortgage, energy, maintenance): "
            f"{self.monthly_payments(interest_rate)}"
        )

    def __str__(self) -> str:
        return self.describe()


@dataclass(eq=False)
class Garage(Property):
    """Garage or parking box."""

    has_electricity: bool = False

    def monthly_payments(self, interest_rate: float = DEFAULT_INTEREST_RATE) -> int | None:
        if self.price_asked is None:
            return None
        return int(self.price_asked * interest_rate / 12)

    def describe(self, interest_rate: float = DEFAULT_INTEREST_RATE) -> str:
        text = super().describe(interest_rate)
        if self.has_electricity:
            text += "\n\t with electricity!"
        return text


@dataclass(eq=False, kw_only=True)
class Apartment(Property):
    """Apartment in a building run by a homeowners association (HOA)."""

    monthly_hoa_fee: int
    floor: int

    def monthly_payments(self, interest_rate: float = DEFAULT_INTEREST_RATE) -> int | None:
        if self.price_asked is None:
            return None
        mortgage_year = self.price_asked * interest_rate
        hoa_costs_year = self.monthly_hoa_fee * 12
        energy_costs_year = self.living_area * self.energy_factor
        return int((mortgage_year + hoa_costs_year + energy_costs_year) / 12)

    def describe(self, interest_rate: float = DEFAULT_INTEREST_RATE) -> str:
        return super().describe(interest_rate) + f"\n\tlocated at {_ordinal(self.floor)} floor"


@dataclass(eq=False, kw_only=True)
class House(Property):
    """Single-family house on its own plot."""

    housing_type: HousingType
    plot_area: int  # m2

    def monthly_payments(self, interest_rate: float = DEFAULT_INTEREST_RATE) -> int | None:
        if self.price_asked is None:
            return None
        mortgage_year = self.price_asked * interest_rate
        maintenance_year = self.price_asked * 0.01 + self.plot_area * 5
        energy_costs_year = self.living_area * self.energy_factor
        return int((mortgage_year + maintenance_year + energy_costs_year) / 12)

    def describe(self, interest_rate: float = DEFAULT_INTEREST_RATE) -> str:
        return (
            super().describe(interest_rate)
            + f"\n\tthis {self.housing_type.value.lower()} house is situated at {self.plot_area} m2 plot area"
        )


def energy_factor(prop: Property) -> float:
    """Yearly energy cost per m2 of living area for a property."""
    if isinstance(prop, Garage):
        return 0.0
    if isinstance(prop, Apartment):
        return 9.0
    if isinstance(prop, House):
        return HOUSE_ENERGY_FACTORS[prop.housing_type]
    raise TypeError(f"Unknown property variant: {type(prop).__name__}")


def _ordinal(number: int) -> str:
    if number == 1:
        return "first"
    if number == 2:
        return "second"
    if number == 3:
        return "third"
    return f"{number}th"
