"""In-memory catalog of advertised properties."""

from __future__ import annotations

import logging
import sys
import threading
from typing import Callable, Iterable, Iterator

from housing_market.config import PaymentConfig
from housing_market.models import Property

logger = logging.getLogger(__name__)

MAX_PRICE = sys.maxsize

PropertyQuery = Callable[[Property], bool]


class HousingMarket:
    """Catalog of advertised properties.

    Properties are shared, not owned: callers keep their own references
    (for example to place bids) while the catalog only lists them.
    """

    def __init__(self, payment: PaymentConfig | None = None) -> None:
        self.payment = payment or PaymentConfig()
        self._properties: list[Property] = []
        self._lock = threading.RLock()

    def advertise(self, properties: Property | Iterable[Property]) -> int:
        """Add one property or a batch of properties to the catalog.

        Parameters
        ----------
        properties : Property | Iterable[Property]
            What to advertise. Duplicates are kept.

        Returns
        -------
        int
            Number of properties added.
        """
        batch = [properties] if isinstance(properties, Property) else list(properties)
        with self._lock:
            self._properties.extend(batch)
            total = len(self._properties)
        logger.debug("Advertised %d properties (%d in catalog)", len(batch), total)
        return len(batch)

    def search(
        self,
        query: PropertyQuery | None = None,
        *,
        min_price: int | None = None,
        max_price: int | None = None,
    ) -> list[Property]:
        """Find advertised properties, in the order they were advertised.

        Without ``query`` the search is by asking price: properties priced in
        ``[min_price, max_price]`` match, and properties without a price never
        do. With ``query`` only the predicate applies, unless a price bound is
        passed as well.

        Parameters
        ----------
        query : Callable[[Property], bool] | None
            Predicate a property has to satisfy.
        min_price : int | None
            Lowest asking price, inclusive (default 0).
        max_price : int | None
            Highest asking price, inclusive (default ``MAX_PRICE``).

        Returns
        -------
        list[Property]
            Matching properties, possibly empty.
        """
        with self._lock:
            snapshot = list(self._properties)

        if query is None or min_price is not None or max_price is not None:
            low = 0 if min_price is None else min_price
            high = MAX_PRICE if max_price is None else max_price
            snapshot = [p for p in snapshot if p.price_asked is not None and low <= p.price_asked <= high]

        if query is not None:
            snapshot = [p for p in snapshot if query(p)]
        return snapshot

    def monthly_payments(self, prop: Property) -> int | None:
        """Monthly costs of a property at the catalog's interest rate."""
        return prop.monthly_payments(self.payment.interest_rate)

    @property
    def properties(self) -> list[Property]:
        with self._lock:
            return list(self._properties)

    def summary(self) -> dict[str, int]:
        """Return counts of advertised properties per variant."""
        counts: dict[str, int] = {}
        for prop in self.properties:
            name = type(prop).__name__
            counts[name] = counts.get(name, 0) + 1
        return counts

    def __len__(self) -> int:
        with self._lock:
            return len(self._properties)

    def __iter__(self) -> Iterator[Property]:
        return iter(self.properties)
