"""Customer generator."""

from __future__ import annotations

from typing import Iterator

from housing_market.generators.base import BaseGenerator
from housing_market.models import Customer


class CustomerGenerator(BaseGenerator):
    """Generate synthetic bidders."""

    def generate(self) -> Customer:
        """Generate a single customer."""
        return Customer(name=self.fake.name(), email=self.fake.email())

    def generate_batch(self, count: int) -> Iterator[Customer]:
        """Generate multiple customers.

        Parameters
        ----------
        count : int
            Number of customers to generate.

        Yields
        ------
        Customer
            Generated customers.
        """
        for _ in range(count):
            yield self.generate()
