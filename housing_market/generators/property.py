"""Property listing generator."""

from __future__ import annotations

import random
from typing import Iterator

from housing_market.generators.base import BaseGenerator
from housing_market.models import Apartment, Garage, House, HousingType, Picture, Property


class PropertyGenerator(BaseGenerator):
    """Generate synthetic property listings.

    Roughly one in ten listings has its price on request.
    """

    VARIANTS = ["house", "apartment", "garage"]
    VARIANT_WEIGHTS = [0.45, 0.40, 0.15]

    HOUSING_TYPES = list(HousingType)
    HOUSING_TYPE_WEIGHTS = [0.20, 0.30, 0.40, 0.10]

    PRICE_ON_REQUEST_RATE = 0.10

    def generate(self) -> Property:
        """Generate a single property of a random variant."""
        variant = random.choices(self.VARIANTS, weights=self.VARIANT_WEIGHTS, k=1)[0]
        if variant == "house":
            return self.generate_house()
        if variant == "apartment":
            return self.generate_apartment()
        return self.generate_garage()

    def generate_batch(self, count: int) -> Iterator[Property]:
        """Generate multiple properties.

        Parameters
        ----------
        count : int
            Number of properties to generate.

        Yields
        ------
        Property
            Generated properties.
        """
        for _ in range(count):
            yield self.generate()

    def generate_house(self) -> House:
        living_area = random.randint(70, 250)
        house = House(
            self.fake.street_address(),
            living_area,
            self._price(living_area * random.randint(3000, 5500)),
            housing_type=random.choices(self.HOUSING_TYPES, weights=self.HOUSING_TYPE_WEIGHTS, k=1)[0],
            plot_area=random.randint(living_area, living_area * 4),
        )
        self._add_pictures(house)
        return house

    def generate_apartment(self) -> Apartment:
        living_area = random.randint(35, 140)
        apartment = Apartment(
            self.fake.street_address(),
            living_area,
            self._price(living_area * random.randint(3500, 6000)),
            monthly_hoa_fee=random.randint(50, 300),
            floor=random.randint(0, 12),
        )
        self._add_pictures(apartment)
        return apartment

    def generate_garage(self) -> Garage:
        return Garage(
            self.fake.street_address(),
            random.randint(12, 30),
            self._price(random.randint(15, 45) * 1000),
            has_electricity=random.random() < 0.5,
        )

    def _price(self, estimate: int) -> int | None:
        if random.random() < self.PRICE_ON_REQUEST_RATE:
            return None
        # Asking prices are rounded to thousands
        return max(1000, round(estimate, -3))

    def _add_pictures(self, prop: Property) -> None:
        for _ in range(random.randint(0, 3)):
            prop.add_picture(
                Picture(description=self.fake.sentence(nb_words=4), image_url=self.fake.image_url())
            )
