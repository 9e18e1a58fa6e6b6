"""Synthetic data generators."""

from housing_market.generators.customer import CustomerGenerator
from housing_market.generators.property import PropertyGenerator

__all__ = ["CustomerGenerator", "PropertyGenerator"]
