"""Pytest configuration and fixtures."""

import pytest

from housing_market.models import Apartment, Customer, Garage, House, HousingType
from housing_market.scenarios import DemoScenario
from housing_market.store import HousingMarket


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def henk() -> Customer:
    return Customer("Henk", "Henk@breda.nl")


@pytest.fixture
def anne() -> Customer:
    return Customer("Anne", "Anne@avans.nl")


@pytest.fixture
def terraced_house() -> House:
    """Terraced house without bids."""
    return House("", 100, 300000, housing_type=HousingType.TERRACED, plot_area=200)


@pytest.fixture
def apartment() -> Apartment:
    return Apartment("Teteringsdijks 110", 65, 260000, monthly_hoa_fee=99, floor=3)


@pytest.fixture
def garage() -> Garage:
    return Garage("Hofjes 11", 19, 21000, True)


@pytest.fixture
def demo() -> DemoScenario:
    """Demo scenario with its catalog advertised and bids placed."""
    scenario = DemoScenario()
    scenario.generate()
    return scenario


@pytest.fixture
def market(demo: DemoScenario) -> HousingMarket:
    return demo.market
