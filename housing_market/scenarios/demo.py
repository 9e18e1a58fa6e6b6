"""Demo scenario with a small, fixed catalog."""

import logging

from housing_market.config import HousingMarketConfig
from housing_market.models import Apartment, Customer, Garage, House, HousingType, Property
from housing_market.store import HousingMarket

logger = logging.getLogger(__name__)


class DemoScenario:
    """Build the demo catalog and run the demo bids and searches.

    This scenario creates:
    - Four houses, two apartments and three garages (one without a price)
    - Two customers, Henk and Anne
    - Three bids on "Bosrijk 10", the last of which is too low
    """

    def __init__(self, config: HousingMarketConfig | None = None) -> None:
        self.config = config or HousingMarketConfig()
        self.market = HousingMarket(self.config.payment)

        self.henk = Customer("Henk", "Henk@breda.nl")
        self.anne = Customer("Anne", "Anne@avans.nl")

        self.house1 = House("Gastakker 12", 130, 380000, housing_type=HousingType.TERRACED, plot_area=210)
        self.house2 = House("Singel 123", 120, 650000, housing_type=HousingType.TERRACED, plot_area=180)
        self.house3 = House("Hogeschoollaan 1", 40000, None, housing_type=HousingType.DETACHED, plot_area=25000)
        self.house4 = House("Bosrijk 10", 110, 510000, housing_type=HousingType.BUNGALOW, plot_area=380)

        self.apartment1 = Apartment("Teteringsdijks 110", 65, 260000, monthly_hoa_fee=99, floor=3)
        self.apartment2 = Apartment("Tuinzigtlaan 117", 90, 290000, monthly_hoa_fee=130, floor=5)

        self.garage1 = Garage("Hofjes 11", 19, 21000, True)
        self.garage2 = Garage("Hofjes 13", 19, 19000)
        self.garage3 = Garage("Hofjes 13", 19, None, has_electricity=True)

    @property
    def all_properties(self) -> list[Property]:
        return [
            self.house1,
            self.house2,
            self.house3,
            self.house4,
            self.apartment1,
            self.apartment2,
            self.garage1,
            self.garage2,
            self.garage3,
        ]

    def generate(self) -> HousingMarket:
        """Advertise the demo catalog and place the demo bids.

        Returns
        -------
        HousingMarket
            Catalog containing all demo properties.
        """
        logger.info("Starting demo scenario")
        self.market.advertise(self.all_properties)

        delay = self.config.bidding.delay_seconds
        self.house4.submit_bid(self.henk, 500000, delay_seconds=delay)
        self.house4.submit_bid(self.anne, 510000, delay_seconds=delay)
        self.house4.submit_bid(self.henk, 505000, delay_seconds=delay)

        logger.info(
            "Demo scenario complete: %d properties, %d bids on %s",
            len(self.market),
            len(self.house4.bids),
            self.house4.address,
        )
        return self.market

    def affordable(self) -> list[Property]:
        """Properties with an asking price of at most 400.000."""
        return self.market.search(max_price=400000)

    def garages_with_electricity(self) -> list[Property]:
        return self.market.search(lambda p: isinstance(p, Garage) and p.has_electricity)
