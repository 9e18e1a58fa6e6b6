"""Tests for property models, payments and bidding."""

import dataclasses
import random
import threading
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest

from housing_market.config import LocationConfig
from housing_market.exceptions import InvalidArgumentError
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


class TestValueTypes:
    """Tests for Customer, Bid, Picture and LatLong."""

    def test_customer_equality_by_fields(self) -> None:
        assert Customer("Henk", "Henk@breda.nl") == Customer("Henk", "Henk@breda.nl")
        assert Customer("Henk", "Henk@breda.nl") != Customer("Henk", "henk@avans.nl")

    def test_customer_is_immutable(self, henk: Customer) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            henk.name = "Anne"  # type: ignore[misc]

    def test_bid_is_immutable(self, terraced_house: House, henk: Customer) -> None:
        bid = terraced_house.submit_bid(henk, 500000)

        with pytest.raises(dataclasses.FrozenInstanceError):
            bid.price_offered = 1  # type: ignore[misc,union-attr]

    def test_latlong(self) -> None:
        point = LatLong(51.5, 4.8)
        assert point.latitude == 51.5
        assert point.longitude == 4.8


class TestPropertyCreation:
    """Tests for property construction."""

    def test_property_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Property("Nowhere 1", 10)  # type: ignore[abstract]

    def test_house_fields(self) -> None:
        house = House("Bosrijk 10", 110, 510000, housing_type=HousingType.BUNGALOW, plot_area=380)

        assert house.address == "Bosrijk 10"
        assert house.living_area == 110
        assert house.price_asked == 510000
        assert house.housing_type == HousingType.BUNGALOW
        assert house.plot_area == 380
        assert house.bids == ()
        assert house.pictures == []

    def test_garage_defaults(self) -> None:
        garage = Garage("Hofjes 13", 19)

        assert garage.price_asked is None
        assert garage.has_electricity is False

    def test_apartment_variant_fields_are_keyword_only(self) -> None:
        with pytest.raises(TypeError):
            Apartment("Tuinzigtlaan 117", 90, 290000, 130, 5)  # type: ignore[misc]

    def test_negative_living_area_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Garage("Hofjes 13", -1)

    @pytest.mark.parametrize("price", [0, -100])
    def test_non_positive_price_rejected(self, price: int) -> None:
        with pytest.raises(InvalidArgumentError):
            Garage("Hofjes 13", 19, price)

    def test_negative_price_assignment_rejected(self) -> None:
        garage = Garage("Hofjes 13", 19, 19000)

        with pytest.raises(InvalidArgumentError):
            garage.price_asked = -5

        assert garage.price_asked == 19000

    def test_price_can_be_changed_or_withdrawn(self) -> None:
        garage = Garage("Hofjes 13", 19, 19000)

        garage.price_asked = 18000
        assert garage.price_asked == 18000
        garage.price_asked = None
        assert garage.monthly_payments() is None

    def test_negative_living_area_assignment_rejected(self) -> None:
        garage = Garage("Hofjes 13", 19)

        with pytest.raises(InvalidArgumentError):
            garage.living_area = -1

    def test_equality_is_identity(self) -> None:
        first = Garage("Hofjes 13", 19, 19000)
        second = Garage("Hofjes 13", 19, 19000)

        assert first == first
        assert first != second


class TestEnergyFactor:
    """Tests for energy factors per variant."""

    @pytest.mark.parametrize(
        "housing_type, expected",
        [
            (HousingType.TERRACED, 11.0),
            (HousingType.SEMI_DETACHED, 13.0),
            (HousingType.DETACHED, 15.0),
            (HousingType.BUNGALOW, 15.0),
        ],
    )
    def test_house(self, housing_type: HousingType, expected: float) -> None:
        house = House("", 0, None, housing_type=housing_type, plot_area=0)

        assert energy_factor(house) == expected
        assert house.energy_factor == expected

    def test_apartment(self, apartment: Apartment) -> None:
        assert energy_factor(apartment) == 9.0

    def test_garage(self, garage: Garage) -> None:
        assert energy_factor(garage) == 0.0


class TestMonthlyPayments:
    """Tests for monthly cost estimates."""

    def test_terraced_house(self, terraced_house: House) -> None:
        # (0.04 * 300000 + 0.01 * 300000 + 11 * 100 + 5 * 200) / 12 = 17100 / 12
        assert terraced_house.monthly_payments() == 17100 // 12
        assert terraced_house.get_monthly_payments() == 1425

    def test_apartment(self, apartment: Apartment) -> None:
        # (0.04 * 260000 + 99 * 12 + 65 * 9) / 12 = 12173 / 12
        assert apartment.monthly_payments() == 1014

    def test_garage(self, garage: Garage) -> None:
        assert garage.monthly_payments() == 70

    def test_truncates_toward_zero(self) -> None:
        assert Garage("Hofjes 13", 19, 19000).monthly_payments() == 63

    @pytest.mark.parametrize(
        "prop",
        [
            Garage("Hofjes 13", 19, None, True),
            Apartment("a", 50, None, monthly_hoa_fee=100, floor=1),
            House("h", 40000, None, housing_type=HousingType.DETACHED, plot_area=25000),
        ],
    )
    def test_price_on_request(self, prop: Property) -> None:
        assert prop.monthly_payments() is None

    def test_explicit_interest_rate(self, garage: Garage) -> None:
        assert garage.monthly_payments(interest_rate=0.06) == 105
        assert garage.monthly_payments(interest_rate=0.0) == 0


class TestSubmitBid:
    """Tests for the bid acceptance rule."""

    def test_lower_bid_is_not_accepted(self, terraced_house: House, henk: Customer, anne: Customer) -> None:
        terraced_house.submit_bid(henk, 500000)
        terraced_house.submit_bid(anne, 510000)
        terraced_house.submit_bid(henk, 505000)

        bids = terraced_house.bids

        assert len(bids) == 2
        assert [b.price_offered for b in bids] == [500000, 510000]
        assert [b.customer for b in bids] == [henk, anne]

    def test_returns_recorded_bid(self, terraced_house: House, henk: Customer) -> None:
        bid = terraced_house.submit_bid(henk, 1)

        assert isinstance(bid, Bid)
        assert bid.price_offered == 1
        assert bid.customer == henk
        assert terraced_house.highest_bid == bid

    def test_ignored_bid_returns_none(self, terraced_house: House, henk: Customer) -> None:
        terraced_house.submit_bid(henk, 500000)

        assert terraced_house.submit_bid(henk, 500000) is None
        assert terraced_house.submit_bid(henk, 400000) is None
        assert len(terraced_house.bids) == 1

    @pytest.mark.parametrize("price", [-1, 0])
    def test_non_positive_bid_raises(self, terraced_house: House, henk: Customer, price: int) -> None:
        with pytest.raises(InvalidArgumentError, match="should be positive"):
            terraced_house.submit_bid(henk, price)

        assert terraced_house.bids == ()

    def test_non_positive_bid_is_value_error(self, terraced_house: House, henk: Customer) -> None:
        with pytest.raises(ValueError):
            terraced_house.do_offer(henk, -1)

    def test_bid_does_not_change_asking_price(self, terraced_house: House, henk: Customer) -> None:
        terraced_house.submit_bid(henk, 999999)

        assert terraced_house.price_asked == 300000

    def test_bid_accepted_without_asking_price(self, henk: Customer) -> None:
        house = House("Hogeschoollaan 1", 40000, None, housing_type=HousingType.DETACHED, plot_area=25000)

        assert house.submit_bid(henk, 100) is not None

    def test_timestamps_follow_price_order(self, terraced_house: House, henk: Customer) -> None:
        for price in (100, 200, 300):
            terraced_house.submit_bid(henk, price)

        times = [b.time_of_bid for b in terraced_house.bids]
        assert times == sorted(times)
        assert all(t.tzinfo is not None for t in times)

    def test_bids_view_is_read_only(self, terraced_house: House, henk: Customer) -> None:
        terraced_house.submit_bid(henk, 100)
        view = terraced_house.bids

        assert isinstance(view, tuple)
        with pytest.raises(AttributeError):
            view.append(Bid(50, henk, view[0].time_of_bid))  # type: ignore[attr-defined]
        assert len(terraced_house.bids) == 1

    def test_delay_applies_to_accepted_and_ignored_bids(self, terraced_house: House, henk: Customer) -> None:
        with patch("housing_market.models.property.time.sleep") as mock_sleep:
            terraced_house.submit_bid(henk, 500000, delay_seconds=0.1)
            terraced_house.submit_bid(henk, 400000, delay_seconds=0.1)

        assert mock_sleep.call_count == 2
        mock_sleep.assert_called_with(0.1)

    def test_no_delay_by_default(self, terraced_house: House, henk: Customer) -> None:
        with patch("housing_market.models.property.time.sleep") as mock_sleep:
            terraced_house.submit_bid(henk, 500000)

        mock_sleep.assert_not_called()

    def test_concurrent_bids_stay_increasing(self, terraced_house: House, henk: Customer) -> None:
        prices = list(range(1, 201))
        random.Random(7).shuffle(prices)
        start = threading.Barrier(8)

        def place(chunk: list[int]) -> None:
            start.wait()
            for price in chunk:
                terraced_house.submit_bid(henk, price)

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(place, [prices[i::8] for i in range(8)]))

        offered = [b.price_offered for b in terraced_house.bids]
        assert offered == sorted(set(offered))
        assert offered[-1] == 200


class TestPictures:
    """Tests for picture management."""

    def test_add_and_remove(self, garage: Garage) -> None:
        front = Picture("Front", "https://example.com/front.jpg")
        inside = Picture("Inside", "https://example.com/inside.jpg")

        garage.add_picture(front)
        garage.add_picture(inside)
        garage.remove_picture(front)

        assert garage.pictures == [inside]

    def test_remove_unknown_picture(self, garage: Garage) -> None:
        garage.remove_picture(Picture("Missing", "https://example.com/missing.jpg"))

        assert garage.pictures == []


class TestLocation:
    """Tests for approximate property locations."""

    def test_within_reference_area(self, garage: Garage) -> None:
        for _ in range(50):
            location = garage.get_location()
            assert abs(location.latitude - 51.58494229691791) <= 0.1 + 1e-9
            assert abs(location.longitude - 4.797559120743779) <= 0.1 + 1e-9

    def test_seeded_rng_is_reproducible(self, garage: Garage, seed: int) -> None:
        first = garage.get_location(random.Random(seed))
        second = garage.get_location(random.Random(seed))

        assert first == second

    def test_custom_reference(self, garage: Garage) -> None:
        reference = LocationConfig(reference_latitude=52.0, reference_longitude=5.0, jitter_degrees=0.0)

        assert garage.get_location(reference=reference) == LatLong(52.0, 5.0)


class TestDescribe:
    """Tests for advertisement text."""

    def test_garage_with_electricity(self, garage: Garage) -> None:
        assert str(garage) == (
            "Garage at Hofjes 11 price: 21000 living area: 19"
            "\n\testimated monthly costs (mortgage, energy, maintenance): 70"
            "\n\t with electricity!"
        )

    def test_garage_price_on_request(self) -> None:
        garage = Garage("Hofjes 13", 19)

        assert str(garage) == (
            "Garage at Hofjes 13 price: price information on request. living area: 19"
            "\n\testimated monthly costs (mortgage, energy, maintenance): None"
        )

    def test_apartment_floor(self, apartment: Apartment) -> None:
        assert str(apartment).endswith("\n\tlocated at third floor")

    @pytest.mark.parametrize("floor, text", [(1, "first"), (2, "second"), (5, "5th"), (0, "0th")])
    def test_apartment_floor_ordinals(self, floor: int, text: str) -> None:
        apartment = Apartment("a", 50, 200000, monthly_hoa_fee=100, floor=floor)

        assert str(apartment).endswith(f"located at {text} floor")

    def test_house(self) -> None:
        house = House("Gastakker 12", 130, 380000, housing_type=HousingType.SEMI_DETACHED, plot_area=210)

        assert str(house).startswith("House at Gastakker 12 price: 380000 living area: 130")
        assert str(house).endswith("\n\tthis semi_detached house is situated at 210 m2 plot area")

    def test_describe_uses_interest_rate(self, garage: Garage) -> None:
        assert "maintenance): 105" in garage.describe(interest_rate=0.06)
