"""Shared serialization utilities for sinks."""

import random
from dataclasses import fields, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from housing_market.config import DEFAULT_INTEREST_RATE, LocationConfig
from housing_market.models import Bid, Property


def property_to_dict(
    prop: Property,
    interest_rate: float = DEFAULT_INTEREST_RATE,
    location: LocationConfig | None = None,
    rng: random.Random | None = None,
) -> dict:
    """Convert a property, its pictures and its bids to a dictionary.

    Variant-specific fields are included; private fields are not. The
    ``location`` entry is drawn around ``location``'s reference point.
    """
    result: dict[str, Any] = {"kind": type(prop).__name__}
    for f in fields(prop):
        if f.name.startswith("_") or f.name == "pictures":
            continue
        result[f.name] = serialize_value(getattr(prop, f.name))
    result["monthly_payments"] = prop.monthly_payments(interest_rate)
    result["location"] = serialize_value(prop.get_location(rng, location))
    result["pictures"] = [serialize_value(p) for p in prop.pictures]
    result["bids"] = [bid_to_dict(b) for b in prop.bids]
    return result


def bid_to_dict(bid: Bid) -> dict:
    """Convert a bid to a dictionary."""
    return {
        "price_offered": bid.price_offered,
        "customer": serialize_value(bid.customer),
        "time_of_bid": serialize_value(bid.time_of_bid),
    }


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif is_dataclass(value) and not isinstance(value, type):
        return {f.name: serialize_value(getattr(value, f.name)) for f in fields(value)}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
