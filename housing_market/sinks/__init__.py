"""Output sinks for advertisement listings."""

from housing_market.sinks.console import ConsoleSink, show_advertisements
from housing_market.sinks.serialization import bid_to_dict, property_to_dict

__all__ = ["ConsoleSink", "bid_to_dict", "property_to_dict", "show_advertisements"]
