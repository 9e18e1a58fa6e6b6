"""Ready-made housing market scenarios."""

from housing_market.scenarios.demo import DemoScenario

__all__ = ["DemoScenario"]
