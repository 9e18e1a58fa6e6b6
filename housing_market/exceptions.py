"""Custom exception hierarchy for housing-market."""


class HousingMarketError(Exception):
    """Base exception for all housing-market errors."""


class InvalidArgumentError(HousingMarketError, ValueError):
    """Raised when an operation receives an out-of-range argument."""


class ConfigurationError(HousingMarketError):
    """Raised when configuration is invalid or missing."""
