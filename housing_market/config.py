"""Configuration management for housing-market."""

from dataclasses import dataclass, field

from housing_market.exceptions import ConfigurationError

DEFAULT_INTEREST_RATE = 0.04


@dataclass
class PaymentConfig:
    """Mortgage assumptions used for monthly payment estimates."""

    interest_rate: float = DEFAULT_INTEREST_RATE

    def validate(self) -> None:
        """Raise ``ConfigurationError`` for a negative interest rate."""
        if self.interest_rate < 0:
            raise ConfigurationError("interest rate must not be negative")


@dataclass
class BiddingConfig:
    """Bid submission settings.

    ``delay_seconds`` simulates the latency of a bid desk; every bid waits
    this long after being processed, whether it was accepted or not.
    """

    delay_seconds: float = 0.0


@dataclass
class LocationConfig:
    """Reference point that property locations are scattered around."""

    reference_latitude: float = 51.58494229691791
    reference_longitude: float = 4.797559120743779
    jitter_degrees: float = 0.1


@dataclass
class HousingMarketConfig:
    """Main configuration for housing-market."""

    payment: PaymentConfig = field(default_factory=PaymentConfig)
    bidding: BiddingConfig = field(default_factory=BiddingConfig)
    location: LocationConfig = field(default_factory=LocationConfig)
    seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "HousingMarketConfig":
        """Create config from environment variables."""
        import os

        defaults = LocationConfig()
        try:
            payment = PaymentConfig(
                interest_rate=float(os.getenv("INTEREST_RATE", str(DEFAULT_INTEREST_RATE))),
            )
            bidding = BiddingConfig(
                delay_seconds=float(os.getenv("BID_DELAY_SECONDS", "0")),
            )
            location = LocationConfig(
                reference_latitude=float(
                    os.getenv("REFERENCE_LATITUDE", str(defaults.reference_latitude))
                ),
                reference_longitude=float(
                    os.getenv("REFERENCE_LONGITUDE", str(defaults.reference_longitude))
                ),
                jitter_degrees=float(os.getenv("LOCATION_JITTER", str(defaults.jitter_degrees))),
            )
            seed = int(os.getenv("SEED")) if os.getenv("SEED") else None
        except ValueError as exc:
            raise ConfigurationError(f"Invalid numeric setting: {exc}") from exc

        payment.validate()
        if bidding.delay_seconds < 0:
            raise ConfigurationError("BID_DELAY_SECONDS must not be negative")
        if location.jitter_degrees < 0:
            raise ConfigurationError("LOCATION_JITTER must not be negative")

        return cls(
            payment=payment,
            bidding=bidding,
            location=location,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
