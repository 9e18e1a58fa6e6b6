"""Command line entry point for the housing market demo."""

import argparse
import logging
import random
import sys

from housing_market.config import HousingMarketConfig
from housing_market.exceptions import ConfigurationError
from housing_market.generators import PropertyGenerator
from housing_market.logging import setup_logging
from housing_market.scenarios import DemoScenario
from housing_market.sinks import ConsoleSink

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="housing-market",
        description="Advertise, bid on and search a demo housing catalog.",
    )
    parser.add_argument(
        "--include-bids",
        action="store_true",
        help="List accepted bids below every property",
    )
    parser.add_argument(
        "--generate",
        type=int,
        default=0,
        metavar="N",
        help="Advertise N additional synthetic properties (default: 0)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for synthetic data")
    parser.add_argument("--interest-rate", type=float, default=None, help="Yearly mortgage interest rate")
    parser.add_argument("--json", action="store_true", help="Print listings as JSON")
    parser.add_argument("--log-level", default=None, help="Log level (default: LOG_LEVEL or INFO)")
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default="standard",
        help="Log format (default: standard)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        config = HousingMarketConfig.from_env()
        if args.seed is not None:
            config.seed = args.seed
        if args.interest_rate is not None:
            config.payment.interest_rate = args.interest_rate
            config.payment.validate()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    setup_logging(args.log_level or config.log_level, args.log_format)

    scenario = DemoScenario(config)
    market = scenario.generate()
    if args.generate > 0:
        generator = PropertyGenerator(seed=config.seed)
        added = market.advertise(generator.generate_batch(args.generate))
        logger.info("Advertised %d synthetic properties", added)

    sink = ConsoleSink(
        interest_rate=config.payment.interest_rate,
        location=config.location,
        rng=random.Random(config.seed),
    )
    searches = [
        ("houses with max price 400.000", scenario.affordable()),
        ("garages with electricity", scenario.garages_with_electricity()),
    ]
    for description, found in searches:
        if args.json:
            sink.write_json(found, description)
        else:
            sink.write_advertisements(found, include_bids=args.include_bids, description=description)
    sink.close()
    return 0
