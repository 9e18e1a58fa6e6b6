"""Console output of advertisements."""

import json
import random
from typing import Iterable, TextIO

from housing_market.config import DEFAULT_INTEREST_RATE, LocationConfig
from housing_market.models import Property
from housing_market.sinks.serialization import property_to_dict

LINE_WIDTH = 80


def show_advertisements(
    selection: Iterable[Property],
    include_bids: bool = False,
    description: str = "",
    *,
    interest_rate: float = DEFAULT_INTEREST_RATE,
    file: TextIO | None = None,
) -> None:
    """Print a selection of properties as an advertisement listing.

    Parameters
    ----------
    selection : Iterable[Property]
        Properties to show, in display order.
    include_bids : bool
        Also list the accepted bids of every property.
    description : str
        Caption for the listing.
    interest_rate : float
        Rate used for the monthly cost estimate.
    file : TextIO | None
        Target stream (stdout when ``None``).
    """
    print(f"All advertisements ({description}):", file=file)
    print("=" * LINE_WIDTH, file=file)
    for prop in selection:
        print(f"\t{prop.describe(interest_rate)}", file=file)
        if include_bids:
            print("\t\t" + "\n\t\t".join(str(bid) for bid in prop.bids), file=file)
        print("-" * LINE_WIDTH, file=file)
    print("#" * LINE_WIDTH, file=file)
    print(file=file)


class ConsoleSink:
    """Write advertisement listings to the console."""

    def __init__(
        self,
        interest_rate: float = DEFAULT_INTEREST_RATE,
        pretty: bool = True,
        file: TextIO | None = None,
        location: LocationConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize console sink.

        Parameters
        ----------
        interest_rate : float
            Rate used for monthly cost estimates.
        pretty : bool
            Pretty-print JSON output.
        file : TextIO | None
            Target stream (stdout when ``None``).
        location : LocationConfig | None
            Reference point for locations in JSON output.
        rng : random.Random | None
            Random source for locations; seed it for reproducible output.
        """
        self.interest_rate = interest_rate
        self.pretty = pretty
        self.file = file
        self.location = location or LocationConfig()
        self.rng = rng
        self._counts: dict[str, int] = {}

    def write_advertisements(
        self,
        selection: list[Property],
        include_bids: bool = False,
        description: str = "",
    ) -> None:
        """Write a listing in advertisement text format."""
        show_advertisements(
            selection,
            include_bids,
            description,
            interest_rate=self.interest_rate,
            file=self.file,
        )
        self._count(description, selection)

    def write_json(self, selection: list[Property], description: str = "") -> None:
        """Write a listing as a JSON document."""
        data = {
            "description": description,
            "properties": [property_to_dict(p, self.interest_rate, self.location, self.rng) for p in selection],
        }
        if self.pretty:
            print(json.dumps(data, indent=2, ensure_ascii=False), file=self.file)
        else:
            print(json.dumps(data, ensure_ascii=False), file=self.file)
        self._count(description, selection)

    def close(self) -> None:
        """Print summary."""
        print(f"\n{'='*60}", file=self.file)
        print("Console Sink Summary", file=self.file)
        print("=" * 60, file=self.file)
        for description, count in self._counts.items():
            print(f"  {description}: {count} properties", file=self.file)

    def _count(self, description: str, selection: list[Property]) -> None:
        self._counts[description] = self._counts.get(description, 0) + len(selection)
