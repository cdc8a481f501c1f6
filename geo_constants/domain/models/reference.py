from collections.abc import Mapping
from dataclasses import dataclass
from typing import NamedTuple


class CountryRecord(NamedTuple):
    name: str
    phone: str  # comma-joined calling codes, e.g. "1,1809"


@dataclass(frozen=True, slots=True)
class ReferenceData:
    """
    Read-only tables supplied by a reference dataset.

    continents: continent code -> continent name
    countries: ISO 3166-1 alpha-2 code -> CountryRecord
    timezones: IANA timezone names
    """

    continents: Mapping[str, str]
    countries: Mapping[str, CountryRecord]
    timezones: tuple[str, ...]
