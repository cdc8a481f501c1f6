"""Reference dataset backed by installed third-party data packages.

- countries: ISO 3166-1 from pycountry
- calling codes: ITU-T E.164 country codes from phonenumbers
- timezones: IANA tz database through zoneinfo, shipped by tzdata
- timezone guess: host configuration through tzlocal
"""

import zoneinfo
from types import MappingProxyType

import phonenumbers
import pycountry
from tzlocal import get_localzone_name

from geo_constants.application.services.base import BaseReferenceDataset
from geo_constants.domain.constants import FALLBACK_TIMEZONE
from geo_constants.domain.exceptions import ReferenceDataUnavailableError
from geo_constants.domain.models.reference import CountryRecord, ReferenceData
from geo_constants.logging_config import get_logger

logger = get_logger(__name__)

CONTINENTS = MappingProxyType(
    {
        "AF": "Africa",
        "AN": "Antarctica",
        "AS": "Asia",
        "EU": "Europe",
        "NA": "North America",
        "OC": "Oceania",
        "SA": "South America",
    }
)


def country_name(country) -> str:
    """Prefer the short common name, e.g. "Tanzania" over "Tanzania, United Republic of"."""
    return getattr(country, "common_name", None) or country.name


def calling_code(alpha_2: str) -> str:
    code = phonenumbers.country_code_for_region(alpha_2)
    return str(code) if code else ""


class PackagedReferenceDataset(BaseReferenceDataset):
    def __init__(self) -> None:
        self._reference: ReferenceData | None = None

    def _load_countries(self) -> dict[str, CountryRecord]:
        return {
            country.alpha_2: CountryRecord(
                name=country_name(country), phone=calling_code(country.alpha_2)
            )
            for country in pycountry.countries
        }

    def load(self) -> ReferenceData:
        if self._reference is not None:
            return self._reference

        try:
            countries = self._load_countries()
            timezones = tuple(sorted(zoneinfo.available_timezones()))
        except (OSError, LookupError, ValueError) as e:
            raise ReferenceDataUnavailableError(
                f"Failed to load reference dataset: {e}"
            ) from e

        logger.debug(
            f"Loaded {len(countries)} countries and {len(timezones)} timezones"
        )
        self._reference = ReferenceData(
            continents=CONTINENTS,
            countries=MappingProxyType(countries),
            timezones=timezones,
        )
        return self._reference

    def guess_timezone(self) -> str:
        try:
            name = get_localzone_name()
        except (LookupError, ValueError, OSError) as e:
            logger.warning(f"Could not guess host timezone: {e}")
            name = None
        return name or FALLBACK_TIMEZONE
