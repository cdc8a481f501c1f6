from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class Constants:
    """
    Immutable set of derived runtime constants.

    Built once at startup by ConstantTableBuilder and handed to consumers.
    Every tuple field is sorted ascending and free of duplicates.
    """

    # locales
    default_locale: str
    locales: tuple[str, ...]

    # timezones
    default_timezone: str
    timezones: tuple[str, ...]

    # date and time formats
    default_date_format: str
    default_time_format: str
    default_datetime_format: str

    # continents and countries
    default_continent_name: str
    continent_names: tuple[str, ...]
    default_country_name: str
    country_names: tuple[str, ...]
    default_country_code: str
    country_codes: tuple[str, ...]
    default_calling_code: str
    calling_codes: tuple[str, ...]
    default_city_name: str

    # map features
    map_feature_default_nature: str
    map_feature_default_family: str
    map_feature_default_type: str
    map_feature_natures: tuple[str, ...]
    map_feature_families: tuple[str, ...]
    map_feature_places: tuple[str, ...]
    map_feature_types: tuple[str, ...]

    # disaster management
    default_disaster_phase: str
    disaster_phases: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        """Converts the constants to plain strings and lists, keyed by field name."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            result[f.name] = list(value) if isinstance(value, tuple) else value
        return result

    def lists(self) -> dict[str, tuple[str, ...]]:
        """Returns only the list-valued constants."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if isinstance(getattr(self, f.name), tuple)
        }
