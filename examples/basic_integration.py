"""
Basic Integration Example
==========================

This example demonstrates how to use the geo_constants package in your own
applications (e.g., web services, form validators, data pipelines).

It shows:
- Building the constants once at startup from the environment
- Passing them to consumers instead of reading globals
- Using a custom config reader (hardcoded overrides, no environment)
- Error handling patterns

Requirements:
- Python 3.10+
"""

from collections.abc import Sequence

from environs import Env

from geo_constants import Constants, ConstantsProvider
from geo_constants.application.services.base import BaseConfigReader
from geo_constants.domain.exceptions import ReferenceDataUnavailableError
from geo_constants.infrastructure.reference.dataset import PackagedReferenceDataset
from geo_constants.logging_config import setup_logging


class StaticConfigReader(BaseConfigReader):
    """
    Config reader backed by a dict - alternative to environment variables.
    In production, load these from your own config system.
    """

    def __init__(self, values: dict[str, str]):
        self.values = values

    def get_string(self, key: str, default: str = "") -> str:
        return self.values.get(key, default)

    def get_strings(self, key: str, default: Sequence[str] = ()) -> list[str]:
        raw = self.values.get(key, "")
        return [value.strip() for value in raw.split(",") if value.strip()] or list(
            default
        )


class PhoneNumberForm:
    """A consumer that receives the constants by reference."""

    def __init__(self, constants: Constants):
        self.constants = constants

    def is_valid_calling_code(self, code: str) -> bool:
        return code.lstrip("+") in self.constants.calling_codes

    def default_prefix(self) -> str:
        return f"+{self.constants.default_calling_code}"


def main() -> None:
    env = Env()
    env.read_env()
    setup_logging(env)

    try:
        constants = ConstantsProvider.create_from_env(env).constants
    except ReferenceDataUnavailableError as e:
        print(f"Cannot start without reference data: {e}")
        raise SystemExit(1)

    form = PhoneNumberForm(constants)
    print(f"Default prefix: {form.default_prefix()}")
    print(f"+254 valid: {form.is_valid_calling_code('+254')}")
    print(f"Locales: {', '.join(constants.locales)}")
    print(f"Default timezone: {constants.default_timezone}")
    print(f"Map feature types: {', '.join(constants.map_feature_types)}")

    # Same pipeline, overrides from a dict instead of the environment
    kenya = ConstantsProvider(
        StaticConfigReader(
            {
                "DEFAULT_COUNTRY_CODE": "KE",
                "DEFAULT_CALLING_CODE": "254",
                "DEFAULT_CITY_NAME": "Nairobi",
                "DEFAULT_TIMEZONE": "Africa/Nairobi",
                "LOCALES": "en,sw",
            }
        ),
        PackagedReferenceDataset(),
    ).constants
    print(f"Kenya defaults: {kenya.default_city_name}, {kenya.default_timezone}")


if __name__ == "__main__":
    main()
