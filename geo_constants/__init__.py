"""Runtime constants: locales, timezones, countries and map feature vocabularies."""

from geo_constants.adapter import ConstantsProvider, load_constants
from geo_constants.domain.models.constants import Constants

__all__ = ["Constants", "ConstantsProvider", "load_constants"]
