# geo_constants/domain/models/__init__.py
from .constants import Constants
from .reference import CountryRecord, ReferenceData

__all__ = [
    "Constants",
    "CountryRecord",
    "ReferenceData",
]
