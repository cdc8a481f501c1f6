# geo_constants/application/services/__init__.py
from .base import BaseConfigReader, BaseReferenceDataset
from .list_builder import OrderedUniqueListBuilder
from .resolver import ScalarDefaultResolver

__all__ = [
    "BaseConfigReader",
    "BaseReferenceDataset",
    "OrderedUniqueListBuilder",
    "ScalarDefaultResolver",
]
