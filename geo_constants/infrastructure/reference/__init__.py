from .dataset import CONTINENTS, PackagedReferenceDataset

__all__ = ["CONTINENTS", "PackagedReferenceDataset"]
