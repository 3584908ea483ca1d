from .entry_normalizer import FreightEntryNormalizer

__all__ = ["FreightEntryNormalizer"]
