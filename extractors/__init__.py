"""
Extractors Package
==================

Field extraction from PDF text (DU-E declarations and cargo manifests).

Classes:
    - RegexFieldRule: Ordered regex fallbacks for a single field
    - DueFieldExtractor: DU-E number, exporter CNPJ/name, net weight
    - CargoManifestExtractor: Vessel, port and per-BL entries
"""

from .due_extractor import DueFieldExtractor
from .field_rule import RegexFieldRule
from .manifest_extractor import CargoManifestExtractor, group_manifest_by_shipper

__all__ = [
    "RegexFieldRule",
    "DueFieldExtractor",
    "CargoManifestExtractor",
    "group_manifest_by_shipper",
]
