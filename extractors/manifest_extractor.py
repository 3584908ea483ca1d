"""Cargo manifest extraction: vessel, port and per-BL shipper/quantity."""

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Sequence

from builders.receipt_builder import ReceiptBuilder, entries_from_manifest
from config import NOT_IDENTIFIED
from models import CargoManifestData, GrainReceipt, ManifestEntry

from .field_rule import RegexFieldRule

_BRAZIL_SUFFIX = re.compile(r",?\s*BRAZIL\s*$", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")
_NOT_A_SHIPPER = re.compile(r"^(TO\s+ORDER|CONSIGNEE|NOTIFY|QUANTITY)", re.IGNORECASE)

BL_PATTERNS = [
    re.compile(r"B/L\s*(?:No\.?|NUMBER)\s*:?\s*(\d+)\s+([A-Z][A-Z\s./\-&,]+?)"
               r"(?=\s+(?:TO\s+ORDER|CONSIGNEE|NOTIFY|QUANTITY))", re.IGNORECASE),
    re.compile(r"BL\s*(?:No\.?|NUMBER)\s*:?\s*(\d+)\s+([A-Z][A-Z\s./\-&,]+?)"
               r"(?=\s+(?:TO\s+ORDER|CONSIGNEE|NOTIFY|QUANTITY))", re.IGNORECASE),
    re.compile(r"(?:^|\n)\s*(\d+)\s+([A-Z][A-Z\s./\-&,]{10,}?)"
               r"(?=\s+(?:TO\s+ORDER|CONSIGNEE|NOTIFY|\d+[,.]?\d*\s*(?:MT|METRIC)))",
               re.IGNORECASE | re.MULTILINE),
]

_QTY = r"(\d{1,3}(?:[,.]\d{3})*(?:[,.]\d+)?)"


def _manifest_tons(value: str) -> float:
    # Manifest figures are already MT; commas are thousands separators
    try:
        return float(Decimal(value.replace(",", "")))
    except InvalidOperation:
        return 0.0


class CargoManifestExtractor:
    """Parse cargo manifest text into CargoManifestData."""

    vessel_rule = RegexFieldRule([
        r"VESSEL\s*:?\s*(?:MV\s+)?([A-Z][A-Z\s\-]+?)(?=\s+MASTER|\s+PORT|\s+DATE|\n|$)",
        r"MV\s+([A-Z][A-Z\s\-]+?)(?=\s+MASTER|\s+PORT|\s+DATE|\n|$)",
        r"VESSEL\s+NAME\s*:?\s*([A-Z][A-Z\s\-]+?)(?=\s+|\n|$)",
    ])
    port_rule = RegexFieldRule([
        r"PORT\s+OF\s+LOADING\s*:?\s*([A-Z][A-Z\s,\-]+?)(?=\s+DATE|\s+PORT\s+OF\s+DISCHARGE|\s+BRAZIL|\n|$)",
        r"LOADING\s+PORT\s*:?\s*([A-Z][A-Z\s,\-]+?)(?=\s+|\n|$)",
        r"FROM\s+PORT\s*:?\s*([A-Z][A-Z\s,\-]+?)(?=\s+|\n|$)",
    ], clean=lambda v: _BRAZIL_SUFFIX.sub("", v).strip().rstrip(",").strip())
    quantity_rule = RegexFieldRule([
        _QTY + r"\s*(?:MT|METRIC\s*TONS?)",
        r"QUANTITY\s*:?\s*" + _QTY + r"\s*(?:MT|METRIC\s*TONS?)",
        _QTY + r"\s*TONS?",
    ])

    def find_bl_markers(self, text: str) -> List[tuple]:
        """
        (position, bl_number, shipper) for every BL marker.

        De-duplicated by BL number (first pattern to see it wins) and
        ordered by position in the text.
        """
        seen = {}
        for pattern in BL_PATTERNS:
            for match in pattern.finditer(text):
                shipper = _WHITESPACE.sub(" ", match.group(2).strip())
                if len(shipper) <= 5 or _NOT_A_SHIPPER.match(shipper):
                    continue
                bl_number = match.group(1)
                if bl_number not in seen:
                    seen[bl_number] = (match.start(), bl_number, shipper)
        return sorted(seen.values(), key=lambda m: m[0])

    def extract_entries(self, text: str) -> List[ManifestEntry]:
        markers = self.find_bl_markers(text)
        entries = []
        for i, (position, bl_number, shipper) in enumerate(markers):
            end = markers[i + 1][0] if i + 1 < len(markers) else len(text)
            qty_text = self.quantity_rule.extract(text[position:end])
            quantity = _manifest_tons(qty_text) if qty_text else 0.0
            if quantity > 0:
                entries.append(ManifestEntry(bl_number=bl_number, shipper=shipper, quantity=quantity))
            else:
                logging.warning(f"BL {bl_number} ({shipper}): no quantity found, skipped.")
        return entries

    def extract(self, text: str) -> Optional[CargoManifestData]:
        """
        Parse manifest text.

        Returns:
            CargoManifestData (vessel/port default to "Não identificado"),
            or None when no vessel, port or BL entry was found
        """
        text = text or ""
        vessel = self.vessel_rule.extract(text) or ""
        port = self.port_rule.extract(text) or ""
        entries = self.extract_entries(text)

        if not vessel and not port and not entries:
            logging.warning("No data extracted from cargo manifest text.")
            return None

        logging.info(f"Manifest: vessel={vessel!r} port={port!r} entries={len(entries)}")
        return CargoManifestData(
            vessel=vessel or NOT_IDENTIFIED,
            port=port or NOT_IDENTIFIED,
            entries=entries,
        )


def group_manifest_by_shipper(entries: Sequence[ManifestEntry]) -> List[GrainReceipt]:
    """Group manifest entries into grain receipts (one per shipper)."""
    return ReceiptBuilder(entries_from_manifest(entries)).build_grain()
