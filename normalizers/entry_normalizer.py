"""Freight entry normalizer: RawRow -> NormalizedEntry."""

import logging
from typing import List, Sequence

from config import COL_BL_NBR, COL_BROKER, COL_CNPJ, COL_QTY_BL, COL_SHIPPER
from models import NormalizedEntry, RawRow
from utils.helpers import cell_text, normalize_name, parse_decimal


class FreightEntryNormalizer:
    """Normalize and standardize loaded freight rows."""

    def __init__(self, rows: Sequence[RawRow]):
        """
        Initialize normalizer.

        Args:
            rows: RawRow records from FreightSheetLoader
        """
        self.rows = list(rows)
        self.entries: List[NormalizedEntry] = []
        self.skipped = 0

    @staticmethod
    def normalize_row(row: RawRow) -> NormalizedEntry:
        """
        Build one NormalizedEntry.

        Shipper and broker are trimmed and uppercased, BL number and CNPJ
        trimmed, the quantity parsed with the locale-aware parser (bad
        cells become 0).
        """
        qty = parse_decimal(row.get(COL_QTY_BL, ""))
        return NormalizedEntry(
            bl_number=cell_text(row.get(COL_BL_NBR, "")),
            shipper=normalize_name(row.get(COL_SHIPPER, "")),
            quantity=float(qty),
            broker=normalize_name(row.get(COL_BROKER, "")),
            cnpj=cell_text(row.get(COL_CNPJ, "")),
            quantity_raw=qty,
        )

    def run_normalization(self, *, require_fields: Sequence[str] = ()) -> List[NormalizedEntry]:
        """
        Normalize every row.

        Args:
            require_fields: NormalizedEntry attributes that must be non-empty;
                rows missing any of them are skipped (receipts need BL and
                shipper, sugar receipts also the broker)

        Returns:
            Normalized entries in input order
        """
        self.entries = []
        self.skipped = 0
        for i, row in enumerate(self.rows, start=1):
            entry = self.normalize_row(row)
            missing = [f for f in require_fields if not getattr(entry, f)]
            if missing:
                self.skipped += 1
                logging.warning(f"Row {i}: skipped, empty {', '.join(missing)}.")
                continue
            qty_text = cell_text(row.get(COL_QTY_BL, ""))
            if entry.quantity_raw == 0 and (qty_text and not set(qty_text) <= set("0.,")):
                logging.warning(f"Row {i}: unparsable quantity '{row.get(COL_QTY_BL)}', using 0.")
            self.entries.append(entry)
        return self.entries

    def get_entries(self) -> List[NormalizedEntry]:
        return self.entries
