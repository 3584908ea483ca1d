"""Cargo receipt (Recibo) builder for grain and sugar shipments."""

import logging
from typing import List, Sequence

from models import GrainReceipt, ManifestEntry, NormalizedEntry, SugarReceipt
from utils.helpers import normalize_name, parse_decimal

from .group_builder import GroupBuilder


class ReceiptBuilder:
    """
    Build receipts from normalized entries.

    Grain receipts are one per shipper with the tonnage summed; sugar
    receipts are one per customs broker and list every BL line on its own.
    """

    def __init__(self, entries: Sequence[NormalizedEntry]):
        self.entries = list(entries)

    def build_grain(self) -> List[GrainReceipt]:
        """One GrainReceipt per shipper, BLs in input order, exact total."""
        groups = GroupBuilder(self.entries).group_by_shipper()
        receipts = [
            GrainReceipt(
                shipper=g.shipper,
                bl_numbers=list(g.bl_numbers),
                total_quantity=g.total_quantity,
            )
            for g in groups.values()
        ]
        logging.info(f"Built {len(receipts)} grain receipts from {len(self.entries)} BLs.")
        return receipts

    def build_sugar(self) -> List[SugarReceipt]:
        """One SugarReceipt per customs broker; no quantity summing."""
        groups = GroupBuilder(self.entries).group_by_broker()
        receipts = [
            SugarReceipt(customs_broker=g.broker, entries=list(g.entries))
            for g in groups.values()
        ]
        logging.info(f"Built {len(receipts)} sugar receipts from {len(self.entries)} BLs.")
        return receipts


def entries_from_manifest(manifest_entries: Sequence[ManifestEntry]) -> List[NormalizedEntry]:
    """Convert cargo manifest entries (already in MT) into NormalizedEntry."""
    return [
        NormalizedEntry(
            bl_number=e.bl_number,
            shipper=normalize_name(e.shipper),
            quantity=e.quantity,
            quantity_raw=parse_decimal(e.quantity),
        )
        for e in manifest_entries
    ]
