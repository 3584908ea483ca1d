"""Grouping & aggregation of normalized freight entries."""

from decimal import Decimal
from typing import Dict, Sequence

from models import AggregatedGroup, NormalizedEntry
from utils.helpers import normalize_name

BILLING_KEY = ("shipper", "broker")
SHIPPER_KEY = ("shipper",)
BROKER_KEY = ("broker",)


class GroupBuilder:
    """Group NormalizedEntry records by a composite key in a single pass."""

    KEY_SEPARATOR = "|"

    def __init__(self, entries: Sequence[NormalizedEntry]):
        self.entries = list(entries)

    @classmethod
    def make_key(cls, entry: NormalizedEntry, key_fields: Sequence[str]) -> str:
        """
        Build the GroupKey of an entry, e.g. "SOYCO|BROKERX".

        Values are trimmed and uppercased; separator characters inside a
        value are escaped so distinct field tuples never share a key.
        """
        parts = []
        for field in key_fields:
            value = normalize_name(getattr(entry, field))
            parts.append(value.replace("\\", "\\\\").replace(cls.KEY_SEPARATOR, "\\" + cls.KEY_SEPARATOR))
        return cls.KEY_SEPARATOR.join(parts)

    def group(self, key_fields: Sequence[str], *, sum_quantities: bool) -> Dict[str, AggregatedGroup]:
        """
        Aggregate entries by key.

        Groups appear in order of first occurrence and keep the first-seen
        shipper/broker/cnpj; BL numbers keep input order. Quantities are
        summed as exact Decimals when `sum_quantities` is set.

        Args:
            key_fields: NormalizedEntry attributes forming the key
            sum_quantities: Sum quantities (grain) or only collect BLs

        Returns:
            Ordered mapping GroupKey -> AggregatedGroup
        """
        groups: Dict[str, AggregatedGroup] = {}
        for entry in self.entries:
            key = self.make_key(entry, key_fields)
            group = groups.get(key)
            if group is None:
                group = AggregatedGroup(
                    group_key=key,
                    shipper=entry.shipper,
                    broker=entry.broker,
                    cnpj=entry.cnpj,
                )
                groups[key] = group

            group.bl_numbers.append(entry.bl_number)
            group.entries.append(entry)
            if sum_quantities:
                group.total_quantity += entry.quantity_raw or Decimal(str(entry.quantity))
        return groups

    def group_for_billing(self) -> Dict[str, AggregatedGroup]:
        """Billing: one group per (shipper, broker); BLs counted, not summed."""
        return self.group(BILLING_KEY, sum_quantities=False)

    def group_by_shipper(self) -> Dict[str, AggregatedGroup]:
        """Grain receipts: one group per shipper with summed tonnage."""
        return self.group(SHIPPER_KEY, sum_quantities=True)

    def group_by_broker(self) -> Dict[str, AggregatedGroup]:
        """Sugar receipts: one group per customs broker, lines kept apart."""
        return self.group(BROKER_KEY, sum_quantities=False)
