"""Billing report builder: groups + billing rules -> OutputRow list."""

import logging
from typing import List, Optional, Sequence

from config import UNIT_PRICE
from matchers.billing_matcher import BillingRuleTable
from matchers.broker_directory import BrokerEmailDirectory
from models import NormalizedEntry, OutputRow
from utils.helpers import format_brl

from .group_builder import GroupBuilder


class BillingReportBuilder:
    """Build the "Faturamento" rows, one per (shipper, broker) group."""

    def __init__(
        self,
        entries: Sequence[NormalizedEntry],
        *,
        rule_table: Optional[BillingRuleTable] = None,
        directory: Optional[BrokerEmailDirectory] = None,
        unit_price: float = UNIT_PRICE,
        broker_contact_fallback: bool = True,
    ):
        """
        Initialize builder.

        Args:
            entries: Normalized entries in input order
            rule_table: Billing rules (defaults to config table)
            directory: Broker emails (defaults to config directory)
            unit_price: Fee charged per BL
            broker_contact_fallback: Use the broker's emails as contact
                when no billing rule provides one
        """
        self.entries = list(entries)
        self.rule_table = rule_table if rule_table is not None else BillingRuleTable()
        self.directory = directory if directory is not None else BrokerEmailDirectory()
        self.unit_price = unit_price
        self.broker_contact_fallback = broker_contact_fallback
        self.rows: List[OutputRow] = []

    def build_rows(self) -> List[OutputRow]:
        """
        Group entries and apply billing instructions.

        Returns:
            All OutputRow records (billable and do-not-bill) in group order
        """
        groups = GroupBuilder(self.entries).group_for_billing()
        self.rows = []

        for group in groups.values():
            decision = self.rule_table.apply(group.shipper, group.cnpj, group.bl_count)
            amount = 0.0 if decision.skip_billing else self.unit_price * decision.valor_multiplier

            contact = decision.contact
            if not contact and self.broker_contact_fallback:
                contact = self.directory.lookup(group.broker)

            row = OutputRow(
                bl_numbers="/".join(group.bl_numbers),
                shipper=group.shipper,
                cnpj=decision.cnpj,
                bl_count=group.bl_count,
                unit_value=format_brl(self.unit_price),
                total_value=format_brl(amount),
                broker=group.broker,
                contact=contact,
                skip_billing=decision.skip_billing,
                total_amount=amount,
            )
            row.cnpj_overridden = decision.cnpj_overridden
            row.highlight = decision.highlight
            row.zero_value = amount == 0
            row.company_name = decision.company_name
            row.remarks = decision.remarks
            self.rows.append(row)

        logging.info(
            f"Built {len(self.rows)} billing rows from {len(self.entries)} entries "
            f"({sum(r.skip_billing for r in self.rows)} not billed)."
        )
        return self.rows

    def broker_contacts(self) -> str:
        """Broker "NAME: emails" summary for every broker in the report."""
        return self.directory.contacts_for(r.broker for r in self.rows)
