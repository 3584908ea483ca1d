"""Billing rule table: per-shipper overrides applied to each billing group."""

import logging
from typing import Optional, Sequence

from config import BILLING_INSTRUCTIONS, FLAG_DEBUG, HIGHLIGHT_MARKER
from models import BillingDecision, BillingInstruction


class BillingRuleTable:
    """
    Ordered list of BillingInstruction with fuzzy shipper matching.

    Rules are scanned in declaration order and the first match wins, so an
    earlier rule takes precedence over a later one that would also match.
    """

    def __init__(
        self,
        instructions: Sequence[BillingInstruction] = BILLING_INSTRUCTIONS,
        *,
        highlight_marker: str = HIGHLIGHT_MARKER,
    ):
        """
        Initialize rule table.

        Args:
            instructions: Ordered billing rules (defaults to config table)
            highlight_marker: Text in special_note that flags a row in red
        """
        self.instructions = tuple(instructions)
        self.highlight_marker = highlight_marker

    @staticmethod
    def _contains_either_way(name: str, candidate: str) -> bool:
        candidate = candidate.upper()
        return candidate in name or name in candidate

    def matches(self, instruction: BillingInstruction, normalized_name: str) -> bool:
        """True if the rule's canonical name or any alias matches the shipper."""
        if self._contains_either_way(normalized_name, instruction.shipper):
            return True
        return any(self._contains_either_way(normalized_name, a) for a in instruction.aliases)

    def resolve(self, shipper_name: str) -> Optional[BillingInstruction]:
        """
        Find the billing instruction for a shipper.

        Args:
            shipper_name: Shipper as printed on the spreadsheet

        Returns:
            First matching BillingInstruction, or None
        """
        normalized_name = (shipper_name or "").upper().strip()
        if not normalized_name:
            return None

        for instruction in self.instructions:
            if self.matches(instruction, normalized_name):
                if FLAG_DEBUG:
                    print(f"[DEBUG] '{normalized_name}' -> rule '{instruction.shipper}'")
                return instruction
        return None

    def apply(self, shipper: str, original_cnpj: str, bl_count: int) -> BillingDecision:
        """
        Resolve the billing outcome of one group.

        Args:
            shipper: Shipper name
            original_cnpj: CNPJ/VAT from the spreadsheet
            bl_count: Number of BLs in the group

        Returns:
            BillingDecision (CNPJ, contact, skip flag, fee multiplier, hints)
        """
        instruction = self.resolve(shipper)
        if instruction is None:
            return BillingDecision(
                cnpj=original_cnpj,
                contact="",
                skip_billing=False,
                valor_multiplier=bl_count,
            )

        emails = [instruction.email] if instruction.email else []
        emails.extend(instruction.additional_emails)

        decision = BillingDecision(
            cnpj=instruction.override_cnpj or original_cnpj,
            company_name=instruction.override_company_name,
            contact="; ".join(emails),
            skip_billing=instruction.skip_billing,
            valor_multiplier=1 if instruction.single_bl_fee else bl_count,
            cnpj_overridden=bool(instruction.override_cnpj),
            highlight=self.highlight_marker in instruction.special_note,
            remarks=instruction.remarks,
        )
        if decision.skip_billing:
            logging.info(f"Shipper '{shipper}' flagged as NÃO FATURAR ({instruction.shipper}).")
        return decision
