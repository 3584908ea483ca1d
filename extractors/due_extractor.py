"""DU-E (export declaration) field extraction from PDF text."""

import logging
import re
from decimal import Decimal
from typing import Optional, Tuple

from config import FLAG_DEBUG
from models import ParsedDUEData
from utils.helpers import parse_decimal

from .field_rule import RegexFieldRule

CNPJ_AND_NAME = re.compile(
    r"(\d{2}\.\d{3}\.\d{3}/\d{4}-\d{2})\s+"
    r"([A-Z][A-Z0-9\s.\-&/]+?(?:S/?A\.?|S\.A\.?|LTDA\.?|ME|EPP|EIRELI))(?=\s|$)",
    re.IGNORECASE,
)
_SA_SUFFIX = re.compile(r"S/A\.?$", re.IGNORECASE)
_EXPORT_MODE_TAIL = re.compile(r"\s+FORMA\s+DE\s+EXPORTA[ÇC][ÃA]O.*$", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")


def clean_company_name(raw: str) -> str:
    """Uppercase, S/A -> S.A., drop a trailing "Forma de exportação" tail."""
    name = raw.strip().upper()
    name = _SA_SUFFIX.sub("S.A.", name)
    name = _EXPORT_MODE_TAIL.sub("", name)
    return _WHITESPACE.sub(" ", name).strip()


class DueFieldExtractor:
    """
    Pull DU-E number, exporter CNPJ/name and net weight from DU-E text.

    Net weight is printed in kilograms and returned in metric tons.
    """

    due_rule = RegexFieldRule([r"\d{2}BR\d+-?\d*"], group=0, clean=lambda v: v.replace("-", ""))
    weight_rule = RegexFieldRule([
        r"Peso\s*l[íi]quido\s*\(?\s*KG\s*\)?[^\d]*(\d{1,3}(?:\.\d{3})*,\d+)",
        r"(\d{1,3}(?:\.\d{3})*,\d{5})",
    ])

    def extract_exporter(self, text: str) -> Tuple[str, str]:
        """CNPJ and company name, preferring the "Exportadores" section."""
        match = None
        start = text.lower().find("exportadores")
        if start != -1:
            match = CNPJ_AND_NAME.search(text, start)
        if match is None:
            match = CNPJ_AND_NAME.search(text)
        if match is None:
            return "", ""
        return match.group(1), clean_company_name(match.group(2))

    def extract_weight(self, text: str) -> float:
        kg = self.weight_rule.extract(text)
        if not kg:
            return 0.0
        return float(parse_decimal(kg) / Decimal(1000))

    def extract(self, text: str) -> Optional[ParsedDUEData]:
        """
        Parse DU-E text.

        Returns:
            ParsedDUEData (missing fields empty/zero), or None when nothing
            at all was found
        """
        text = text or ""
        du_e = self.due_rule.extract(text) or ""
        cnpj, name = self.extract_exporter(text)
        weight = self.extract_weight(text)

        if FLAG_DEBUG:
            print(f"[DEBUG] DU-E={du_e!r} CNPJ={cnpj!r} name={name!r} weight={weight}")

        if not du_e and not cnpj and not weight:
            logging.warning("No DU-E fields found in PDF text.")
            return None
        if not (du_e and cnpj and weight):
            logging.info(f"DU-E partially parsed (du_e={du_e!r}, cnpj={cnpj!r}, weight={weight}).")

        return ParsedDUEData(du_e=du_e, shipper_cnpj=cnpj, shipper_name=name, gross_weight=weight)
