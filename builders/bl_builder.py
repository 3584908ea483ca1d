"""Bill of Lading (CONGENBILL) document data management."""

import logging
from typing import Dict, List, Optional

from config import BL_VALUE_PER_MT, DEFAULT_PORT_OF_LOADING
from models import BLData, ParsedDUEData
from utils.helpers import format_currency, format_ordinal_date, format_weight

# Fields copied from the first BL to every other BL of the same call
SHARED_VOYAGE_FIELDS = ("vessel", "port_of_loading", "port_of_discharge")


def create_empty_bl(bl_id: str) -> BLData:
    """New blank BL card; the BL number follows the card id."""
    return BLData(id=bl_id, port_of_loading=DEFAULT_PORT_OF_LOADING, bl_number=bl_id)


def calculate_value(gross_weight: Optional[float], value_per_mt: float = BL_VALUE_PER_MT) -> float:
    """Declared value in USD: gross weight (MT) x rate."""
    if not gross_weight:
        return 0.0
    return gross_weight * value_per_mt


def get_pending_fields(data: BLData) -> List[str]:
    """Labels of the fields still missing on a BL card."""
    checks = [
        ("Vessel", data.vessel),
        ("Port of Loading", data.port_of_loading),
        ("Shipper Name", data.shipper_name),
        ("Shipper CNPJ", data.shipper_cnpj),
        ("Cargo Type", data.cargo_type),
        ("Gross Weight", data.gross_weight),
        ("Issue Date", data.issue_date),
        ("DU-E", data.du_e),
        ("CE", data.ce),
        ("Port of Discharge", data.port_of_discharge),
    ]
    return [label for label, value in checks if not value]


def get_bl_status(data: BLData) -> str:
    """'complete' when every field needed to print the BL is filled."""
    required = [
        data.vessel,
        data.port_of_loading,
        data.shipper_name,
        data.shipper_cnpj,
        data.cargo_type,
        data.gross_weight,
        data.issue_date,
    ]
    return "complete" if all(v is not None and v != "" for v in required) else "pending"


def merge_pdf_data(data: BLData, pdf: ParsedDUEData) -> BLData:
    """
    Fill BL fields from a parsed DU-E PDF.

    PDF values are defaults only: a field the user already filled is kept.
    """
    if not data.du_e and pdf.du_e:
        data.du_e = pdf.du_e
    if not data.shipper_cnpj and pdf.shipper_cnpj:
        data.shipper_cnpj = pdf.shipper_cnpj
    if not data.shipper_name and pdf.shipper_name:
        data.shipper_name = pdf.shipper_name
    if not data.gross_weight and pdf.gross_weight:
        data.gross_weight = pdf.gross_weight
    return data


def render_bl(data: BLData) -> Dict[str, str]:
    """Print-ready strings for a BL document."""
    return {
        "bl_number": data.bl_number,
        "shipper": data.shipper_name or "[SHIPPER]",
        "shipper_cnpj": data.shipper_cnpj,
        "vessel": data.vessel,
        "port_of_loading": f"{data.port_of_loading or DEFAULT_PORT_OF_LOADING}, BRAZIL",
        "port_of_discharge": data.port_of_discharge,
        "cargo_description": f"BRAZILIAN {data.cargo_type or '[CARGO TYPE]'}",
        "du_e": data.du_e,
        "ce": data.ce,
        "gross_weight": f"{format_weight(data.gross_weight)} MT" if data.gross_weight else "",
        "value": f"USD {format_currency(calculate_value(data.gross_weight))}",
        "issue_date": format_ordinal_date(data.issue_date) if data.issue_date else "",
    }


class BLDocumentManager:
    """In-memory list of BL cards for one vessel call."""

    def __init__(self):
        self.bls: List[BLData] = [create_empty_bl("1")]
        self._next_id = 2

    def add_bl(self) -> BLData:
        """
        Append a new BL card with the next sequential id.

        Vessel and ports are copied from the first BL.
        """
        bl_id = str(self._next_id)
        self._next_id += 1
        new_bl = create_empty_bl(bl_id)
        first = self.bls[0] if self.bls else None
        if first is not None:
            for field in SHARED_VOYAGE_FIELDS:
                setattr(new_bl, field, getattr(first, field))
        self.bls.append(new_bl)
        logging.info(f"BL card #{bl_id} added.")
        return new_bl

    def remove_bl(self, index: int) -> None:
        """
        Remove the BL card at `index`.

        Raises:
            ValueError: If it is the only card left
            IndexError: If index is out of range
        """
        if len(self.bls) == 1:
            raise ValueError("É necessário ter pelo menos uma ficha.")
        del self.bls[index]

    def update_bl(self, index: int, data: BLData) -> None:
        """
        Replace the BL card at `index`.

        Editing BL number 1 propagates vessel and ports to every other card.
        """
        self.bls[index] = data
        if data.bl_number == "1":
            for other in self.bls:
                if other is data:
                    continue
                for field in SHARED_VOYAGE_FIELDS:
                    setattr(other, field, getattr(data, field))

    def apply_pdf(self, index: int, pdf: ParsedDUEData) -> BLData:
        """Fill the card at `index` from DU-E PDF data without overwriting."""
        return merge_pdf_data(self.bls[index], pdf)

    def pending_summary(self) -> Dict[str, List[str]]:
        """BL number -> missing fields, for the cards still pending."""
        return {
            bl.bl_number: get_pending_fields(bl)
            for bl in self.bls
            if get_bl_status(bl) == "pending"
        }
