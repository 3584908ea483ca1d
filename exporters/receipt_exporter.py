"""
Receipt Exporter Module
=======================

Turns grain and sugar receipts into print-ready records and a
"Recibos" workbook (one sheet row per receipt line).
"""

from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from config import RECEIPT_ISSUER, SUGAR_CARGO
from models import GrainReceipt, ReceiptHeader, SugarReceipt
from utils.helpers import format_bl_numbers, format_quantity_mt

RECEIPT_COLUMNS = ["Recibo", "Data", "Navio", "Carga", "Porto", "B/L nbr", "Shipper", "Quantity", "Customs Broker"]


class ReceiptExporter:
    """
    Receipt exporter.

    Generates:
    - grain records: one per shipper, BLs joined ("1, 3 E 9"), summed MT
    - sugar records: one per customs broker, one line per BL
    - Recibos workbook with every receipt line
    """

    def __init__(self, header: ReceiptHeader, output_path: Optional[Path] = None):
        """
        Initialize receipt exporter.

        Args:
            header: Date, vessel, cargo and port shared by every receipt
            output_path: Directory where export files will be saved
        """
        self.header = header
        self.output_path = Path(output_path) if output_path else Path.cwd()

    def _header_record(self, cargo: str) -> Dict[str, str]:
        d = self.header.receipt_date
        return {
            "date": d.strftime("%d/%m/%Y") if d else "",
            "vessel": self.header.vessel.strip().upper(),
            "cargo": cargo,
            "port": self.header.port.strip().upper(),
            "issuer": RECEIPT_ISSUER,
        }

    def grain_records(self, receipts: List[GrainReceipt]) -> List[Dict[str, object]]:
        """Print-ready dicts for grain receipts."""
        records = []
        for r in receipts:
            record = self._header_record(self.header.cargo)
            record.update({
                "shipper": r.shipper,
                "bl_numbers": format_bl_numbers(r.bl_numbers),
                "quantity": format_quantity_mt(r.total_quantity),
            })
            records.append(record)
        return records

    def sugar_records(self, receipts: List[SugarReceipt]) -> List[Dict[str, object]]:
        """Print-ready dicts for sugar receipts; lines are not summed."""
        records = []
        for r in receipts:
            record = self._header_record(SUGAR_CARGO)
            record.update({
                "customs_broker": r.customs_broker,
                "lines": [
                    {
                        "bl_number": e.bl_number,
                        "shipper": e.shipper,
                        "quantity": format_quantity_mt(e.quantity_raw),
                        "customs_broker": r.customs_broker,
                    }
                    for e in r.entries
                ],
            })
            records.append(record)
        return records

    def _grain_frame(self, receipts: List[GrainReceipt]) -> pd.DataFrame:
        rows = []
        for n, rec in enumerate(self.grain_records(receipts), start=1):
            rows.append([n, rec["date"], rec["vessel"], rec["cargo"], rec["port"],
                         rec["bl_numbers"], rec["shipper"], rec["quantity"], ""])
        return pd.DataFrame(rows, columns=RECEIPT_COLUMNS)

    def _sugar_frame(self, receipts: List[SugarReceipt]) -> pd.DataFrame:
        rows = []
        for n, rec in enumerate(self.sugar_records(receipts), start=1):
            for line in rec["lines"]:
                rows.append([n, rec["date"], rec["vessel"], rec["cargo"], rec["port"],
                             line["bl_number"], line["shipper"], line["quantity"], line["customs_broker"]])
        return pd.DataFrame(rows, columns=RECEIPT_COLUMNS)

    def export(self, grain: Optional[List[GrainReceipt]] = None, sugar: Optional[List[SugarReceipt]] = None,
               filename: str = "recibos.xlsx") -> Path:
        """
        Export receipts to Excel.

        Creates sheets "Recibos Grãos" and/or "Recibos Açúcar".

        Returns:
            Path of the written file
        """
        if not grain and not sugar:
            raise ValueError("No receipts to export.")

        self.output_path.mkdir(parents=True, exist_ok=True)
        output_file = self.output_path / filename
        with pd.ExcelWriter(output_file, engine="xlsxwriter") as writer:
            if grain:
                self._grain_frame(grain).to_excel(writer, sheet_name="Recibos Grãos", index=False)
                writer.sheets["Recibos Grãos"].set_column(0, len(RECEIPT_COLUMNS) - 1, 18)
            if sugar:
                self._sugar_frame(sugar).to_excel(writer, sheet_name="Recibos Açúcar", index=False)
                writer.sheets["Recibos Açúcar"].set_column(0, len(RECEIPT_COLUMNS) - 1, 18)

        print(f"📁 Receipts saved to {output_file}")
        return output_file
