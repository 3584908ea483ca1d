"""
Base Exporter Module
====================

Contains the BillingReportExporter class with common functionality
for all billing report outputs.

This module handles:
- Converting OutputRow records to DataFrames
- Totals of the billable rows
- Workbook export ("Faturamento" and "Não Faturar" sheets)
- Delegation to the clipboard exporter
"""

from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from config import (
    OUTPUT_COLUMN_WIDTHS,
    OUTPUT_COLUMNS,
    SHEET_BILLABLE,
    SHEET_SKIPPED,
)
from models import OutputRow
from utils.helpers import format_brl

from .clipboard_exporter import ClipboardExporter


class BillingReportExporter:
    """
    Main exporter for billing report rows.

    Handles:
    - Partitioning rows into billable / do-not-bill
    - Workbook generation with highlight formats
    - Delegating clipboard payloads to ClipboardExporter

    Attributes:
        rows: OutputRow records from BillingReportBuilder
        output_path: Directory for output files
        ship_name: Vessel name used as report title
    """

    def __init__(self, rows: List[OutputRow], output_path: Optional[Path] = None, ship_name: str = ""):
        """
        Initialize exporter.

        Args:
            rows: Billing rows (billable and do-not-bill)
            output_path: Directory where export files will be saved
            ship_name: Vessel name for titles
        """
        self.rows = list(rows)
        self.output_path = Path(output_path) if output_path else Path.cwd()
        self.ship_name = ship_name.strip()

        self.clipboard_exporter = ClipboardExporter(self)

    # ----------------------
    # Row partitions
    # ----------------------
    @property
    def billable_rows(self) -> List[OutputRow]:
        return [r for r in self.rows if not r.skip_billing]

    @property
    def skipped_rows(self) -> List[OutputRow]:
        return [r for r in self.rows if r.skip_billing]

    def totals(self) -> Dict[str, object]:
        """Totals over billable rows only: BL count and formatted amount."""
        billable = self.billable_rows
        amount = sum(r.total_amount for r in billable)
        return {
            "bl_count": sum(r.bl_count for r in billable),
            "amount": amount,
            "total_value": format_brl(amount),
        }

    def skipped_shippers(self) -> List[str]:
        names: List[str] = []
        for r in self.skipped_rows:
            if r.shipper not in names:
                names.append(r.shipper)
        return names

    # ----------------------
    # DataFrames
    # ----------------------
    @staticmethod
    def to_dataframe(rows: List[OutputRow]) -> pd.DataFrame:
        """Rows as a DataFrame with the fixed report column order."""
        return pd.DataFrame([r.to_record() for r in rows], columns=OUTPUT_COLUMNS)

    def _totals_record(self) -> Dict[str, object]:
        totals = self.totals()
        record = {col: "" for col in OUTPUT_COLUMNS}
        record["BL nbr"] = "TOTAL"
        record["Qtd BLs"] = totals["bl_count"]
        record["Valor total"] = totals["total_value"]
        return record

    # ----------------------
    # Workbook export
    # ----------------------
    def _write_sheet(self, writer: pd.ExcelWriter, sheet_name: str, rows: List[OutputRow], with_totals: bool):
        df = self.to_dataframe(rows)
        if with_totals:
            df = pd.concat([df, pd.DataFrame([self._totals_record()])], ignore_index=True)
        df.to_excel(writer, sheet_name=sheet_name, index=False)

        workbook = writer.book
        worksheet = writer.sheets[sheet_name]
        for idx, width in enumerate(OUTPUT_COLUMN_WIDTHS):
            worksheet.set_column(idx, idx, width)

        fmt_cnpj = workbook.add_format({"bg_color": "#FFF2CC"})
        fmt_red = workbook.add_format({"font_color": "#C00000", "bold": True})
        fmt_zero = workbook.add_format({"font_color": "#999999"})
        col_shipper = OUTPUT_COLUMNS.index("Name of shipper")
        col_cnpj = OUTPUT_COLUMNS.index("CNPJ/VAT")
        col_total = OUTPUT_COLUMNS.index("Valor total")

        # Header is row 0
        for i, row in enumerate(rows, start=1):
            if row.cnpj_overridden:
                worksheet.write(i, col_cnpj, row.cnpj, fmt_cnpj)
            if row.highlight:
                worksheet.write(i, col_shipper, row.shipper, fmt_red)
            if row.zero_value:
                worksheet.write(i, col_total, row.total_value, fmt_zero)

        if with_totals:
            fmt_bold = workbook.add_format({"bold": True})
            for col, value in enumerate(self._totals_record().values()):
                worksheet.write(len(rows) + 1, col, value, fmt_bold)

    def default_filename(self, source_name: str = "") -> str:
        """Output name: "<source>_base.xlsx" for workbook sources, else planilha_base.xlsx."""
        src = Path(source_name)
        if src.suffix.lower() in (".xlsx", ".xls"):
            return f"{src.stem}_base.xlsx"
        return "planilha_base.xlsx"

    def export(self, filename: str = "planilha_base.xlsx") -> Path:
        """
        Export the billing report to Excel.

        Creates a workbook with sheets:
        - Faturamento: billable rows + TOTAL row
        - Não Faturar: do-not-bill rows (only when there are any)

        Returns:
            Path of the written file
        """
        self.output_path.mkdir(parents=True, exist_ok=True)
        output_file = self.output_path / filename

        with pd.ExcelWriter(output_file, engine="xlsxwriter") as writer:
            self._write_sheet(writer, SHEET_BILLABLE, self.billable_rows, with_totals=True)
            if self.skipped_rows:
                self._write_sheet(writer, SHEET_SKIPPED, self.skipped_rows, with_totals=False)

        print(f"📁 Billing report saved to {output_file}")
        return output_file

    # ----------------------
    # Delegation methods
    # ----------------------
    def generate_clipboard(self) -> Dict[str, str]:
        """Plain text + HTML clipboard payload (delegates to ClipboardExporter)."""
        return self.clipboard_exporter.generate()

    def save_clipboard(self, stem: str = "faturamento") -> Dict[str, Path]:
        """Write the clipboard payload to <stem>.txt and <stem>.html."""
        return self.clipboard_exporter.save(stem)
