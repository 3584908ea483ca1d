"""
Clipboard Exporter Module
=========================

Builds the dual-format (plain text + HTML) payload pasted into
spreadsheets and e-mails. Both formats carry the same billable rows and
totals; do-not-bill shippers go to a separate warning line.
"""

from html import escape
from pathlib import Path
from typing import Dict, List

from config import OUTPUT_COLUMNS

CELL_STYLE = "border:1px solid #999999;padding:4px 8px;"
HEADER_STYLE = CELL_STYLE + "background-color:#1F4E79;color:#FFFFFF;font-weight:bold;"
CNPJ_OVERRIDE_STYLE = "background-color:#FFF2CC;"
HIGHLIGHT_STYLE = "color:#C00000;font-weight:bold;"
TOTAL_STYLE = "font-weight:bold;background-color:#F2F2F2;"


class ClipboardExporter:
    """
    Clipboard payload exporter.

    Generates:
    - text: tab-separated table, TOTAL line, DO NOT BILL warning line
    - html: the same table with style hints for overridden CNPJ and
      highlighted shippers
    """

    def __init__(self, base_exporter):
        """
        Initialize clipboard exporter.

        Args:
            base_exporter: Parent BillingReportExporter instance
        """
        self.base = base_exporter

    def _warning_line(self) -> str:
        names = self.base.skipped_shippers()
        if not names:
            return ""
        return f"⚠️ NÃO FATURAR (DO NOT BILL): {', '.join(names)}"

    def _totals_cells(self) -> List[str]:
        totals = self.base.totals()
        cells = [""] * len(OUTPUT_COLUMNS)
        cells[OUTPUT_COLUMNS.index("BL nbr")] = "TOTAL"
        cells[OUTPUT_COLUMNS.index("Qtd BLs")] = str(totals["bl_count"])
        cells[OUTPUT_COLUMNS.index("Valor total")] = totals["total_value"]
        return cells

    def generate_text(self) -> str:
        """Tab-separated plain text version."""
        lines = []
        if self.base.ship_name:
            lines.append(f"NAVIO: {self.base.ship_name}")
        lines.append("\t".join(OUTPUT_COLUMNS))
        for row in self.base.billable_rows:
            lines.append("\t".join(str(v) for v in row.to_record().values()))
        lines.append("\t".join(self._totals_cells()))

        warning = self._warning_line()
        if warning:
            lines.append("")
            lines.append(warning)
        return "\n".join(lines)

    def _row_html(self, row) -> str:
        cells = []
        for col, value in row.to_record().items():
            style = CELL_STYLE
            if col == "CNPJ/VAT" and row.cnpj_overridden:
                style += CNPJ_OVERRIDE_STYLE
            elif col == "Name of shipper" and row.highlight:
                style += HIGHLIGHT_STYLE
            title = ""
            if col == "CNPJ/VAT" and row.company_name:
                title = f' title="{escape(row.company_name)}"'
            cells.append(f'<td style="{style}"{title}>{escape(str(value))}</td>')
        return "<tr>" + "".join(cells) + "</tr>"

    def generate_html(self) -> str:
        """HTML table version with inline style hints."""
        parts = []
        if self.base.ship_name:
            parts.append(f"<p><b>NAVIO: {escape(self.base.ship_name)}</b></p>")
        parts.append('<table style="border-collapse:collapse;font-family:Arial,sans-serif;font-size:10pt;">')
        parts.append(
            "<thead><tr>"
            + "".join(f'<th style="{HEADER_STYLE}">{escape(c)}</th>' for c in OUTPUT_COLUMNS)
            + "</tr></thead>"
        )
        parts.append("<tbody>")
        for row in self.base.billable_rows:
            parts.append(self._row_html(row))
        parts.append(
            "<tr>"
            + "".join(f'<td style="{CELL_STYLE}{TOTAL_STYLE}">{escape(c)}</td>' for c in self._totals_cells())
            + "</tr>"
        )
        parts.append("</tbody></table>")

        warning = self._warning_line()
        if warning:
            parts.append(f'<p style="{HIGHLIGHT_STYLE}">{escape(warning)}</p>')
        return "\n".join(parts)

    def generate(self) -> Dict[str, str]:
        return {"text": self.generate_text(), "html": self.generate_html()}

    def save(self, stem: str = "faturamento") -> Dict[str, Path]:
        """Write <stem>.txt and <stem>.html under the output path."""
        payload = self.generate()
        self.base.output_path.mkdir(parents=True, exist_ok=True)
        txt_file = self.base.output_path / f"{stem}.txt"
        html_file = self.base.output_path / f"{stem}.html"
        txt_file.write_text(payload["text"], encoding="utf-8")
        html_file.write_text(payload["html"], encoding="utf-8")
        print(f"📋 Clipboard payload saved to {txt_file} and {html_file}")
        return {"text": txt_file, "html": html_file}
