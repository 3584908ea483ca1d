"""
Exporters Package
=================

This package contains all output functionality for billing and receipts.

Classes:
    - BillingReportExporter: Billing workbook (Faturamento / Não Faturar)
    - ClipboardExporter: Plain text + HTML clipboard payload
    - ReceiptExporter: Grain and sugar receipt records and workbook

Usage:
    from exporters import BillingReportExporter

    exporter = BillingReportExporter(rows, output_path, ship_name="MV ATLANTIC")
    exporter.export()
    payload = exporter.generate_clipboard()
"""

from .base_exporter import BillingReportExporter
from .clipboard_exporter import ClipboardExporter
from .receipt_exporter import ReceiptExporter

__all__ = [
    "BillingReportExporter",
    "ClipboardExporter",
    "ReceiptExporter",
]
