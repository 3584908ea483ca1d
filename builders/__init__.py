from .group_builder import GroupBuilder
from .billing_builder import BillingReportBuilder
from .receipt_builder import ReceiptBuilder, entries_from_manifest
from .bl_builder import BLDocumentManager

__all__ = ["GroupBuilder", "BillingReportBuilder", "ReceiptBuilder", "entries_from_manifest", "BLDocumentManager"]
