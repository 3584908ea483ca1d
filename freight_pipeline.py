"""
Freight spreadsheet pipelines: billing report, grain and sugar receipts.

Each function loads the input, checks the columns the feature needs,
normalizes the rows and hands back a ProcessingResult. User-input problems
(empty paste, missing columns, unreadable file) come back as failures.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

from builders import BillingReportBuilder, ReceiptBuilder
from config import (
    BILLING_REQUIRED_COLUMNS,
    GRAIN_REQUIRED_COLUMNS,
    SUGAR_REQUIRED_COLUMNS,
    UNIT_PRICE,
)
from loaders import FreightSheetLoader
from matchers import BillingRuleTable, BrokerEmailDirectory
from models import ProcessingResult
from normalizers import FreightEntryNormalizer


def load_source(loader: FreightSheetLoader, source) -> ProcessingResult:
    """
    Load a Path (workbook/text file), a str (pasted TSV) or a 2-D cell array.
    """
    if isinstance(source, Path):
        return loader.load_file(source)
    if isinstance(source, str):
        return loader.load_text(source)
    return loader.load_cells(source, source_name="cells")


def load_entries(source, required_columns: Sequence[str],
                 require_fields: Sequence[str] = ()) -> ProcessingResult:
    """
    Load and normalize freight rows.

    Returns:
        ProcessingResult with the NormalizedEntry list on success
    """
    loader = FreightSheetLoader()
    loaded = load_source(loader, source)
    if not loaded:
        return loaded

    checked = loader.require(required_columns)
    if not checked:
        return checked

    normalizer = FreightEntryNormalizer(loader.get_rows())
    entries = normalizer.run_normalization(require_fields=require_fields)
    if not entries:
        logging.warning(f"[{loader.source_name}] No usable rows after normalization.")
        return ProcessingResult.fail("Nenhuma linha válida encontrada na planilha.")
    return ProcessingResult.ok(entries)


def process_billing(
    source,
    *,
    rule_table: Optional[BillingRuleTable] = None,
    directory: Optional[BrokerEmailDirectory] = None,
    unit_price: float = UNIT_PRICE,
    broker_contact_fallback: bool = True,
) -> ProcessingResult:
    """
    Build the billing report of a freight spreadsheet.

    Returns:
        ProcessingResult whose data is the BillingReportBuilder with rows built
    """
    result = load_entries(source, BILLING_REQUIRED_COLUMNS)
    if not result:
        return result

    builder = BillingReportBuilder(
        result.data,
        rule_table=rule_table,
        directory=directory,
        unit_price=unit_price,
        broker_contact_fallback=broker_contact_fallback,
    )
    builder.build_rows()
    return ProcessingResult.ok(builder)


def process_grain_receipts(source) -> ProcessingResult:
    """Grain receipts (one per shipper) from a freight spreadsheet."""
    result = load_entries(source, GRAIN_REQUIRED_COLUMNS, require_fields=("bl_number", "shipper"))
    if not result:
        return result
    return ProcessingResult.ok(ReceiptBuilder(result.data).build_grain())


def process_sugar_receipts(source) -> ProcessingResult:
    """Sugar receipts (one per customs broker) from a freight spreadsheet."""
    result = load_entries(
        source, SUGAR_REQUIRED_COLUMNS, require_fields=("bl_number", "shipper", "broker")
    )
    if not result:
        return result
    return ProcessingResult.ok(ReceiptBuilder(result.data).build_sugar())
