# main.py
import argparse
from datetime import date
from pathlib import Path

from builders import BLDocumentManager
from builders.bl_builder import render_bl
from config import DEFAULT_PORT_OF_LOADING, GRAIN_CARGO_TYPES, SUGAR_CARGO, UNIT_PRICE
from exporters import BillingReportExporter, ReceiptExporter
from extractors import CargoManifestExtractor, DueFieldExtractor, group_manifest_by_shipper
from freight_pipeline import process_billing, process_grain_receipts, process_sugar_receipts
from loaders import extract_text_from_pdf
from models import ReceiptHeader
from utils import StepTimer
from utils.helpers import format_bl_numbers, format_quantity_mt


def _print_failure(result):
    print(f"❌ {result.error}")
    for col in result.missing_columns:
        print(f"   - {col}")


# ---- billing ----
def run_billing(input_path: Path, out_dir: Path, ship_name: str, unit_price: float):
    t = StepTimer()
    with t.timeit("1) load + normalize + build"):
        result = process_billing(input_path, unit_price=unit_price)
    if not result:
        _print_failure(result)
        return 1

    builder = result.data
    exporter = BillingReportExporter(builder.rows, output_path=out_dir, ship_name=ship_name)
    with t.timeit("2) export workbook"):
        exporter.export(exporter.default_filename(input_path.name))
    with t.timeit("3) clipboard text/html"):
        exporter.save_clipboard()

    totals = exporter.totals()
    print(f"✅ {len(exporter.billable_rows)} billable rows, {totals['bl_count']} BLs, {totals['total_value']}")
    skipped = exporter.skipped_shippers()
    if skipped:
        print(f"⚠️ NÃO FATURAR: {', '.join(skipped)}")

    contacts = builder.broker_contacts()
    if contacts:
        print("\n📧 Customs broker contacts:\n" + contacts)
    t.print_summary()
    return 0


# ---- receipts ----
def _receipt_header(args, cargo: str) -> ReceiptHeader:
    receipt_date = date.fromisoformat(args.date) if args.date else date.today()
    return ReceiptHeader(receipt_date=receipt_date, vessel=args.vessel, cargo=cargo, port=args.port)


def run_grain(args):
    result = process_grain_receipts(Path(args.input))
    if not result:
        _print_failure(result)
        return 1
    exporter = ReceiptExporter(_receipt_header(args, args.cargo), output_path=Path(args.out))
    for rec in exporter.grain_records(result.data):
        print(f"🌾 {rec['shipper']}: BL {rec['bl_numbers']} – {rec['quantity']}")
    exporter.export(grain=result.data, filename="recibos_graos.xlsx")
    return 0


def run_sugar(args):
    result = process_sugar_receipts(Path(args.input))
    if not result:
        _print_failure(result)
        return 1
    exporter = ReceiptExporter(_receipt_header(args, SUGAR_CARGO), output_path=Path(args.out))
    for rec in exporter.sugar_records(result.data):
        print(f"🍬 {rec['customs_broker']}: {len(rec['lines'])} BLs")
    exporter.export(sugar=result.data, filename="recibos_acucar.xlsx")
    return 0


# ---- PDFs ----
def run_due(pdf_path: Path):
    parsed = DueFieldExtractor().extract(extract_text_from_pdf(pdf_path))
    if parsed is None:
        print("❌ Nenhum dado de DU-E encontrado no PDF.")
        return 1

    manager = BLDocumentManager()
    bl = manager.apply_pdf(0, parsed)
    for key, value in render_bl(bl).items():
        print(f"{key:18}: {value}")
    pending = manager.pending_summary()
    if pending:
        print(f"⚠️ Pending fields: {', '.join(pending.get(bl.bl_number, []))}")
    return 0


def run_manifest(pdf_path: Path):
    manifest = CargoManifestExtractor().extract(extract_text_from_pdf(pdf_path))
    if manifest is None:
        print("❌ Nenhum dado encontrado no manifesto.")
        return 1

    print(f"🚢 {manifest.vessel} – {manifest.port} ({len(manifest.entries)} BLs)")
    for receipt in group_manifest_by_shipper(manifest.entries):
        print(f"   {receipt.shipper}: BL {format_bl_numbers(receipt.bl_numbers)} – "
              f"{format_quantity_mt(receipt.total_quantity)}")
    return 0


# ---- CLI ----
def main(argv=None):
    ap = argparse.ArgumentParser(description="Shipping agency billing and receipts")
    sub = ap.add_subparsers(dest="cmd", required=True)

    b = sub.add_parser("billing", help="Billing report workbook + clipboard files from a freight sheet.")
    b.add_argument("input", help="Freight sheet (.xlsx/.xls or tab-separated text)")
    b.add_argument("--out", default="output", help="Output directory")
    b.add_argument("--ship", default="", help="Vessel name for the report title")
    b.add_argument("--unit-price", type=float, default=UNIT_PRICE, help="Fee per BL (BRL)")

    for name, help_text in (("grain", "Grain receipts (one per shipper)."),
                            ("sugar", "Sugar receipts (one per customs broker).")):
        r = sub.add_parser(name, help=help_text)
        r.add_argument("input", help="Freight sheet (.xlsx/.xls or tab-separated text)")
        r.add_argument("--out", default="output", help="Output directory")
        r.add_argument("--vessel", default="", help="Vessel name")
        r.add_argument("--port", default=DEFAULT_PORT_OF_LOADING, help="Port of loading")
        r.add_argument("--date", help="Receipt date (YYYY-MM-DD, default today)")
        if name == "grain":
            r.add_argument("--cargo", default=GRAIN_CARGO_TYPES[0], choices=GRAIN_CARGO_TYPES, help="Grain cargo type")

    d = sub.add_parser("due", help="Read DU-E fields from a PDF into a BL card.")
    d.add_argument("pdf")
    m = sub.add_parser("manifest", help="Group a cargo manifest PDF by shipper.")
    m.add_argument("pdf")

    args = ap.parse_args(argv)
    if args.cmd == "billing":
        return run_billing(Path(args.input), Path(args.out), args.ship, args.unit_price)
    if args.cmd == "grain":
        return run_grain(args)
    if args.cmd == "sugar":
        return run_sugar(args)
    if args.cmd == "due":
        return run_due(Path(args.pdf))
    return run_manifest(Path(args.pdf))


if __name__ == "__main__":
    raise SystemExit(main())
