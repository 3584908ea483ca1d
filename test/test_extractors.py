# test/test_extractors.py
from decimal import Decimal

import pytest

from extractors import CargoManifestExtractor, DueFieldExtractor, RegexFieldRule, group_manifest_by_shipper
from extractors.due_extractor import clean_company_name
from loaders import extract_text_from_pdf

DUE_TEXT = "\n".join([
    "DECLARAÇÃO ÚNICA DE EXPORTAÇÃO",
    "Número da DU-E 25BR0001234567-8",
    "Exportadores",
    "12.345.678/0001-90 USINA EXEMPLO ACUCAR S/A Forma de exportação Por conta própria",
    "Peso líquido (KG) 25.000.100,00000",
])

MANIFEST_TEXT = "\n".join([
    "CARGO MANIFEST",
    "VESSEL: MV ATLANTIC STAR",
    "PORT OF LOADING: SANTOS, BRAZIL",
    "B/L No. 1 CARGILL AGRICOLA S.A. TO ORDER 25,000.500 MT",
    "B/L No. 2 ADM DO BRASIL LTDA TO ORDER 10,000 MT",
    "B/L No. 3 CARGILL AGRICOLA S.A. TO ORDER 5,000.250 MT",
    "B/L No. 4 COPERSUCAR S.A. TO ORDER",
])


# ---------- field rules ----------
def test_field_rule_falls_back_in_order():
    rule = RegexFieldRule([r"FIRST:\s*(\w+)", r"SECOND:\s*(\w+)"], clean=str.lower)
    assert rule.extract("second: ABC") == "abc"
    assert rule.extract("SECOND: B FIRST: A") == "a"
    assert rule.extract("nothing") is None


# ---------- DU-E ----------
def test_due_fields():
    parsed = DueFieldExtractor().extract(DUE_TEXT)

    assert parsed.du_e == "25BR00012345678"
    assert parsed.shipper_cnpj == "12.345.678/0001-90"
    assert parsed.shipper_name == "USINA EXEMPLO ACUCAR S.A."
    assert parsed.gross_weight == pytest.approx(25000.1)


def test_due_cnpj_without_exporters_heading():
    parsed = DueFieldExtractor().extract("CNPJ 12.345.678/0001-90 FAZENDA BOA VISTA LTDA\n")
    assert parsed.shipper_cnpj == "12.345.678/0001-90"
    assert parsed.shipper_name == "FAZENDA BOA VISTA LTDA"
    assert parsed.du_e == ""
    assert parsed.gross_weight == 0.0


def test_due_weight_five_decimal_fallback():
    parsed = DueFieldExtractor().extract("total 1.500,12345 kg")
    assert parsed.gross_weight == pytest.approx(1.50012345)


def test_due_nothing_found():
    assert DueFieldExtractor().extract("nothing useful here") is None
    assert DueFieldExtractor().extract("") is None


def test_clean_company_name():
    assert clean_company_name("usina x  s/a") == "USINA X S.A."
    assert clean_company_name("ACME LTDA FORMA DE EXPORTACAO DIRETA") == "ACME LTDA"


# ---------- cargo manifest ----------
def test_manifest_fields():
    manifest = CargoManifestExtractor().extract(MANIFEST_TEXT)

    assert manifest.vessel == "ATLANTIC STAR"
    assert manifest.port == "SANTOS"
    assert [e.bl_number for e in manifest.entries] == ["1", "2", "3"]
    assert manifest.entries[0].shipper == "CARGILL AGRICOLA S.A."
    assert manifest.entries[0].quantity == pytest.approx(25000.5)
    assert manifest.entries[1].quantity == pytest.approx(10000)


def test_manifest_grouped_by_shipper():
    manifest = CargoManifestExtractor().extract(MANIFEST_TEXT)
    receipts = group_manifest_by_shipper(manifest.entries)

    assert [r.shipper for r in receipts] == ["CARGILL AGRICOLA S.A.", "ADM DO BRASIL LTDA"]
    assert receipts[0].bl_numbers == ["1", "3"]
    assert receipts[0].total_quantity == Decimal("30000.75")


def test_manifest_defaults_when_header_missing():
    manifest = CargoManifestExtractor().extract("B/L No. 7 LOUIS DREYFUS COMPANY TO ORDER 100 MT")

    assert manifest.vessel == "Não identificado"
    assert manifest.port == "Não identificado"
    assert manifest.entries[0].bl_number == "7"


def test_manifest_nothing_found():
    assert CargoManifestExtractor().extract("random text") is None


# ---------- pdf text ----------
def test_missing_pdf_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        extract_text_from_pdf(tmp_path / "nope.pdf")
