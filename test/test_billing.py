# test/test_billing.py
import pytest

from builders import BillingReportBuilder
from exporters import BillingReportExporter
from freight_pipeline import process_billing
from matchers import BillingRuleTable, BrokerEmailDirectory
from models import BillingInstruction

from conftest import BILLING_HEADER, make_entry


# ---------- rule table ----------
def test_first_matching_rule_wins():
    table = BillingRuleTable([
        BillingInstruction(shipper="ACME", override_cnpj="111"),
        BillingInstruction(shipper="ACME TRADING", override_cnpj="222"),
    ])
    assert table.resolve("Acme Trading Ltda").override_cnpj == "111"

    reversed_table = BillingRuleTable(list(reversed(table.instructions)))
    assert reversed_table.resolve("ACME TRADING LTDA").override_cnpj == "222"


def test_match_works_in_both_directions():
    table = BillingRuleTable([BillingInstruction(shipper="ACME TRADING", aliases=("ACME T",))])
    assert table.resolve("ACME") is not None
    assert table.resolve("BIG ACME T CORP") is not None
    assert table.resolve("OTHER") is None


def test_blank_shipper_has_no_rule():
    assert BillingRuleTable().resolve("   ") is None


def test_engelhart_is_not_billed():
    decision = BillingRuleTable().apply("ENGELHART SUGAR", "00.000.000/0000-00", 3)
    assert decision.skip_billing
    assert decision.cnpj == "00.000.000/0000-00"


def test_single_bl_fee_charges_once():
    decision = BillingRuleTable().apply("CZARNIKOW BRASIL", "", 5)
    assert decision.valor_multiplier == 1
    assert decision.contact == "financeiro@czarnikow.com"


def test_no_rule_keeps_original_cnpj():
    decision = BillingRuleTable([]).apply("SOYCO", "12.345", 4)
    assert decision.cnpj == "12.345"
    assert decision.contact == ""
    assert decision.valor_multiplier == 4
    assert not decision.skip_billing


def test_cnpj_override_and_highlight_hints():
    table = BillingRuleTable()
    delta = table.apply("DELTA SUCROENERGIA S.A", "99", 1)
    assert delta.cnpj == "13.537.735/0003-62"
    assert delta.cnpj_overridden

    red = table.apply("BOM SUCESSO AGROINDUSTRIA", "1", 1)
    assert red.highlight
    assert not delta.highlight


def test_additional_emails_are_joined():
    decision = BillingRuleTable().apply("BRANCO PERES AGRO S/A", "", 1)
    assert decision.contact == "angelobozzo@brancoperes.com.br; leonardofernandes@brancoperes.com.br"


# ---------- broker directory ----------
def test_broker_lookup_exact_substring_token():
    directory = BrokerEmailDirectory([
        ("ALP LOGISTICA", "alp@x.com"),
        ("SUNRISE SERVICOS", "sun@x.com"),
    ])
    assert directory.lookup("alp logistica") == "alp@x.com"
    assert directory.lookup("ALP LOGISTICA ADUANEIRA LTDA") == "alp@x.com"
    assert directory.lookup("SUNRISE") == "sun@x.com"
    assert directory.lookup("GRUPO SERVICOS") == "sun@x.com"
    assert directory.lookup("ZZ") == ""
    assert directory.lookup("") == ""


def test_broker_contacts_summary():
    directory = BrokerEmailDirectory([("JRD", "jrd@x.com"), ("LOTUS", "lotus@x.com")])
    summary = directory.contacts_for(["JRD", "UNKNOWN", "LOTUS", "JRD", ""])
    assert summary == "JRD: jrd@x.com\n\nLOTUS: lotus@x.com"


# ---------- report builder ----------
def test_builder_partitions_and_totals(empty_directory):
    entries = [
        make_entry("BL1", "SOYCO", broker="X", cnpj="1"),
        make_entry("BL2", "SOYCO", broker="X", cnpj="1"),
        make_entry("BL3", "ENGELHART", broker="X", cnpj="2"),
    ]
    rows = BillingReportBuilder(entries, directory=empty_directory).build_rows()
    exporter = BillingReportExporter(rows)

    assert len(rows) == 2
    assert [r.shipper for r in exporter.billable_rows] == ["SOYCO"]
    assert exporter.totals() == {"bl_count": 2, "amount": 600.0, "total_value": "R$ 600,00"}
    assert exporter.skipped_shippers() == ["ENGELHART"]

    skipped = exporter.skipped_rows[0]
    assert skipped.total_value == "R$ 0,00"
    assert skipped.zero_value


def test_contact_falls_back_to_broker_directory(empty_rules):
    directory = BrokerEmailDirectory([("JRD", "jrd@x.com")])
    entries = [make_entry("1", "SOYCO", broker="JRD COMEX")]

    with_fallback = BillingReportBuilder(entries, rule_table=empty_rules, directory=directory).build_rows()
    without = BillingReportBuilder(entries, rule_table=empty_rules, directory=directory,
                                   broker_contact_fallback=False).build_rows()

    assert with_fallback[0].contact == "jrd@x.com"
    assert without[0].contact == ""


def test_single_fee_group_amount():
    entries = [make_entry(str(i), "CZARNIKOW", broker="B") for i in range(5)]
    row = BillingReportBuilder(entries, unit_price=350).build_rows()[0]

    assert row.bl_count == 5
    assert row.total_amount == 350
    assert row.total_value == "R$ 350,00"


# ---------- end to end ----------
def test_soyco_billing_scenario(soyco_text, empty_rules, empty_directory):
    result = process_billing(soyco_text, rule_table=empty_rules, directory=empty_directory, unit_price=350)

    assert result.success
    rows = result.data.rows
    assert len(rows) == 1
    row = rows[0]
    assert row.bl_numbers == "BL1/BL2"
    assert row.shipper == "SOYCO"
    assert row.broker == "BROKERX"
    assert row.cnpj == "12.345.678/0001-90"
    assert row.bl_count == 2
    assert row.unit_value == "R$ 350,00"
    assert row.total_value == "R$ 700,00"
    assert row.contact == ""


def test_billing_reports_missing_columns():
    result = process_billing("Name of shipper\tQtd per BL\tBL nbr\nACME\t1\t2")
    assert not result.success
    assert result.missing_columns == ["CNPJ/VAT", "Customs broker"]


@pytest.mark.parametrize("text", ["", BILLING_HEADER])
def test_billing_insufficient_input(text):
    result = process_billing(text)
    assert not result.success
    assert "Dados insuficientes" in result.error


def test_billing_from_cells(empty_rules, empty_directory):
    cells = [
        ["Name of shipper", "BL nbr", "CNPJ/VAT", "Customs broker"],
        ["ACME", 1.0, "9", "B"],
        [None, None, None, None],
        ["ACME", 2.0, "9", "B"],
    ]
    result = process_billing(cells, rule_table=empty_rules, directory=empty_directory)
    assert result.data.rows[0].bl_numbers == "1/2"
