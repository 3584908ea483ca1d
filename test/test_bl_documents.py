# test/test_bl_documents.py
from datetime import date

import pytest

from builders import BLDocumentManager
from builders.bl_builder import calculate_value, create_empty_bl, get_bl_status, get_pending_fields, render_bl
from models import ParsedDUEData


def _complete(bl):
    bl.vessel = "MV ATLANTIC"
    bl.shipper_name = "ACME S.A."
    bl.shipper_cnpj = "12.345.678/0001-90"
    bl.cargo_type = "SOYBEANS MEAL"
    bl.gross_weight = 25000.1
    bl.issue_date = date(2025, 3, 1)
    return bl


def test_new_card_defaults():
    bl = create_empty_bl("1")
    assert bl.port_of_loading == "SANTOS"
    assert bl.bl_number == "1"
    assert get_bl_status(bl) == "pending"
    assert "Vessel" in get_pending_fields(bl)
    assert "Port of Loading" not in get_pending_fields(bl)


def test_status_complete():
    assert get_bl_status(_complete(create_empty_bl("1"))) == "complete"


def test_value_is_weight_times_rate():
    assert calculate_value(100) == 3000
    assert calculate_value(None) == 0.0


def test_render_bl():
    out = render_bl(_complete(create_empty_bl("1")))
    assert out["port_of_loading"] == "SANTOS, BRAZIL"
    assert out["cargo_description"] == "BRAZILIAN SOYBEANS MEAL"
    assert out["gross_weight"] == "25,000.100 MT"
    assert out["value"] == "USD 750,003.00"
    assert out["issue_date"] == "MARCH 1ST, 2025"


def test_add_copies_voyage_fields():
    manager = BLDocumentManager()
    manager.bls[0].vessel = "MV ATLANTIC"
    manager.bls[0].port_of_discharge = "QINGDAO"

    second = manager.add_bl()
    assert second.id == "2"
    assert second.bl_number == "2"
    assert second.vessel == "MV ATLANTIC"
    assert second.port_of_discharge == "QINGDAO"
    assert manager.add_bl().id == "3"


def test_cannot_remove_last_card():
    manager = BLDocumentManager()
    with pytest.raises(ValueError):
        manager.remove_bl(0)

    manager.add_bl()
    manager.remove_bl(1)
    assert len(manager.bls) == 1


def test_editing_first_bl_propagates_voyage():
    manager = BLDocumentManager()
    manager.add_bl()
    manager.add_bl()

    first = create_empty_bl("1")
    first.vessel = "MV NEW"
    first.port_of_loading = "PARANAGUA"
    manager.update_bl(0, first)

    assert [bl.vessel for bl in manager.bls] == ["MV NEW"] * 3
    assert manager.bls[2].port_of_loading == "PARANAGUA"


def test_pdf_never_overwrites_user_values():
    manager = BLDocumentManager()
    manager.bls[0].shipper_name = "TYPED BY USER"
    pdf = ParsedDUEData(du_e="25BR1", shipper_cnpj="1", shipper_name="FROM PDF", gross_weight=10.0)

    bl = manager.apply_pdf(0, pdf)
    assert bl.shipper_name == "TYPED BY USER"
    assert bl.du_e == "25BR1"
    assert bl.gross_weight == 10.0
    assert "1" in manager.pending_summary()
