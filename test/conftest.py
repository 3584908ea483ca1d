# test/conftest.py
import pytest

from matchers import BillingRuleTable, BrokerEmailDirectory
from models import NormalizedEntry
from utils.helpers import parse_decimal

BILLING_HEADER = "Name of shipper\tQtd per BL\tBL nbr\tCNPJ/VAT\tCustoms broker"


def make_entry(bl, shipper, qty="0", broker="", cnpj=""):
    q = parse_decimal(qty)
    return NormalizedEntry(bl_number=bl, shipper=shipper, quantity=float(q),
                           broker=broker, cnpj=cnpj, quantity_raw=q)


@pytest.fixture
def empty_rules():
    return BillingRuleTable([])


@pytest.fixture
def empty_directory():
    return BrokerEmailDirectory([])


@pytest.fixture
def soyco_text():
    return "\n".join([
        BILLING_HEADER,
        "Soyco\t100\tBL1\t12.345.678/0001-90\tBrokerX",
        "SOYCO \t50\tBL2\t12.345.678/0001-90\tbrokerx",
    ])
