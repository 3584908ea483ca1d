from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

# Column name -> trimmed cell text, one per input data line
RawRow = Dict[str, str]


@dataclass(frozen=True)
class BillingInstruction:
    shipper: str                                 # canonical name, uppercase
    aliases: Tuple[str, ...] = ()
    email: str = ""
    additional_emails: Tuple[str, ...] = ()
    remarks: str = ""
    skip_billing: bool = False                   # NÃO FATURAR
    single_bl_fee: bool = False                  # charge one BL fee for the whole group
    override_cnpj: str = ""
    override_company_name: str = ""
    special_note: str = ""


class NormalizedEntry:
    def __init__(self, bl_number: str = "", shipper: str = "", quantity: float = 0.0,
                 broker: str = "", cnpj: str = "", quantity_raw: Decimal = Decimal(0)):
        self.bl_number = bl_number
        self.shipper = shipper
        self.quantity = quantity
        self.broker = broker
        self.cnpj = cnpj
        self.quantity_raw = quantity_raw

    def __repr__(self):
        return (f"NormalizedEntry(bl_number={self.bl_number!r}, shipper={self.shipper!r}, "
                f"quantity={self.quantity!r}, broker={self.broker!r}, cnpj={self.cnpj!r})")


class AggregatedGroup:
    def __init__(self, group_key: str = "", shipper: str = "", broker: str = "", cnpj: str = ""):
        self.group_key = group_key
        self.shipper = shipper
        self.broker = broker
        self.cnpj = cnpj
        self.bl_numbers: List[str] = []
        self.total_quantity: Decimal = Decimal(0)
        self.entries: List[NormalizedEntry] = []

    @property
    def bl_count(self) -> int:
        return len(self.bl_numbers)


class BillingDecision:
    def __init__(self, cnpj: str = "", contact: str = "", skip_billing: bool = False,
                 valor_multiplier: int = 0, company_name: str = "", cnpj_overridden: bool = False,
                 highlight: bool = False, remarks: str = ""):
        self.cnpj = cnpj
        self.company_name = company_name
        self.contact = contact
        self.skip_billing = skip_billing
        self.valor_multiplier = valor_multiplier
        self.cnpj_overridden = cnpj_overridden
        self.highlight = highlight
        self.remarks = remarks


class OutputRow:
    def __init__(self, bl_numbers: str = "", shipper: str = "", cnpj: str = "", bl_count: int = 0,
                 unit_value: str = "", total_value: str = "", broker: str = "", contact: str = "",
                 skip_billing: bool = False, total_amount: float = 0.0):
        self.bl_numbers = bl_numbers
        self.shipper = shipper
        self.cnpj = cnpj
        self.bl_count = bl_count
        self.unit_value = unit_value
        self.total_value = total_value
        self.broker = broker
        self.contact = contact
        self.skip_billing = skip_billing
        self.total_amount = total_amount
        # Display hints
        self.cnpj_overridden = False
        self.highlight = False
        self.zero_value = False
        self.company_name = ""
        self.remarks = ""

    def to_record(self) -> Dict[str, object]:
        """Row keyed by the billing report column headers."""
        return {
            "BL nbr": self.bl_numbers,
            "Name of shipper": self.shipper,
            "CNPJ/VAT": self.cnpj,
            "Qtd BLs": self.bl_count,
            "Valor unitário": self.unit_value,
            "Valor total": self.total_value,
            "Customs Broker": self.broker,
            "Contato": self.contact,
        }


class ProcessingResult:
    def __init__(self, success: bool = False, data=None, error: str = "",
                 missing_columns: Optional[List[str]] = None):
        self.success = success
        self.data = data
        self.error = error
        self.missing_columns: List[str] = missing_columns or []

    @classmethod
    def ok(cls, data) -> "ProcessingResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, missing_columns: Optional[List[str]] = None) -> "ProcessingResult":
        return cls(success=False, error=error, missing_columns=missing_columns)

    def __bool__(self):
        return self.success


class BLData:
    def __init__(self, id: str = "", shipper_name: str = "", shipper_cnpj: str = "",
                 vessel: str = "", port_of_loading: str = "", port_of_discharge: str = "",
                 cargo_type: str = "", du_e: str = "", ce: str = "",
                 gross_weight: Optional[float] = None, issue_date: Optional[date] = None,
                 bl_number: str = "1"):
        self.id = id
        self.shipper_name = shipper_name
        self.shipper_cnpj = shipper_cnpj
        self.vessel = vessel
        self.port_of_loading = port_of_loading
        self.port_of_discharge = port_of_discharge
        self.cargo_type = cargo_type                  # e.g. SOYBEANS MEAL
        self.du_e = du_e
        self.ce = ce                                  # cargo description code
        self.gross_weight = gross_weight              # metric tons
        self.issue_date = issue_date
        self.bl_number = bl_number


class ParsedDUEData:
    def __init__(self, du_e: str = "", shipper_cnpj: str = "", shipper_name: str = "",
                 gross_weight: float = 0.0):
        self.du_e = du_e
        self.shipper_cnpj = shipper_cnpj
        self.shipper_name = shipper_name
        self.gross_weight = gross_weight              # metric tons


class ManifestEntry:
    def __init__(self, bl_number: str = "", shipper: str = "", quantity: float = 0.0):
        self.bl_number = bl_number
        self.shipper = shipper
        self.quantity = quantity                      # metric tons as printed


class CargoManifestData:
    def __init__(self, vessel: str = "", port: str = "", entries: Optional[List[ManifestEntry]] = None):
        self.vessel = vessel
        self.port = port
        self.entries: List[ManifestEntry] = entries or []


class GrainReceipt:
    def __init__(self, shipper: str = "", bl_numbers: Optional[List[str]] = None,
                 total_quantity: Decimal = Decimal(0)):
        self.shipper = shipper
        self.bl_numbers: List[str] = bl_numbers or []
        self.total_quantity = total_quantity


class SugarReceipt:
    def __init__(self, customs_broker: str = "", entries: Optional[List[NormalizedEntry]] = None):
        self.customs_broker = customs_broker
        self.entries: List[NormalizedEntry] = entries or []


class ReceiptHeader:
    def __init__(self, receipt_date: Optional[date] = None, vessel: str = "", cargo: str = "",
                 port: str = ""):
        self.receipt_date = receipt_date
        self.vessel = vessel
        self.cargo = cargo
        self.port = port
