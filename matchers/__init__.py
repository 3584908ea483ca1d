from .billing_matcher import BillingRuleTable
from .broker_directory import BrokerEmailDirectory

__all__ = ["BillingRuleTable", "BrokerEmailDirectory"]
