"""
Core package: catalog schema, assumption record, and shared utilities.
No business logic lives here.
"""

from .schema import (
    PACKAGE_TIERS,
    PAYROLL_BURDEN_MULTIPLIER,
    SERVICE_CATALOG,
    PriceTable,
    ServiceCatalogEntry,
)
from .config import AssumptionRecord, StaffRole, default_assumptions
from .utils import format_currency, format_number, format_percent

__all__ = [
    "PACKAGE_TIERS",
    "PAYROLL_BURDEN_MULTIPLIER",
    "SERVICE_CATALOG",
    "PriceTable",
    "ServiceCatalogEntry",
    "AssumptionRecord",
    "StaffRole",
    "default_assumptions",
    "format_currency",
    "format_number",
    "format_percent",
]
