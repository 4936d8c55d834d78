"""
Reports: period view mode, result tables, reference tables, Excel export.
"""

from .summary import (
    ViewPeriod,
    summary_table,
    expense_table,
    service_price_table,
    package_price_table,
    result_to_dataframe,
)
from .tables import catalog_price_table, reference_tables
from .export import assumptions_table, export_workbook

__all__ = [
    "ViewPeriod",
    "summary_table",
    "expense_table",
    "service_price_table",
    "package_price_table",
    "result_to_dataframe",
    "catalog_price_table",
    "reference_tables",
    "assumptions_table",
    "export_workbook",
]
