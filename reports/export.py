"""
Excel export of one projection: summary, expenses, ticket prices, assumptions.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Optional, Sequence, Union

import pandas as pd

from core.config import AssumptionRecord
from core.schema import SERVICE_CATALOG, ServiceCatalogEntry
from engine.runner import ProjectionResult

from .summary import (
    ViewPeriod,
    expense_table,
    package_price_table,
    result_to_dataframe,
    service_price_table,
    summary_table,
)

logger = logging.getLogger(__name__)


def assumptions_table(assumptions: AssumptionRecord) -> pd.DataFrame:
    """Flatten an assumption record into Section / Key / Value rows."""
    rows = []
    for name in (
        "hot_daily_attendance", "cold_daily_attendance", "hot_days", "cold_days", "no_show_rate",
        "variable_cost_per_session", "extra_variable_per_session", "commission_rate", "card_fee_rate",
    ):
        rows.append({"Section": "scalar", "Key": name, "Value": getattr(assumptions, name)})
    for section in ("package_mix", "service_mix", "ticket_overrides", "fixed_expenses"):
        for key, value in getattr(assumptions, section).items():
            rows.append({"Section": section, "Key": key, "Value": value})
    for role, staff in assumptions.staff.items():
        rows.append({"Section": "staff_qty", "Key": role, "Value": staff.qty})
        rows.append({"Section": "staff_salary", "Key": role, "Value": staff.salary})
    return pd.DataFrame(rows, columns=["Section", "Key", "Value"])


def export_workbook(
    result: ProjectionResult,
    path: Union[str, Path, BinaryIO],
    *,
    assumptions: Optional[AssumptionRecord] = None,
    catalog: Sequence[ServiceCatalogEntry] = SERVICE_CATALOG,
) -> Union[Path, BinaryIO]:
    """Write the workbook to a file path or an open binary buffer."""
    if not hasattr(path, "write"):
        path = Path(path)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        result_to_dataframe(result).to_excel(writer, sheet_name="Resumo", index=False)
        summary_table(result, ViewPeriod.ANNUAL).to_excel(writer, sheet_name="Anual", index=False)
        expense_table(result).to_excel(writer, sheet_name="Despesas", index=False)
        service_price_table(result, catalog).to_excel(writer, sheet_name="Servicos", index=False)
        package_price_table(result).to_excel(writer, sheet_name="Pacotes", index=False)
        if assumptions is not None:
            assumptions_table(assumptions).to_excel(writer, sheet_name="Premissas", index=False)
    logger.info("Exported projection workbook to %s", path)
    return path
