"""
Result tables for display: summary cards, expense lines, ticket prices.

The engine always returns monthly figures. The monthly/annual toggle is a
view concern only: ViewPeriod scales the headline numbers when tables are
built and never feeds back into compute().
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

import pandas as pd

from core.schema import (
    MONTHS_PER_YEAR,
    PACKAGE_TIER_LABELS,
    PACKAGE_TIERS,
    SERVICE_CATALOG,
    ServiceCatalogEntry,
    catalog_by_id,
)
from core.utils import format_currency, format_number
from engine.runner import ProjectionResult


class ViewPeriod(Enum):
    MONTHLY = "monthly"
    ANNUAL = "annual"

    @property
    def multiplier(self) -> int:
        return MONTHS_PER_YEAR if self is ViewPeriod.ANNUAL else 1

    @property
    def label(self) -> str:
        return "Ano" if self is ViewPeriod.ANNUAL else "Mês"


def summary_table(result: ProjectionResult, period: ViewPeriod = ViewPeriod.MONTHLY) -> pd.DataFrame:
    """Revenue / expenses / result, scaled to the selected period."""
    m = period.multiplier
    rows = [
        ("Receita", result.revenue * m),
        ("Despesas", result.total_expenses * m),
        ("Resultado", result.result * m),
    ]
    return pd.DataFrame(
        [{"Metric": label, "Value": value, "Formatted": format_currency(value)} for label, value in rows]
    )


def expense_table(result: ProjectionResult) -> pd.DataFrame:
    """Monthly expense lines with their share of total expenses."""
    lines = [
        ("Variáveis", result.variable_costs),
        ("Comissões", result.commissions),
        ("Taxa de cartão", result.card_fees),
        ("Folha (com encargos)", result.staffing_costs),
        ("Fixos", result.fixed_costs),
    ]
    total = result.total_expenses
    df = pd.DataFrame(lines, columns=["Expense", "Monthly"])
    df["Annual"] = df["Monthly"] * MONTHS_PER_YEAR
    df["Share"] = df["Monthly"] / total if total else 0.0
    return df


def service_price_table(
    result: ProjectionResult,
    catalog: Sequence[ServiceCatalogEntry] = SERVICE_CATALOG,
) -> pd.DataFrame:
    entries = catalog_by_id(catalog)
    rows = []
    for item in result.avg_price_by_service:
        entry = entries.get(item.service_id)
        rows.append({
            "Service ID": item.service_id,
            "Service": entry.label if entry is not None else item.service_id,
            "Ticket": item.avg_price,
            "Override": item.is_override,
        })
    return pd.DataFrame(rows, columns=["Service ID", "Service", "Ticket", "Override"])


def package_price_table(result: ProjectionResult) -> pd.DataFrame:
    return pd.DataFrame([
        {"Tier": tier, "Package": PACKAGE_TIER_LABELS[tier], "Blended price": result.avg_price_by_package[tier]}
        for tier in PACKAGE_TIERS
    ])


def result_to_dataframe(result: ProjectionResult) -> pd.DataFrame:
    """Every headline figure of a result as a Metric / Value table."""
    rows = [
        {"Metric": "Soma mix de pacotes (%)", "Value": format_number(result.package_mix_sum)},
        {"Metric": "Soma mix de serviços (%)", "Value": format_number(result.service_mix_sum)},
        {"Metric": "Mix válido", "Value": "Sim" if result.mix_is_valid else "Não"},
        {"Metric": "Sessões brutas", "Value": format_number(result.gross_sessions)},
        {"Metric": "Sessões líquidas", "Value": format_number(result.net_sessions)},
        {"Metric": "Ticket médio", "Value": format_currency(result.avg_price_overall)},
        {"Metric": "Receita", "Value": format_currency(result.revenue)},
        {"Metric": "Variáveis", "Value": format_currency(result.variable_costs)},
        {"Metric": "Taxa de cartão", "Value": format_currency(result.card_fees)},
        {"Metric": "Comissões", "Value": format_currency(result.commissions)},
        {"Metric": "Folha (com encargos)", "Value": format_currency(result.staffing_costs)},
        {"Metric": "Fixos", "Value": format_currency(result.fixed_costs)},
        {"Metric": "Despesas totais", "Value": format_currency(result.total_expenses)},
        {"Metric": "Resultado", "Value": format_currency(result.result)},
    ]
    return pd.DataFrame(rows)
