"""
Static reference tables shown on the "Tabelas" tab.

Operational figures from the spa's planning spreadsheet. They are display
data only; the engine reads nothing from here.
"""

from __future__ import annotations

from typing import Dict, Sequence

import pandas as pd

from core.schema import PACKAGE_TIER_LABELS, PACKAGE_TIERS, SERVICE_CATALOG, ServiceCatalogEntry
from core.utils import excel_round

VOLUME_PERFORMANCE = [
    {"metric": "Atendimentos/dia (dia quente)", "value": 23, "unit": "atend/dia"},
    {"metric": "Atendimentos/dia (dia frio)", "value": 14, "unit": "atend/dia"},
    {"metric": "Dias quentes/mês", "value": 8, "unit": "dias"},
    {"metric": "Dias frios/mês", "value": 22, "unit": "dias"},
    {"metric": "Atendimentos mensais médios", "value": 492, "unit": "atend/mês"},
    {"metric": "Taxa de no-show", "value": 0.104, "unit": "%"},
    {"metric": "Clientes recorrentes", "value": 0.224, "unit": "%"},
    {"metric": "Clientes ativos (2025)", "value": 1137, "unit": "clientes"},
    {"metric": "Novos clientes/mês", "value": 53, "unit": "clientes/mês"},
    {"metric": "Média de visitas/mês", "value": 338, "unit": "visitas"},
    {"metric": "Ticket médio anual", "value": 480, "unit": "R$"},
    {"metric": "Pacotes ativos", "value": 1128, "unit": "pacotes"},
]

TEAM_COMMISSIONS = [
    {"item": "Número de terapeutas", "value": 10, "note": "funcionários"},
    {"item": "Comissão %", "value": 0.15, "note": "sobre valor recebido"},
    {"item": "Salário fixo", "value": 1900, "note": "R$/mês"},
    {"item": "Tipo de vínculo", "value": "CLT", "note": "-"},
]

COST_PER_SESSION = [
    {"item": "Produtos (óleo/creme)", "value": 69.73},
    {"item": "Descartáveis", "value": 5},
    {"item": "Taxa de cartão", "value": 0.05},
]

LAUNDRY_COSTS = [
    {"item": "Lençol com elástico", "qty": 1, "unit_cost": 2.45},
    {"item": "Lençol sem elástico", "qty": 1, "unit_cost": 2.45},
    {"item": "Fronha", "qty": 1, "unit_cost": 1.03},
    {"item": "Toalhas", "qty": 3, "unit_cost": 1.03},
]

OTHER_PRODUCTS = [
    {"item": "Creme (7 massagens/1kg)", "qty": 1, "unit_cost": 35.71},
    {"item": "Odorizante (250ml/15 atend)", "qty": 1, "unit_cost": 12},
    {"item": "Descartáveis", "qty": 1, "unit_cost": 13},
]

SESSION_COST_TOTAL = 69.73


def catalog_price_table(catalog: Sequence[ServiceCatalogEntry] = SERVICE_CATALOG) -> pd.DataFrame:
    rows = []
    for entry in catalog:
        row = {"Serviço": entry.name, "Duração": entry.duration}
        for tier in PACKAGE_TIERS:
            row[PACKAGE_TIER_LABELS[tier]] = entry.prices.price_for(tier)
        rows.append(row)
    return pd.DataFrame(rows)


def _with_subtotal(items) -> pd.DataFrame:
    df = pd.DataFrame(items)
    df["subtotal"] = excel_round(df["qty"] * df["unit_cost"], 2)
    return df


def reference_tables() -> Dict[str, pd.DataFrame]:
    """All reference tables keyed by section title."""
    return {
        "Serviços e preços": catalog_price_table(),
        "Volume e performance": pd.DataFrame(VOLUME_PERFORMANCE),
        "Equipe e comissões": pd.DataFrame(TEAM_COMMISSIONS),
        "Custo por sessão": pd.DataFrame(COST_PER_SESSION),
        "Lavanderia": _with_subtotal(LAUNDRY_COSTS),
        "Outros produtos": _with_subtotal(OTHER_PRODUCTS),
    }
