"""
SPA: Simulador de Receita e Resultado
======================================

Two tabs:
  1. Dashboard: assumption sliders/inputs on the left, monthly (or annual)
     revenue, expenses and result on top, recomputed on every change.
  2. Tabelas:   static reference tables (catalog prices, volume, costs).

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import AssumptionRecord, StaffRole
from core.schema import PACKAGE_TIER_LABELS, PACKAGE_TIERS, SERVICE_CATALOG
from core.utils import format_currency, format_number, format_percent

from data_prep.inputs import (
    commit_service_mix,
    commit_service_ticket,
    reset_assumptions,
    set_field,
    set_fixed_expense,
    set_package_mix,
    set_rate_from_percent,
    set_staff,
)
from data_prep.validators import validate_assumptions

from engine.runner import ProjectionResult, compute

from reports.summary import ViewPeriod, expense_table, service_price_table
from reports.tables import SESSION_COST_TOTAL, reference_tables
from reports.export import export_workbook

TITLE = "SPA • Simulador de Receita e Resultado"

VOLUME_SLIDERS = (
    ("hot_daily_attendance", "Atendimentos/dia (quente)", 40),
    ("cold_daily_attendance", "Atendimentos/dia (frio)", 30),
    ("hot_days", "Dias quentes/mês", 31),
    ("cold_days", "Dias frios/mês", 31),
)

STAFF_LABELS = {
    "terapeutas": ("Terapeutas", 30, 5000, 50),
    "manobristas": ("Manobristas", 10, 15000, 100),
    "recepcionistas": ("Recepcionistas", 10, 15000, 100),
    "copeiras": ("Copeiras", 10, 15000, 100),
    "gerente": ("Gerente", 5, 20000, 500),
}


# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------
def _init_state() -> None:
    if "assumptions" not in st.session_state:
        st.session_state["assumptions"] = reset_assumptions()
    st.session_state.setdefault("generation", 0)


def _key(name: str) -> str:
    # Bumping the generation on reset gives every widget a fresh key,
    # so they re-read their initial values from the baseline.
    return f"{name}-{st.session_state['generation']}"


def _reset() -> None:
    st.session_state["assumptions"] = reset_assumptions()
    st.session_state["generation"] += 1


def _commit_mix(service_id: str, key: str) -> None:
    updated = commit_service_mix(st.session_state["assumptions"], service_id, st.session_state[key])
    st.session_state["assumptions"] = updated
    st.session_state[key] = format_number(updated.service_mix.get(service_id, 0.0))


def _commit_ticket(service_id: str, key: str) -> None:
    st.session_state["assumptions"] = commit_service_ticket(
        st.session_state["assumptions"], service_id, st.session_state[key]
    )


@st.cache_data(show_spinner=False)
def _compute(assumptions: AssumptionRecord) -> ProjectionResult:
    return compute(assumptions)


# ---------------------------------------------------------------------------
# Assumption panels
# ---------------------------------------------------------------------------
def _volume_panel(a: AssumptionRecord) -> AssumptionRecord:
    st.markdown("#### Volume")
    for name, label, top in VOLUME_SLIDERS:
        value = st.slider(label, 0, top, int(getattr(a, name)), 1, key=_key(name))
        a = set_field(a, name, value)
    no_show = st.slider("No-show (%)", 0.0, 50.0, float(a.no_show_rate * 100), 0.1, key=_key("no_show"))
    return set_rate_from_percent(a, "no_show_rate", no_show)


def _staff_panel(a: AssumptionRecord) -> AssumptionRecord:
    st.markdown("#### Folha e despesas fixas")
    rent = st.slider("Aluguel mensal", 0, 50000, int(a.fixed_expenses.get("rent", 0)), 500, key=_key("rent"))
    a = set_fixed_expense(a, "rent", rent)
    other = st.slider(
        "Outros custos fixos", 0, 50000, int(a.fixed_expenses.get("other", 0)), 500, key=_key("other_fixed")
    )
    a = set_fixed_expense(a, "other", other)
    for role, (label, max_qty, max_salary, step) in STAFF_LABELS.items():
        current = a.staff.get(role, StaffRole())
        c1, c2 = st.columns(2)
        qty = c1.slider(f"{label} (qtd)", 0, max_qty, int(current.qty), 1, key=_key(f"{role}-qty"))
        salary = c2.slider(
            f"Salário {label.lower()}", 0, max_salary, int(current.salary), step, key=_key(f"{role}-salary")
        )
        a = set_staff(a, role, qty=qty, salary=salary)
    st.caption("Nota: salários multiplicados por 1,8 para encargos.")
    return a


def _cost_panel(a: AssumptionRecord) -> AssumptionRecord:
    st.markdown("#### Custos e comissões")
    var_cost = st.slider(
        "Custo variável por sessão", 0.0, 200.0, float(a.variable_cost_per_session), 0.01, key=_key("var_cost")
    )
    a = set_field(a, "variable_cost_per_session", var_cost)
    extra = st.slider(
        "Extra variável por sessão", 0.0, 200.0, float(a.extra_variable_per_session), 1.0, key=_key("extra")
    )
    a = set_field(a, "extra_variable_per_session", extra)
    commission = st.slider("Comissão (%)", 0.0, 50.0, float(a.commission_rate * 100), 1.0, key=_key("commission"))
    a = set_rate_from_percent(a, "commission_rate", commission)
    card_fee = st.slider("Taxa de cartão (%)", 0.0, 20.0, float(a.card_fee_rate * 100), 1.0, key=_key("card_fee"))
    return set_rate_from_percent(a, "card_fee_rate", card_fee)


def _package_panel(a: AssumptionRecord) -> AssumptionRecord:
    st.markdown("#### Mix de pacotes (%)")
    cols = st.columns(len(PACKAGE_TIERS))
    for col, tier in zip(cols, PACKAGE_TIERS):
        value = col.number_input(
            PACKAGE_TIER_LABELS[tier], 0.0, 100.0, float(a.package_mix.get(tier, 0.0)), 1.0, key=_key(f"pkg-{tier}")
        )
        a = set_package_mix(a, tier, value)
    return a


def _service_panel(a: AssumptionRecord, result: ProjectionResult) -> None:
    st.markdown("#### Mix de serviços")
    st.caption(f"Use porcentagens. Soma atual: {format_number(result.service_mix_sum)}%")
    if not result.service_mix_valid:
        st.warning("A soma deve ser 100%. Ajuste manualmente.")

    head = st.columns([3, 2, 2])
    head[0].markdown("**Serviço**")
    head[1].markdown("**Ticket médio (R$)**")
    head[2].markdown("**%**")
    for entry in SERVICE_CATALOG:
        price = result.price_for_service(entry.id)
        ticket_key = _key(f"ticket-{entry.id}")
        mix_key = _key(f"mix-{entry.id}")
        if ticket_key not in st.session_state:
            override = a.ticket_overrides.get(entry.id)
            st.session_state[ticket_key] = "" if override is None else f"{override:.2f}"
        if mix_key not in st.session_state:
            st.session_state[mix_key] = format_number(a.service_mix.get(entry.id, 0.0))

        row = st.columns([3, 2, 2])
        row[0].write(entry.label)
        row[1].text_input(
            "Ticket", key=ticket_key, placeholder=f"{price.avg_price:.2f}", label_visibility="collapsed",
            on_change=_commit_ticket, args=(entry.id, ticket_key),
        )
        row[2].text_input(
            "Mix", key=mix_key, label_visibility="collapsed",
            on_change=_commit_mix, args=(entry.id, mix_key),
        )


# ---------------------------------------------------------------------------
# Result display
# ---------------------------------------------------------------------------
def _display_results(result: ProjectionResult, period: ViewPeriod) -> None:
    m = period.multiplier
    k1, k2, k3 = st.columns(3)
    k1.metric(f"Receita ({period.label})", format_currency(result.revenue * m))
    k2.metric(f"Despesas ({period.label})", format_currency(result.total_expenses * m))
    k3.metric(f"Resultado ({period.label})", format_currency(result.result * m))

    d1, d2, d3 = st.columns(3)
    with d1:
        st.markdown(f"Ticket médio: **{format_currency(result.avg_price_overall)}**")
        st.markdown(f"Sessões líquidas: **{format_number(result.net_sessions)}**")
        st.markdown(f"Receita anual: **{format_currency(result.revenue * 12)}**")
    with d2:
        exp = expense_table(result)
        exp["Monthly"] = exp["Monthly"].map(format_currency)
        exp["Share"] = exp["Share"].map(format_percent)
        st.dataframe(exp[["Expense", "Monthly", "Share"]], use_container_width=True, hide_index=True)
    with d3:
        st.markdown(f"Resultado anual: **{format_currency(result.result * 12)}**")
        if result.revenue:
            st.markdown(f"Margem: **{format_percent(result.result / result.revenue)}**")
        if not result.mix_is_valid:
            st.warning(
                f"Mix fora de 100% (pacotes {format_number(result.package_mix_sum)}%, "
                f"serviços {format_number(result.service_mix_sum)}%)."
            )


def _dashboard() -> None:
    a = st.session_state["assumptions"]

    title_col, period_col, reset_col = st.columns([4, 2, 1])
    title_col.subheader("Resultados")
    period = period_col.radio(
        "Período", list(ViewPeriod), format_func=lambda p: p.label, horizontal=True, label_visibility="collapsed"
    )
    reset_col.button("Resetar variáveis", on_click=_reset)

    results_slot = st.container()

    st.subheader("Premissas")
    left, middle, right = st.columns(3)
    with left:
        a = _volume_panel(a)
        a = _package_panel(a)
    with middle:
        a = _staff_panel(a)
    with right:
        a = _cost_panel(a)
    st.session_state["assumptions"] = a

    result = _compute(a)
    _service_panel(a, result)

    with results_slot:
        _display_results(result, period)

    report = validate_assumptions(a)
    if report.errors or report.warnings:
        with st.expander("Validação das premissas", expanded=bool(report.errors)):
            st.text(report.summary())

    with st.expander("Preço por serviço", expanded=False):
        st.dataframe(service_price_table(result), use_container_width=True, hide_index=True)

    buf = io.BytesIO()
    export_workbook(result, buf, assumptions=a)
    st.download_button("Exportar Excel", buf.getvalue(), file_name="projecao_spa.xlsx")


def _tables() -> None:
    st.caption("Visualize cada tabela do Excel em páginas separadas.")
    for title, df in reference_tables().items():
        st.markdown(f"**{title}**")
        st.dataframe(pd.DataFrame(df), use_container_width=True, hide_index=True)
        if title == "Custo por sessão":
            st.markdown(f"Custo total por sessão: **{format_currency(SESSION_COST_TOTAL)}**")


st.set_page_config(page_title="SPA Simulador", layout="wide")
st.title(TITLE)
_init_state()

dashboard_tab, tables_tab = st.tabs(["Dashboard", "Tabelas"])
with dashboard_tab:
    _dashboard()
with tables_tab:
    _tables()
