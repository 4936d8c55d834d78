"""
Monthly expense model.

  variable    = net sessions × (variable cost + extra variable cost per session)
  card fees   = revenue × card fee rate
  commissions = revenue × commission rate
  staffing    = Σ roles (qty × salary × payroll burden)
  fixed       = Σ fixed expense items (no multiplier)

Rates and amounts are used as given; nothing is clamped here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from core.config import AssumptionRecord, StaffRole
from core.schema import PAYROLL_BURDEN_MULTIPLIER


@dataclass(frozen=True)
class ExpenseBreakdown:
    variable_costs: float
    card_fees: float
    commissions: float
    staffing_costs: float
    fixed_costs: float

    @property
    def total(self) -> float:
        return (
            self.variable_costs
            + self.card_fees
            + self.commissions
            + self.staffing_costs
            + self.fixed_costs
        )


def variable_costs(assumptions: AssumptionRecord, net_sessions: float) -> float:
    per_session = assumptions.variable_cost_per_session + assumptions.extra_variable_per_session
    return net_sessions * per_session


def staffing_cost(
    staff: Mapping[str, StaffRole],
    *,
    burden: float = PAYROLL_BURDEN_MULTIPLIER,
) -> float:
    return sum((role.qty * role.salary * burden for role in staff.values()), 0.0)


def fixed_cost(fixed_expenses: Mapping[str, float]) -> float:
    return sum(fixed_expenses.values(), 0.0)


def compute_expenses(
    assumptions: AssumptionRecord,
    *,
    net_sessions: float,
    revenue: float,
) -> ExpenseBreakdown:
    return ExpenseBreakdown(
        variable_costs=variable_costs(assumptions, net_sessions),
        card_fees=revenue * assumptions.card_fee_rate,
        commissions=revenue * assumptions.commission_rate,
        staffing_costs=staffing_cost(assumptions.staff),
        fixed_costs=fixed_cost(assumptions.fixed_expenses),
    )
