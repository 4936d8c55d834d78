"""
Projection runner: turns one assumption record into one monthly result.

Order of evaluation:
  1. Normalize package mix and service mix (value / 100, sums, validity)
  2. Gross / net sessions
  3. Ticket per service (package mix + overrides)
  4. Per-tier and overall blended tickets (service mix)
  5. Revenue = net sessions × overall ticket
  6. Expenses (variable, card fees, commissions, staffing, fixed)
  7. Result = revenue − total expenses

compute() is a pure function: no caching, no retained state. Callers decide
when to re-run it and may memoize on the input value.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict, Sequence, Tuple

from core.config import AssumptionRecord
from core.schema import PACKAGE_TIERS, SERVICE_CATALOG, ServiceCatalogEntry

from .expenses import compute_expenses
from .mix import normalize_mix
from .pricing import (
    ServicePrice,
    blend_package_prices,
    overall_average_price,
    resolve_service_prices,
)
from .volume import compute_sessions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectionResult:
    """Every intermediate and final figure of one monthly projection."""

    package_mix_sum: float
    service_mix_sum: float
    package_mix_valid: bool
    service_mix_valid: bool
    mix_is_valid: bool

    gross_sessions: float
    net_sessions: float

    avg_price_by_service: Tuple[ServicePrice, ...]
    avg_price_by_package: Dict[str, float]
    avg_price_overall: float

    revenue: float
    variable_costs: float
    card_fees: float
    commissions: float
    staffing_costs: float
    fixed_costs: float
    total_expenses: float
    result: float

    def price_for_service(self, service_id: str) -> ServicePrice:
        for item in self.avg_price_by_service:
            if item.service_id == service_id:
                return item
        raise KeyError(f"No price computed for service {service_id!r}")

    def to_dict(self) -> Dict:
        return asdict(self)


def compute(
    assumptions: AssumptionRecord,
    catalog: Sequence[ServiceCatalogEntry] = SERVICE_CATALOG,
) -> ProjectionResult:
    """
    Run the full monthly projection for one assumption record.

    Only the four known tiers are read from the package mix. The service mix
    is taken whole, so its sum includes ids that are not in the catalog.
    """
    package_mix = normalize_mix(
        {tier: assumptions.package_mix[tier] for tier in PACKAGE_TIERS if tier in assumptions.package_mix}
    )
    service_mix = normalize_mix(assumptions.service_mix)

    sessions = compute_sessions(assumptions)

    service_prices = resolve_service_prices(catalog, package_mix.weights, assumptions.ticket_overrides)
    package_prices = blend_package_prices(catalog, service_mix.weights)
    avg_price = overall_average_price(service_prices, service_mix.weights)

    revenue = sessions.net * avg_price
    expenses = compute_expenses(assumptions, net_sessions=sessions.net, revenue=revenue)
    total_expenses = expenses.total

    result = ProjectionResult(
        package_mix_sum=package_mix.total,
        service_mix_sum=service_mix.total,
        package_mix_valid=package_mix.is_valid,
        service_mix_valid=service_mix.is_valid,
        mix_is_valid=package_mix.is_valid and service_mix.is_valid,
        gross_sessions=sessions.gross,
        net_sessions=sessions.net,
        avg_price_by_service=service_prices,
        avg_price_by_package=package_prices,
        avg_price_overall=avg_price,
        revenue=revenue,
        variable_costs=expenses.variable_costs,
        card_fees=expenses.card_fees,
        commissions=expenses.commissions,
        staffing_costs=expenses.staffing_costs,
        fixed_costs=expenses.fixed_costs,
        total_expenses=total_expenses,
        result=revenue - total_expenses,
    )
    logger.debug(
        "Projection: net_sessions=%.3f avg_price=%.2f revenue=%.2f result=%.2f mix_valid=%s",
        result.net_sessions, result.avg_price_overall, result.revenue, result.result, result.mix_is_valid,
    )
    return result
