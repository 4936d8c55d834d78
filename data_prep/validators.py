"""
Sanity checks on an assumption record before it is shown next to a result.

Nothing here stops the engine from running. Errors flag inputs that make
the projection meaningless (negative head counts, days, amounts); warnings
flag inputs that are legal but worth a second look (mixes off 100, rates
outside the usual range, overrides for services not in the catalog).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from core.config import AssumptionRecord
from core.schema import PACKAGE_TIERS, SERVICE_CATALOG, ServiceCatalogEntry
from core.utils import format_number
from engine.mix import normalize_mix

NO_SHOW_UI_MAX = 0.5


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for an assumption record."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_assumptions(
    assumptions: AssumptionRecord,
    *,
    catalog: Sequence[ServiceCatalogEntry] = SERVICE_CATALOG,
) -> ValidationResult:
    result = ValidationResult()
    a = assumptions

    # --- Volume ---
    for name in ("hot_daily_attendance", "cold_daily_attendance", "hot_days", "cold_days"):
        if getattr(a, name) < 0:
            result.errors.append(f"{name} is negative ({getattr(a, name)}).")
    if a.hot_days + a.cold_days > 31:
        result.warnings.append(
            f"hot_days + cold_days = {format_number(a.hot_days + a.cold_days)} exceeds 31 days/month."
        )
    if not 0.0 <= a.no_show_rate <= NO_SHOW_UI_MAX:
        result.warnings.append(f"no_show_rate {a.no_show_rate} is outside [0, {NO_SHOW_UI_MAX}].")

    # --- Rates ---
    for name in ("commission_rate", "card_fee_rate"):
        rate = getattr(a, name)
        if not 0.0 <= rate <= 1.0:
            result.warnings.append(f"{name} {rate} is outside [0, 1]; check percent vs fraction.")
    for name in ("variable_cost_per_session", "extra_variable_per_session"):
        if getattr(a, name) < 0:
            result.errors.append(f"{name} is negative ({getattr(a, name)}).")

    # --- Mixes ---
    package_mix = normalize_mix({t: a.package_mix[t] for t in PACKAGE_TIERS if t in a.package_mix})
    if not package_mix.is_valid:
        result.warnings.append(f"Package mix sums to {format_number(package_mix.total)}%, not 100%.")
    unknown_tiers = sorted(set(a.package_mix) - set(PACKAGE_TIERS))
    if unknown_tiers:
        result.warnings.append(f"Package mix has unknown tiers (ignored): {unknown_tiers}")

    service_mix = normalize_mix(a.service_mix)
    if not service_mix.is_valid:
        result.warnings.append(f"Service mix sums to {format_number(service_mix.total)}%, not 100%.")

    known_ids = {entry.id for entry in catalog}
    unknown_mix = sorted(set(a.service_mix) - known_ids)
    if unknown_mix:
        result.warnings.append(f"Service mix has entries for unknown services: {unknown_mix}")
    for key, value in {**a.package_mix, **a.service_mix}.items():
        if value < 0:
            result.errors.append(f"Mix entry {key!r} is negative ({value}).")

    # --- Overrides ---
    unknown_overrides = sorted(set(a.ticket_overrides) - known_ids)
    if unknown_overrides:
        result.warnings.append(f"Ticket overrides for unknown services (ignored): {unknown_overrides}")
    for service_id, price in a.ticket_overrides.items():
        if price < 0:
            result.errors.append(f"Ticket override for {service_id!r} is negative ({price}).")

    # --- Staff / fixed ---
    for role, staff in a.staff.items():
        if staff.qty < 0 or staff.salary < 0:
            result.errors.append(f"Staff role {role!r} has negative qty or salary.")
    for item, amount in a.fixed_expenses.items():
        if amount < 0:
            result.errors.append(f"Fixed expense {item!r} is negative ({amount}).")

    return result
