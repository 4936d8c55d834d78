"""
Input layer: raw form text and slider values into AssumptionRecord updates.

The engine never sees raw text. Everything typed by a user passes through
parse_number() first (comma decimals accepted, junk becomes 0), and each
commit returns a NEW record; the previous one is left untouched.
"""

from __future__ import annotations

import math
from dataclasses import fields, replace
from typing import Optional, Union

from core.config import AssumptionRecord, StaffRole, default_assumptions
from core.schema import MIX_TARGET

RawValue = Union[str, int, float]

_SCALAR_FIELDS = frozenset(
    f.name
    for f in fields(AssumptionRecord)
    if f.name not in {"package_mix", "service_mix", "ticket_overrides", "staff", "fixed_expenses"}
)

_RATE_FIELDS = frozenset({"no_show_rate", "commission_rate", "card_fee_rate"})

_INT_PREFIXES = ("0x", "0o", "0b")


def parse_number(raw: Optional[RawValue]) -> float:
    """'12,5' -> 12.5, '0x10' -> 16.0; empty, unparseable or non-finite input -> 0.0."""
    if raw is None:
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
        return value if math.isfinite(value) else 0.0

    text = str(raw).strip().replace(",", ".", 1)
    if not text or "_" in text:
        return 0.0
    try:
        value = float(text)
    except ValueError:
        value = _parse_prefixed_int(text)
    return value if math.isfinite(value) else 0.0


def _parse_prefixed_int(text: str) -> float:
    """Unsigned 0x / 0o / 0b literals, as a browser number field accepts them."""
    if text[:2].lower() not in _INT_PREFIXES:
        return 0.0
    try:
        return float(int(text, 0))
    except (ValueError, OverflowError):
        return 0.0


def set_field(assumptions: AssumptionRecord, name: str, raw: RawValue) -> AssumptionRecord:
    if name not in _SCALAR_FIELDS:
        raise KeyError(f"Not a numeric assumption field: {name!r}")
    return replace(assumptions, **{name: parse_number(raw)})


def set_rate_from_percent(assumptions: AssumptionRecord, name: str, raw: RawValue) -> AssumptionRecord:
    """Sliders show rates as percent (10.4); the record stores fractions (0.104)."""
    if name not in _RATE_FIELDS:
        raise KeyError(f"Not a rate field: {name!r}")
    return replace(assumptions, **{name: parse_number(raw) / 100})


def set_package_mix(assumptions: AssumptionRecord, tier: str, raw: RawValue) -> AssumptionRecord:
    return replace(assumptions, package_mix={**assumptions.package_mix, tier: parse_number(raw)})


def set_staff(
    assumptions: AssumptionRecord,
    role: str,
    *,
    qty: Optional[RawValue] = None,
    salary: Optional[RawValue] = None,
) -> AssumptionRecord:
    current = assumptions.staff.get(role, StaffRole())
    updated = StaffRole(
        qty=current.qty if qty is None else parse_number(qty),
        salary=current.salary if salary is None else parse_number(salary),
    )
    return replace(assumptions, staff={**assumptions.staff, role: updated})


def set_fixed_expense(assumptions: AssumptionRecord, item: str, raw: RawValue) -> AssumptionRecord:
    return replace(assumptions, fixed_expenses={**assumptions.fixed_expenses, item: parse_number(raw)})


def commit_service_mix(assumptions: AssumptionRecord, service_id: str, raw: str) -> AssumptionRecord:
    """
    Store one service-mix percentage, capped so the mix cannot exceed 100.

    Blank text is ignored (the record comes back unchanged). Negative values
    become 0; values above 100 − (sum of the other services) are cut down to
    that headroom.
    """
    text = str(raw).strip()
    if not text:
        return assumptions

    value = max(parse_number(text), 0.0)
    others = sum((v for k, v in assumptions.service_mix.items() if k != service_id), 0.0)
    clamped = min(value, max(0.0, MIX_TARGET - others))
    return replace(assumptions, service_mix={**assumptions.service_mix, service_id: clamped})


def commit_service_ticket(assumptions: AssumptionRecord, service_id: str, raw: str) -> AssumptionRecord:
    """
    Set or clear the manual ticket for one service.

    Blank text removes the override key entirely; anything else is stored as
    max(parsed, 0).
    """
    text = str(raw).strip()
    overrides = dict(assumptions.ticket_overrides)
    if not text:
        overrides.pop(service_id, None)
    else:
        overrides[service_id] = max(parse_number(text), 0.0)
    return replace(assumptions, ticket_overrides=overrides)


def reset_assumptions() -> AssumptionRecord:
    return default_assumptions()
