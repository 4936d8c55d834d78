"""
Assumption record (the engine's only input) and its canonical defaults.

The defaults are the spa's baseline scenario. They are never handed out
directly: default_assumptions() returns a deep copy so a working copy can be
edited (or its dicts mutated) without touching the baseline.
"""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass, field
from typing import Dict, Sequence

from .schema import PACKAGE_TIERS, SERVICE_CATALOG, ServiceCatalogEntry


@dataclass(frozen=True)
class StaffRole:
    qty: float = 0.0
    salary: float = 0.0


@dataclass(frozen=True)
class AssumptionRecord:
    # volume
    hot_daily_attendance: float = 0.0
    cold_daily_attendance: float = 0.0
    hot_days: float = 0.0
    cold_days: float = 0.0
    no_show_rate: float = 0.0  # fraction, UI range [0, 0.5]

    # mixes, in percent (intended to sum to 100, never renormalized)
    package_mix: Dict[str, float] = field(default_factory=dict)
    service_mix: Dict[str, float] = field(default_factory=dict)

    # sparse: a missing key means "no override"
    ticket_overrides: Dict[str, float] = field(default_factory=dict)

    # per-session costs and revenue-based rates
    variable_cost_per_session: float = 0.0
    extra_variable_per_session: float = 0.0
    commission_rate: float = 0.0
    card_fee_rate: float = 0.0

    staff: Dict[str, StaffRole] = field(default_factory=dict)
    fixed_expenses: Dict[str, float] = field(default_factory=dict)


def build_even_service_mix(catalog: Sequence[ServiceCatalogEntry] = SERVICE_CATALOG) -> Dict[str, float]:
    """
    Spread 100% across the catalog in one-decimal steps.

    Every entry gets floor(100/n * 10)/10 and the last one takes whatever is
    left (rounded to one decimal), so the mix still sums to 100.
    """
    n = len(catalog)
    if n == 0:
        return {}
    base = math.floor((100.0 / n) * 10) / 10
    mix: Dict[str, float] = {}
    remaining = 100.0
    for i, entry in enumerate(catalog):
        value = round(remaining, 1) if i == n - 1 else base
        mix[entry.id] = value
        remaining -= value
    return mix


_DEFAULTS = AssumptionRecord(
    hot_daily_attendance=23,
    cold_daily_attendance=14,
    hot_days=8,
    cold_days=22,
    no_show_rate=0.104,
    package_mix=dict(zip(PACKAGE_TIERS, (40.0, 30.0, 20.0, 10.0))),
    service_mix=build_even_service_mix(SERVICE_CATALOG),
    ticket_overrides={},
    variable_cost_per_session=69.73,
    extra_variable_per_session=0.0,
    commission_rate=0.15,
    card_fee_rate=0.05,
    staff={
        "terapeutas": StaffRole(qty=10, salary=1900),
        "manobristas": StaffRole(qty=3, salary=2100),
        "recepcionistas": StaffRole(qty=3, salary=3100),
        "copeiras": StaffRole(qty=2, salary=2900),
        "gerente": StaffRole(qty=1, salary=10000),
    },
    fixed_expenses={
        "rent": 20000.0,
        "electricity": 0.0,
        "water": 0.0,
        "internet": 0.0,
        "other": 0.0,
    },
)


def default_assumptions() -> AssumptionRecord:
    """Fresh, fully independent copy of the baseline assumptions."""
    return copy.deepcopy(_DEFAULTS)
