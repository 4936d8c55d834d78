from __future__ import annotations

from dataclasses import replace

from core.config import StaffRole
from data_prep.validators import validate_assumptions


def test_defaults_pass_cleanly(assumptions):
    res = validate_assumptions(assumptions)
    assert res.is_valid
    assert res.warnings == []
    assert "All checks passed" in res.summary()


def test_mix_problems_are_warnings(assumptions):
    a = replace(assumptions, service_mix={"ghost": 50.0}, package_mix={"full": 60, "p50": 40})
    res = validate_assumptions(a)
    assert res.is_valid
    text = "\n".join(res.warnings)
    assert "Package mix sums to 60%" in text
    assert "unknown tiers" in text
    assert "Service mix sums to 50%" in text
    assert "'ghost'" in text


def test_out_of_range_rates_warn(assumptions):
    a = replace(assumptions, no_show_rate=0.8, commission_rate=15.0, hot_days=20, cold_days=20)
    res = validate_assumptions(a)
    assert res.is_valid
    assert len(res.warnings) == 3


def test_negative_inputs_are_errors(assumptions):
    a = replace(
        assumptions,
        hot_days=-1,
        ticket_overrides={"relaxante-60": -10.0},
        staff={**assumptions.staff, "gerente": StaffRole(qty=1, salary=-1)},
        fixed_expenses={"rent": -5.0},
    )
    res = validate_assumptions(a)
    assert not res.is_valid
    assert len(res.errors) == 4
    assert res.summary().startswith("ERRORS (4):")


def test_override_for_unknown_service_warns(assumptions):
    res = validate_assumptions(replace(assumptions, ticket_overrides={"nope": 100.0}))
    assert any("unknown services" in w for w in res.warnings)
