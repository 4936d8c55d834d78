from __future__ import annotations

from dataclasses import replace

import pytest

from core.config import default_assumptions
from core.schema import SERVICE_CATALOG
from engine import compute


def test_baseline_projection_is_consistent(assumptions):
    res = compute(assumptions)
    assert res.mix_is_valid is True
    assert res.package_mix_sum == pytest.approx(100)
    assert res.service_mix_sum == pytest.approx(100)
    assert res.gross_sessions == 492
    assert res.net_sessions == pytest.approx(440.832)
    assert len(res.avg_price_by_service) == len(SERVICE_CATALOG)
    assert res.revenue == pytest.approx(res.net_sessions * res.avg_price_overall)
    assert res.staffing_costs == pytest.approx(90720.0)
    assert res.fixed_costs == 20000
    assert res.card_fees == pytest.approx(res.revenue * 0.05)
    assert res.commissions == pytest.approx(res.revenue * 0.15)


def test_result_identity_is_exact(assumptions):
    for a in (assumptions, replace(assumptions, no_show_rate=0.33, commission_rate=0.27)):
        res = compute(a)
        assert res.result == res.revenue - res.total_expenses
        assert res.total_expenses == (
            res.variable_costs + res.card_fees + res.commissions + res.staffing_costs + res.fixed_costs
        )


def test_repeated_calls_are_identical(assumptions):
    assert compute(assumptions) == compute(assumptions)
    assert compute(assumptions) == compute(default_assumptions())


def test_single_service_scenario(assumptions, single_service_catalog):
    a = replace(assumptions, service_mix={"massage-50": 100})
    res = compute(a, single_service_catalog)
    assert res.net_sessions == pytest.approx(492 * 0.896)
    assert res.avg_price_by_package["full"] == 520
    assert res.avg_price_overall == pytest.approx(470.6)
    assert res.revenue == pytest.approx(440.832 * 470.6)
    assert res.mix_is_valid is True


def test_invalid_service_mix(assumptions, two_service_catalog):
    a = replace(assumptions, package_mix={"full": 100}, service_mix={"a": 60, "b": 30})
    res = compute(a, two_service_catalog)
    assert res.service_mix_sum == 90
    assert res.service_mix_valid is False
    assert res.package_mix_valid is True
    assert res.mix_is_valid is False
    assert res.avg_price_overall == pytest.approx(100 * 0.6 + 200 * 0.3)


def test_override_moves_overall_but_not_tier_prices(assumptions):
    base = compute(assumptions)
    blended = base.price_for_service("miracle-corporal-50").avg_price
    a = replace(assumptions, ticket_overrides={"miracle-corporal-50": 1000.0})
    res = compute(a)

    item = res.price_for_service("miracle-corporal-50")
    assert item.avg_price == 1000.0
    assert item.is_override is True
    assert res.avg_price_by_package == base.avg_price_by_package
    weight = assumptions.service_mix["miracle-corporal-50"] / 100
    assert res.avg_price_overall == pytest.approx(base.avg_price_overall + (1000.0 - blended) * weight)

    cleared = compute(replace(a, ticket_overrides={}))
    assert cleared.price_for_service("miracle-corporal-50") == base.price_for_service("miracle-corporal-50")


def test_unknown_package_tiers_are_ignored(assumptions):
    a = replace(assumptions, package_mix={**assumptions.package_mix, "p50": 25})
    res = compute(a)
    assert res.package_mix_sum == pytest.approx(100)
    assert res.package_mix_valid is True


def test_unknown_service_ids_count_in_sum_only(assumptions, two_service_catalog):
    a = replace(assumptions, package_mix={"full": 100}, service_mix={"a": 50, "ghost": 50})
    res = compute(a, two_service_catalog)
    assert res.service_mix_sum == 100
    assert res.service_mix_valid is True
    assert res.avg_price_overall == pytest.approx(50.0)


def test_empty_catalog(assumptions):
    res = compute(assumptions, ())
    assert res.avg_price_by_service == ()
    assert res.avg_price_overall == 0
    assert res.revenue == 0
    assert res.result == -res.total_expenses


def test_price_for_unknown_service_raises(assumptions):
    with pytest.raises(KeyError):
        compute(assumptions).price_for_service("nope")


def test_to_dict(assumptions):
    d = compute(assumptions).to_dict()
    assert d["mix_is_valid"] is True
    assert d["avg_price_by_service"][0]["service_id"] == "miracle-corporal-50"
