from __future__ import annotations

import pytest

from engine.mix import normalize_mix


def test_mix_summing_to_100_is_valid_and_weights_sum_to_one():
    res = normalize_mix({"full": 40, "p5": 30, "p10": 20, "p20": 10})
    assert res.total == 100
    assert res.is_valid is True
    assert res.weights == pytest.approx({"full": 0.4, "p5": 0.3, "p10": 0.2, "p20": 0.1})
    assert sum(res.weights.values()) == pytest.approx(1.0, abs=1e-9)


def test_weights_divide_by_100_not_by_sum():
    res = normalize_mix({"a": 60, "b": 30})
    assert res.total == 90
    assert res.is_valid is False
    assert res.weights == pytest.approx({"a": 0.6, "b": 0.3})
    assert sum(res.weights.values()) == pytest.approx(0.9)


@pytest.mark.parametrize(
    "values, expected",
    [
        ([50.0, 50.0009], True),
        ([50.0, 49.9995], True),
        ([50.0, 50.002], False),
        ([50.0, 49.99], False),
    ],
)
def test_validity_tolerance(values, expected):
    res = normalize_mix({str(i): v for i, v in enumerate(values)})
    assert res.is_valid is expected


def test_empty_mix():
    res = normalize_mix({})
    assert res.weights == {}
    assert res.total == 0
    assert res.is_valid is False


def test_absent_keys_have_no_weight():
    res = normalize_mix({"full": 100})
    assert "p5" not in res.weights
