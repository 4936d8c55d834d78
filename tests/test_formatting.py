from __future__ import annotations

import pytest

from core.utils import excel_round, format_currency, format_number, format_percent

NBSP = "\u00a0"


@pytest.mark.parametrize(
    "value, expected",
    [
        (1234.5, f"R${NBSP}1.234,50"),
        (440.832 * 470.6, f"R${NBSP}207.455,54"),
        (0, f"R${NBSP}0,00"),
        (-1234.5, f"-R${NBSP}1.234,50"),
        (1_000_000, f"R${NBSP}1.000.000,00"),
        (1.005, f"R${NBSP}1,01"),
        (-1.005, f"-R${NBSP}1,01"),
        (2.675, f"R${NBSP}2,68"),
    ],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (440.832, "440,83"),
        (492, "492"),
        (1137, "1.137"),
        (0.5, "0,5"),
        (1234567.891, "1.234.567,89"),
        (-12.25, "-12,25"),
        (1.005, "1,01"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.104, "10,4%"),
        (0.15, "15,0%"),
        (1, "100,0%"),
        (0, "0,0%"),
        (0.0105, "1,1%"),
        (0.00049, "0,0%"),
    ],
)
def test_format_percent(value, expected):
    assert format_percent(value) == expected


def test_tiny_negative_rounds_without_sign():
    assert format_currency(-0.001) == f"R${NBSP}0,00"
    assert format_number(-0.001) == "0"


def test_excel_round_is_half_away_from_zero():
    assert float(excel_round(2.5, 0)) == 3.0
    assert float(excel_round(-2.5, 0)) == -3.0
    assert float(excel_round(1.25, 1)) == 1.3
