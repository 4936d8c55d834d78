from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

import numpy as np
import pandas as pd

# Intl pt-BR puts a no-break space between the currency symbol and the amount.
_NBSP = "\u00a0"


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def excel_round(x, decimals: int = 2):
    """Excel ROUND: half away from zero (vectorized)."""
    m = 10 ** decimals
    x = np.asarray(x, dtype=float)
    return np.sign(x) * (np.floor(np.abs(x) * m + 0.5) / m)


def _display_round(value: float, decimals: int, scale: int = 1) -> Decimal:
    """
    Round the shortest decimal form of `value` (what repr prints) half away from zero.

    Intl.NumberFormat works on that decimal string, not on the binary double,
    so 1.005 rounds to 1.01 here while excel_round(1.005, 2) gives 1.0.
    """
    exact = Decimal(repr(float(value))) * scale
    return exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def _pt_br_digits(value: Decimal, decimals: int) -> str:
    """Absolute value with pt-BR separators: '.' groups thousands, ',' marks decimals."""
    text = f"{abs(value):,.{decimals}f}"
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def _sign(rounded: Decimal) -> str:
    return "-" if rounded < 0 else ""


def format_currency(value: float) -> str:
    """Brazilian Real, two fraction digits: 207455.5392 -> 'R$ 207.455,54'."""
    rounded = _display_round(value, 2)
    return f"{_sign(rounded)}R${_NBSP}{_pt_br_digits(rounded, 2)}"


def format_number(value: float) -> str:
    """pt-BR grouping, at most two fraction digits, no trailing zeros."""
    rounded = _display_round(value, 2)
    digits = _pt_br_digits(rounded, 2)
    if "," in digits:
        digits = digits.rstrip("0").rstrip(",")
    return f"{_sign(rounded)}{digits}"


def format_percent(value: float) -> str:
    """Fraction of 1 as a percentage with exactly one decimal: 0.104 -> '10,4%'."""
    rounded = _display_round(value, 1, scale=100)
    return f"{_sign(rounded)}{_pt_br_digits(rounded, 1)}%"
