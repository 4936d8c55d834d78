"""
Mix normalization: percent mappings to unit weights.

Each entry is divided by the fixed constant 100, NOT by the mix's own sum.
A mix that adds up to 90 therefore blends to 90% of the full price level;
the validity flag is the only signal that the mix is off.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping

from core.schema import MIX_TARGET, MIX_TOLERANCE


@dataclass(frozen=True)
class MixResult:
    weights: Dict[str, float]
    total: float
    is_valid: bool


def normalize_mix(mix: Mapping[str, float]) -> MixResult:
    total = sum(mix.values(), 0.0)
    weights = {key: value / MIX_TARGET for key, value in mix.items()}
    return MixResult(
        weights=weights,
        total=total,
        is_valid=abs(total - MIX_TARGET) < MIX_TOLERANCE,
    )
