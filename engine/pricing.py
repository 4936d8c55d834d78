"""
Ticket pricing: per-service prices from the package mix, then service-mix blends.

Two weightings are applied independently:
  1. Package mix (full / p5 / p10 / p20) blends each service's tier prices
     into one ticket per service. A manual override replaces that ticket.
  2. Service mix blends across services:
       - per tier, from catalog prices only (overrides never enter here)
       - overall, from the resolved per-service tickets (overrides do count)

Missing weight keys count as 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Sequence, Tuple

import numpy as np

from core.schema import PACKAGE_TIERS, ServiceCatalogEntry


@dataclass(frozen=True)
class ServicePrice:
    service_id: str
    avg_price: float
    is_override: bool


def tier_price_matrix(catalog: Sequence[ServiceCatalogEntry]) -> np.ndarray:
    """Catalog prices as an (n_services, n_tiers) array, tiers in PACKAGE_TIERS order."""
    rows = [entry.prices.as_tuple() for entry in catalog]
    return np.array(rows, dtype=float).reshape(-1, len(PACKAGE_TIERS))


def _weight_vector(weights: Mapping[str, float], keys: Sequence[str]) -> np.ndarray:
    return np.array([weights.get(k, 0.0) for k in keys], dtype=float)


def resolve_service_prices(
    catalog: Sequence[ServiceCatalogEntry],
    package_weights: Mapping[str, float],
    overrides: Mapping[str, float],
) -> Tuple[ServicePrice, ...]:
    """
    Blended ticket per service: Σ tier price × package weight.

    An override present for a service is returned as-is (0 included) with
    is_override=True; it is never blended.
    """
    blended = tier_price_matrix(catalog) @ _weight_vector(package_weights, PACKAGE_TIERS)

    out = []
    for entry, value in zip(catalog, blended):
        override = overrides.get(entry.id)
        if override is not None:
            out.append(ServicePrice(entry.id, float(override), True))
        else:
            out.append(ServicePrice(entry.id, float(value), False))
    return tuple(out)


def blend_package_prices(
    catalog: Sequence[ServiceCatalogEntry],
    service_weights: Mapping[str, float],
) -> Dict[str, float]:
    """Per-tier price across services: Σ tier price[service] × service weight."""
    weights = _weight_vector(service_weights, [entry.id for entry in catalog])
    totals = weights @ tier_price_matrix(catalog)
    return {tier: float(v) for tier, v in zip(PACKAGE_TIERS, totals)}


def overall_average_price(
    service_prices: Sequence[ServicePrice],
    service_weights: Mapping[str, float],
) -> float:
    """Σ resolved ticket × service weight (weights not rescaled to 1)."""
    prices = np.array([p.avg_price for p in service_prices], dtype=float)
    weights = _weight_vector(service_weights, [p.service_id for p in service_prices])
    return float(np.dot(prices, weights))
