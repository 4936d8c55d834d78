from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

# Package tiers in catalog order: full price, then the 5/10/20-session packages.
PACKAGE_TIERS: Tuple[str, ...] = ("full", "p5", "p10", "p20")

PACKAGE_TIER_LABELS: Dict[str, str] = {
    "full": "Preço cheio",
    "p5": "Pac 5 (-10%)",
    "p10": "Pac 10 (-20%)",
    "p20": "Pac 20 (-25%)",
}

PAYROLL_BURDEN_MULTIPLIER: float = 1.8  # salary -> employer cost
MIX_TARGET: float = 100.0
MIX_TOLERANCE: float = 0.001
MONTHS_PER_YEAR: int = 12


@dataclass(frozen=True)
class PriceTable:
    """Session price for each package tier."""

    full: float
    p5: float
    p10: float
    p20: float

    def price_for(self, tier: str) -> float:
        if tier not in PACKAGE_TIERS:
            raise KeyError(f"Unknown package tier: {tier!r}")
        return float(getattr(self, tier))

    def as_tuple(self) -> Tuple[float, ...]:
        return tuple(self.price_for(t) for t in PACKAGE_TIERS)


@dataclass(frozen=True)
class ServiceCatalogEntry:
    id: str
    name: str
    duration: str
    prices: PriceTable

    @property
    def label(self) -> str:
        return f"{self.name} {self.duration}"


SERVICE_CATALOG: Tuple[ServiceCatalogEntry, ...] = (
    ServiceCatalogEntry("miracle-corporal-50", "Miracle Corporal", "50'", PriceTable(520, 468, 416, 390)),
    ServiceCatalogEntry("miracle-corporal-80", "Miracle Corporal", "80'", PriceTable(720, 648, 576, 540)),
    ServiceCatalogEntry("miracle-face-30", "Miracle Face", "30'", PriceTable(320, 288, 256, 240)),
    ServiceCatalogEntry("relaxante-60", "Relaxante", "60'", PriceTable(520, 468, 416, 390)),
    ServiceCatalogEntry("relaxante-80", "Relaxante", "80'", PriceTable(720, 648, 576, 540)),
    ServiceCatalogEntry("drenagem-50", "Drenagem", "50'", PriceTable(520, 468, 416, 390)),
    ServiceCatalogEntry("ayurvedica-80", "Ayurvédica", "80'", PriceTable(720, 648, 576, 540)),
)


def catalog_by_id(catalog: Iterable[ServiceCatalogEntry]) -> Dict[str, ServiceCatalogEntry]:
    return {entry.id: entry for entry in catalog}
