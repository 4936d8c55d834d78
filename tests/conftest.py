from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import AssumptionRecord, default_assumptions  # noqa: E402
from core.schema import PriceTable, ServiceCatalogEntry  # noqa: E402


@pytest.fixture
def assumptions() -> AssumptionRecord:
    return default_assumptions()


@pytest.fixture
def single_service_catalog():
    return (ServiceCatalogEntry("massage-50", "Massage", "50'", PriceTable(520, 468, 416, 390)),)


@pytest.fixture
def two_service_catalog():
    return (
        ServiceCatalogEntry("a", "Service A", "30'", PriceTable(100, 90, 80, 75)),
        ServiceCatalogEntry("b", "Service B", "60'", PriceTable(200, 180, 160, 150)),
    )
