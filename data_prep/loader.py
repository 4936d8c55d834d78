"""
File loaders: assumption records from JSON, service catalogs from CSV.

Assumption files are validated with pydantic against the AssumptionRecord
dataclass. Top-level sections missing from the file keep their baseline
values, so a file can carry only what differs from the defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import pandas as pd
from pydantic import TypeAdapter

from core.config import AssumptionRecord, default_assumptions
from core.schema import PACKAGE_TIERS, PriceTable, ServiceCatalogEntry
from core.utils import require_columns

from .validators import validate_assumptions

logger = logging.getLogger(__name__)

CATALOG_COLUMNS: Tuple[str, ...] = ("id", "name", "duration") + PACKAGE_TIERS

_ASSUMPTIONS_ADAPTER = TypeAdapter(AssumptionRecord)


def assumptions_to_dict(assumptions: AssumptionRecord) -> Dict[str, Any]:
    return asdict(assumptions)


def assumptions_from_dict(data: Dict[str, Any]) -> AssumptionRecord:
    """Overlay `data` on the baseline and validate (raises pydantic.ValidationError)."""
    merged = assumptions_to_dict(default_assumptions())
    merged.update(data)
    return _ASSUMPTIONS_ADAPTER.validate_python(merged)


def load_assumptions(path: Union[str, Path]) -> AssumptionRecord:
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object at top level, got {type(data).__name__}")
    assumptions = assumptions_from_dict(data)
    logger.info("Loaded assumptions from %s", path)
    for warning in validate_assumptions(assumptions).warnings:
        logger.warning("%s: %s", path.name, warning)
    return assumptions


def save_assumptions(assumptions: AssumptionRecord, path: Union[str, Path]) -> None:
    path = Path(path)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(assumptions_to_dict(assumptions), fh, ensure_ascii=False, indent=2)
    logger.info("Saved assumptions to %s", path)


def load_catalog_csv(path: Union[str, Path]) -> Tuple[ServiceCatalogEntry, ...]:
    """
    Load a service catalog from CSV with columns id, name, duration, full, p5, p10, p20.
    """
    df = pd.read_csv(path, dtype={"id": str, "name": str, "duration": str})
    require_columns(df, CATALOG_COLUMNS)

    for tier in PACKAGE_TIERS:
        df[tier] = pd.to_numeric(df[tier], errors="coerce")
    bad = df[list(PACKAGE_TIERS)].isna().any(axis=1)
    if bad.any():
        raise ValueError(f"Non-numeric prices for services: {df.loc[bad, 'id'].tolist()}")

    dup = df["id"].duplicated()
    if dup.any():
        raise ValueError(f"Duplicate service ids: {df.loc[dup, 'id'].tolist()}")

    catalog = tuple(
        ServiceCatalogEntry(
            id=row["id"],
            name=row["name"],
            duration=row["duration"],
            prices=PriceTable(*(float(row[t]) for t in PACKAGE_TIERS)),
        )
        for _, row in df.iterrows()
    )
    logger.info("Loaded %d catalog entries from %s", len(catalog), path)
    return catalog
