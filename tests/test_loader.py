from __future__ import annotations

import json
import logging

import pytest
from pydantic import ValidationError

from core.config import StaffRole
from data_prep.loader import (
    assumptions_from_dict,
    load_assumptions,
    load_catalog_csv,
    save_assumptions,
)

CATALOG_CSV = """id,name,duration,full,p5,p10,p20
hot-stone-60,Pedras Quentes,60',600,540,480,450
reflexo-30,Reflexologia,30',250,225,200,187.5
"""


def test_partial_file_overlays_defaults(tmp_path, assumptions):
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps({"hot_days": 10, "staff": {"terapeutas": {"qty": 12, "salary": 2000}}}))

    loaded = load_assumptions(path)
    assert loaded.hot_days == 10.0
    assert loaded.cold_days == assumptions.cold_days
    assert loaded.staff == {"terapeutas": StaffRole(qty=12, salary=2000)}
    assert loaded.service_mix == assumptions.service_mix


def test_save_then_load(tmp_path, assumptions):
    path = tmp_path / "saved.json"
    save_assumptions(assumptions, path)
    assert load_assumptions(path) == assumptions


def test_bad_value_raises_validation_error():
    with pytest.raises(ValidationError):
        assumptions_from_dict({"hot_days": "abc"})


def test_numeric_strings_are_coerced():
    assert assumptions_from_dict({"no_show_rate": "0.2"}).no_show_rate == 0.2


def test_top_level_must_be_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]")
    with pytest.raises(ValueError):
        load_assumptions(path)


def test_load_logs_validation_warnings(tmp_path, caplog):
    path = tmp_path / "off.json"
    path.write_text(json.dumps({"package_mix": {"full": 50}}))
    with caplog.at_level(logging.WARNING, logger="data_prep.loader"):
        load_assumptions(path)
    assert any("Package mix sums to 50%" in r.getMessage() for r in caplog.records)


def test_load_catalog_csv(tmp_path):
    path = tmp_path / "catalog.csv"
    path.write_text(CATALOG_CSV, encoding="utf-8")
    catalog = load_catalog_csv(path)
    assert [e.id for e in catalog] == ["hot-stone-60", "reflexo-30"]
    assert catalog[1].prices.p20 == 187.5
    assert catalog[0].label == "Pedras Quentes 60'"


def test_catalog_missing_column(tmp_path):
    path = tmp_path / "catalog.csv"
    path.write_text("id,name,full\nx,X,10\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Missing required columns"):
        load_catalog_csv(path)


def test_catalog_non_numeric_price(tmp_path):
    path = tmp_path / "catalog.csv"
    path.write_text(CATALOG_CSV.replace("225", "abc"), encoding="utf-8")
    with pytest.raises(ValueError, match="reflexo-30"):
        load_catalog_csv(path)


def test_catalog_duplicate_ids(tmp_path):
    path = tmp_path / "catalog.csv"
    path.write_text(CATALOG_CSV + "reflexo-30,Outra,30',1,1,1,1\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Duplicate"):
        load_catalog_csv(path)
