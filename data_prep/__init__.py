"""
Data preparation: raw input parsing, assumption/catalog loading, validation.
"""

from .inputs import (
    parse_number,
    set_field,
    set_rate_from_percent,
    set_package_mix,
    set_staff,
    set_fixed_expense,
    commit_service_mix,
    commit_service_ticket,
    reset_assumptions,
)
from .loader import (
    assumptions_from_dict,
    assumptions_to_dict,
    load_assumptions,
    save_assumptions,
    load_catalog_csv,
)
from .validators import ValidationResult, validate_assumptions

__all__ = [
    "parse_number",
    "set_field",
    "set_rate_from_percent",
    "set_package_mix",
    "set_staff",
    "set_fixed_expense",
    "commit_service_mix",
    "commit_service_ticket",
    "reset_assumptions",
    "assumptions_from_dict",
    "assumptions_to_dict",
    "load_assumptions",
    "save_assumptions",
    "load_catalog_csv",
    "ValidationResult",
    "validate_assumptions",
]
