"""Parsing and range validation for user input."""

from __future__ import annotations

from typing import FrozenSet

from ...shared.dto import FieldId, UserValues
from .engine import (
    FieldRule,
    ValidationEngine,
    ValidationFailedError,
    ValidationReport,
    out_of_limits_message,
)
from .parsing import MalformedFieldError, ParseOutcome, parse_fields, parse_value
from .rulesets import DEFAULT_RULES, register_default_rules

_default_engine = register_default_rules(ValidationEngine())


def default_engine() -> ValidationEngine:
    """Engine preloaded with the standard field ranges."""

    return _default_engine


def validate(values: UserValues) -> FrozenSet[FieldId]:
    """Fields of ``values`` that are out of limits; empty means valid."""

    return _default_engine.validate(values)


__all__ = [
    "DEFAULT_RULES",
    "FieldRule",
    "MalformedFieldError",
    "ParseOutcome",
    "ValidationEngine",
    "ValidationFailedError",
    "ValidationReport",
    "default_engine",
    "out_of_limits_message",
    "parse_fields",
    "parse_value",
    "register_default_rules",
    "validate",
]
