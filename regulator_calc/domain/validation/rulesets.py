"""Default input ranges accepted by the calculator."""

from __future__ import annotations

from ...shared.dto import FieldId
from .engine import FieldRule, ValidationEngine

DEFAULT_RULES = (
    FieldRule(FieldId.VIN, 5, 40),
    FieldRule(FieldId.VOUT, -40, 40, excluded=(-3, 3)),
    FieldRule(FieldId.IOUT, 5, 1000),
    FieldRule(FieldId.FREQ, 20, 100),
    FieldRule(FieldId.RES1, 1, 50),
)


def register_default_rules(engine: ValidationEngine) -> ValidationEngine:
    """Install the standard range for every field."""

    for rule in DEFAULT_RULES:
        engine.register_rule(rule)
    return engine
