"""Conversion of raw form strings into numbers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from ...shared.dto import FieldId, IssueKind, ValidationIssue
from ..regulators.base import InvalidInputError


class MalformedFieldError(InvalidInputError):
    """Raised when a raw field value is not a finite number."""

    def __init__(self, field_id: FieldId, raw: Optional[str]):
        self.field_id = field_id
        self.raw = raw
        super().__init__(f"Field '{field_id.value}' requires a numeric value, got {raw!r}")

    def to_issue(self) -> ValidationIssue:
        return ValidationIssue(
            field_id=self.field_id,
            kind=IssueKind.MALFORMED,
            message=str(self),
            details={"raw": "" if self.raw is None else self.raw},
        )


@dataclass(slots=True)
class ParseOutcome:
    """Numbers for the well-formed fields and issues for the rest."""

    values: Dict[FieldId, float] = field(default_factory=dict)
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues


def parse_value(field_id: FieldId, raw: Optional[str]) -> float:
    """Parse one raw field; empty, missing or non-finite input is rejected."""

    text = (raw or "").strip()
    if not text:
        raise MalformedFieldError(field_id, raw)
    try:
        value = float(text)
    except ValueError as exc:
        raise MalformedFieldError(field_id, raw) from exc
    if not math.isfinite(value):
        raise MalformedFieldError(field_id, raw)
    return value


def parse_fields(raw: Mapping[str, Optional[str]]) -> ParseOutcome:
    """Parse all five fields, collecting every malformed one."""

    outcome = ParseOutcome()
    for field_id in FieldId:
        try:
            outcome.values[field_id] = parse_value(field_id, raw.get(field_id.value))
        except MalformedFieldError as exc:
            outcome.issues.append(exc.to_issue())
    return outcome
