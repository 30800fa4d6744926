"""Validation engine responsible for enforcing the input ranges."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Mapping, Optional

from ...shared.dto import FieldId, IssueKind, UserValues, ValidationIssue
from ..regulators.base import InvalidInputError
from .parsing import parse_fields


@dataclass(slots=True, frozen=True)
class FieldRule:
    """Inclusive range for one field, optionally minus an open interval."""

    field_id: FieldId
    lower: float
    upper: float
    excluded: Optional[tuple[float, float]] = None

    def is_satisfied(self, value: float) -> bool:
        # NaN fails the range comparison below
        if not self.lower <= value <= self.upper:
            return False
        if self.excluded is not None:
            low, high = self.excluded
            if low < value < high:
                return False
        return True

    def describe(self) -> str:
        text = f"{self.field_id.value} must be between {self.lower:g} and {self.upper:g}"
        if self.excluded is not None:
            low, high = self.excluded
            text += f" and outside ({low:g}, {high:g})"
        return text


@dataclass(slots=True)
class ValidationReport:
    """Outcome of checking raw or parsed input."""

    issues: List[ValidationIssue] = field(default_factory=list)
    values: Optional[UserValues] = None

    @property
    def ok(self) -> bool:
        return not self.issues

    @property
    def fields(self) -> FrozenSet[FieldId]:
        return frozenset(issue.field_id for issue in self.issues)


def out_of_limits_message(count: int) -> str:
    """User-facing summary for ``count`` offending fields."""

    if count == 1:
        return "1 field is out of limits"
    return f"{count} fields are out of limits"


class ValidationFailedError(InvalidInputError):
    """Raised when blocking validation issues prevent a calculation."""

    def __init__(self, issues: List[ValidationIssue]):
        self.issues: List[ValidationIssue] = list(issues)
        super().__init__(out_of_limits_message(len(self.fields)))

    @property
    def fields(self) -> FrozenSet[FieldId]:
        return frozenset(issue.field_id for issue in self.issues)


def _field_order(issue: ValidationIssue) -> int:
    return list(FieldId).index(issue.field_id)


class ValidationEngine:
    """Central coordinator that evaluates every field rule."""

    def __init__(self) -> None:
        self._rules: Dict[FieldId, FieldRule] = {}

    def register_rule(self, rule: FieldRule, *, override: bool = False) -> None:
        """Register the rule for a field."""

        if not override and rule.field_id in self._rules:
            raise ValueError(f"Rule for {rule.field_id.value} already registered")

        self._rules[rule.field_id] = rule

    def get_rule(self, field_id: FieldId) -> FieldRule:
        """Retrieve the registered rule for a field."""

        try:
            return self._rules[field_id]
        except KeyError as exc:
            raise LookupError(f"No rule registered for {field_id.value}") from exc

    def check(self, values: UserValues) -> List[ValidationIssue]:
        """Evaluate all rules and collect issues; never stops at the first."""

        return self._check_numbers({fid: getattr(values, fid.value) for fid in FieldId})

    def check_raw(self, raw: Mapping[str, Optional[str]]) -> ValidationReport:
        """Parse raw strings and range-check the ones that are numbers."""

        parsed = parse_fields(raw)
        issues = parsed.issues + self._check_numbers(parsed.values)
        issues.sort(key=_field_order)

        report = ValidationReport(issues=issues)
        if report.ok:
            report.values = UserValues.from_mapping({fid.value: v for fid, v in parsed.values.items()})
        return report

    def validate(self, values: UserValues) -> FrozenSet[FieldId]:
        """Fields whose value violates its rule; empty when valid."""

        return frozenset(issue.field_id for issue in self.check(values))

    def _check_numbers(self, numbers: Mapping[FieldId, float]) -> List[ValidationIssue]:
        issues: List[ValidationIssue] = []
        for field_id in FieldId:
            rule = self._rules.get(field_id)
            if rule is None or field_id not in numbers:
                continue
            value = numbers[field_id]
            if rule.is_satisfied(value):
                continue
            issues.append(
                ValidationIssue(
                    field_id=field_id,
                    kind=IssueKind.OUT_OF_RANGE,
                    message=rule.describe(),
                    details={"value": value},
                )
            )
        return issues
