"""Range checks and raw-input parsing."""

import math

import pytest

from regulator_calc import FieldId, UserValues, out_of_limits_message, validate
from regulator_calc.domain.validation import (
    FieldRule,
    MalformedFieldError,
    ValidationEngine,
    default_engine,
    parse_fields,
    parse_value,
)
from regulator_calc.shared.dto import IssueKind

VALID = dict(vin=12.0, vout=5.0, iout=500.0, freq=50.0, res1=10.0)


def _with(**overrides):
    return UserValues(**{**VALID, **overrides})


class TestFieldBounds:
    @pytest.mark.parametrize(
        "field, value",
        [
            ("vin", 5), ("vin", 40),
            ("vout", -40), ("vout", -3), ("vout", 3), ("vout", 40),
            ("iout", 5), ("iout", 1000),
            ("freq", 20), ("freq", 100),
            ("res1", 1), ("res1", 50),
        ],
    )
    def test_inclusive_limits_pass(self, field, value):
        assert validate(_with(**{field: value})) == frozenset()

    @pytest.mark.parametrize(
        "field, value",
        [
            ("vin", 4.99), ("vin", 40.01),
            ("vout", -40.5), ("vout", -2.99), ("vout", 0), ("vout", 2.99), ("vout", 41),
            ("iout", 4), ("iout", 1001),
            ("freq", 19.9), ("freq", 150),
            ("res1", 0.5), ("res1", 51),
        ],
    )
    def test_out_of_limits(self, field, value):
        assert validate(_with(**{field: value})) == {field}

    def test_not_a_number_is_rejected(self):
        assert validate(_with(vin=math.nan)) == {FieldId.VIN}


class TestAggregation:
    def test_single_violation(self):
        # Scenario: only the input voltage is too low
        violations = validate(_with(vin=4))
        assert violations == {FieldId.VIN}
        assert out_of_limits_message(len(violations)) == "1 field is out of limits"

    def test_every_violation_is_collected(self):
        violations = validate(_with(vin=4, freq=150))
        assert violations == {FieldId.VIN, FieldId.FREQ}
        assert out_of_limits_message(len(violations)) == "2 fields are out of limits"

    def test_all_fields_out_of_limits(self):
        violations = validate(UserValues(vin=0, vout=0, iout=0, freq=0, res1=0))
        assert violations == set(FieldId)
        assert out_of_limits_message(5) == "5 fields are out of limits"

    def test_issues_are_reported_in_field_order(self):
        issues = default_engine().check(_with(res1=100, vin=1, vout=1))
        assert [issue.field_id for issue in issues] == [FieldId.VIN, FieldId.VOUT, FieldId.RES1]
        assert all(issue.kind is IssueKind.OUT_OF_RANGE for issue in issues)

    def test_issue_describes_the_rule(self):
        (issue,) = default_engine().check(_with(vout=1))
        assert issue.message == "vout must be between -40 and 40 and outside (-3, 3)"
        assert issue.details == {"value": 1}


class TestParsing:
    @pytest.mark.parametrize("raw, expected", [("12", 12.0), (" -5.5 ", -5.5), ("1e2", 100.0)])
    def test_numbers(self, raw, expected):
        assert parse_value(FieldId.VIN, raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   ", "abc", "12V", "nan", "inf", "-inf"])
    def test_malformed(self, raw):
        with pytest.raises(MalformedFieldError) as excinfo:
            parse_value(FieldId.FREQ, raw)
        assert excinfo.value.field_id is FieldId.FREQ

    def test_malformed_field_is_not_defaulted(self, step_down_raw):
        step_down_raw["iout"] = "lots"
        outcome = parse_fields(step_down_raw)
        assert not outcome.ok
        assert FieldId.IOUT not in outcome.values
        (issue,) = outcome.issues
        assert issue.field_id is FieldId.IOUT
        assert issue.kind is IssueKind.MALFORMED
        assert issue.details == {"raw": "lots"}


class TestCheckRaw:
    def test_valid_input_builds_values(self, step_down_raw):
        report = default_engine().check_raw(step_down_raw)
        assert report.ok
        assert report.values == UserValues(vin=12, vout=5, iout=500, freq=50, res1=10)

    def test_malformed_and_range_errors_are_merged(self, step_down_raw):
        step_down_raw.update(vin="twelve", freq="150")
        report = default_engine().check_raw(step_down_raw)

        assert report.values is None
        assert report.fields == {FieldId.VIN, FieldId.FREQ}
        kinds = {issue.field_id: issue.kind for issue in report.issues}
        assert kinds == {FieldId.VIN: IssueKind.MALFORMED, FieldId.FREQ: IssueKind.OUT_OF_RANGE}

    def test_missing_field_is_malformed(self, step_down_raw):
        del step_down_raw["res1"]
        report = default_engine().check_raw(step_down_raw)
        assert report.fields == {FieldId.RES1}
        assert report.issues[0].kind is IssueKind.MALFORMED


class TestEngine:
    def test_duplicate_rule_rejected(self):
        engine = ValidationEngine()
        engine.register_rule(FieldRule(FieldId.VIN, 5, 40))
        with pytest.raises(ValueError):
            engine.register_rule(FieldRule(FieldId.VIN, 1, 2))

    def test_override_replaces_rule(self):
        engine = ValidationEngine()
        engine.register_rule(FieldRule(FieldId.VIN, 5, 40))
        engine.register_rule(FieldRule(FieldId.VIN, 1, 2), override=True)
        assert engine.get_rule(FieldId.VIN).upper == 2

    def test_unregistered_fields_are_not_checked(self):
        engine = ValidationEngine()
        engine.register_rule(FieldRule(FieldId.FREQ, 20, 100))
        assert engine.validate(UserValues(vin=0, vout=0, iout=0, freq=50, res1=0)) == frozenset()

    def test_missing_rule_lookup(self):
        with pytest.raises(LookupError):
            ValidationEngine().get_rule(FieldId.RES1)
