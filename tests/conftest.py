"""Shared fixtures for the calculator tests."""

from typing import Dict, Optional

import pytest

from regulator_calc.application.services import build_calculation_service
from regulator_calc.shared.dto import FieldId, UserValues


class DictForm:
    """Form source backed by a plain dictionary of raw strings."""

    def __init__(self, values: Dict[str, Optional[str]]):
        self.values = dict(values)

    def get_value(self, field_id: FieldId) -> Optional[str]:
        return self.values.get(field_id.value)


# Scenario used throughout: 12 V -> 5 V at 500 mA, 50 kHz, R1 = 10 kOhm
STEP_DOWN_RAW = {"vin": "12", "vout": "5", "iout": "500", "freq": "50", "res1": "10"}


@pytest.fixture
def step_down_raw() -> Dict[str, str]:
    return dict(STEP_DOWN_RAW)


@pytest.fixture
def step_down_values() -> UserValues:
    return UserValues(vin=12, vout=5, iout=500, freq=50, res1=10)


@pytest.fixture
def service():
    return build_calculation_service()


@pytest.fixture
def make_form():
    return DictForm
