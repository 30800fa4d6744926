"""Form schema definitions for the calculator inputs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from regulator_calc.shared.dto import FieldId


@dataclass(slots=True, frozen=True)
class FieldDefinition:
    """Represents a single input field exposed to the user."""

    key: FieldId
    label: str
    placeholder: str
    unit: str


FIELDS: Sequence[FieldDefinition] = (
    FieldDefinition(FieldId.VIN, "Input voltage", "12", unit="V"),
    FieldDefinition(FieldId.VOUT, "Output voltage", "5", unit="V"),
    FieldDefinition(FieldId.IOUT, "Output current", "500", unit="mA"),
    FieldDefinition(FieldId.FREQ, "Switching frequency", "50", unit="kHz"),
    FieldDefinition(FieldId.RES1, "Feedback resistor R1", "10", unit="KΩ"),
)


def label_for(definition: FieldDefinition) -> str:
    return f"{definition.label} ({definition.unit})"
