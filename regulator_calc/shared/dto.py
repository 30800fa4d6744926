"""Shared data transfer objects for the regulator calculation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class FieldId(str, Enum):
    """Identifiers of the five user-supplied fields, in display order."""

    VIN = "vin"
    VOUT = "vout"
    IOUT = "iout"
    FREQ = "freq"
    RES1 = "res1"


class IssueKind(str, Enum):
    """Kinds of problems the input checks can report for a field."""

    OUT_OF_RANGE = "out_of_range"
    MALFORMED = "malformed"


@dataclass(slots=True, frozen=True)
class ValidationIssue:
    """A single field that failed parsing or its range check."""

    field_id: FieldId
    kind: IssueKind
    message: str
    details: Mapping[str, float | str] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class UserValues:
    """Operating parameters entered by the user.

    Units follow the input form: volts for ``vin``/``vout`` (``vout`` is
    signed), milliamps for ``iout``, kilohertz for ``freq`` and kilohms
    for ``res1``.
    """

    vin: float
    vout: float
    iout: float
    freq: float
    res1: float

    @classmethod
    def from_mapping(cls, values: Mapping[str, float]) -> UserValues:
        """Build the value object from a mapping keyed by field name."""

        try:
            return cls(**{fid.value: float(values[fid.value]) for fid in FieldId})
        except KeyError as exc:
            raise KeyError(f"Missing user value: {exc.args[0]}") from exc

    def as_dict(self) -> dict[str, float]:
        return {fid.value: getattr(self, fid.value) for fid in FieldId}


@dataclass(slots=True, frozen=True)
class Results:
    """Component values for one calculation.

    ``lmin`` in henries, ``ct`` and ``cout`` in farads, ``rsc`` and ``rb``
    in ohms, ``r2`` in kilohms (same convention as ``res1``). ``rb`` is
    zero for topologies that do not need a base-drive resistor.
    """

    lmin: float
    ct: float
    cout: float
    rsc: float
    r2: float
    rb: float = 0.0
