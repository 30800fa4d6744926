"""Plain-text rendering of calculation results."""

from __future__ import annotations

from typing import AbstractSet, FrozenSet, List, Optional

from regulator_calc.domain.regulators import RegulatorFactory, Topology, TopologyInfo
from regulator_calc.domain.validation import out_of_limits_message
from regulator_calc.shared.dto import FieldId, Results


def format_report(info: TopologyInfo, results: Results) -> str:
    """Render results in display units, one component per line.

    Inductance and capacitances are rounded to whole uH/pF/uF, resistors
    to one decimal (Rsc in ohms, R2 in kilohms). Rb is only listed when the
    topology uses it.
    """

    lines: List[str] = [
        info.name,
        f"L   = {results.lmin * 1e6:.0f} uH (min)",
        f"Ct  = {results.ct * 1e12:.0f} pF",
        f"Co  = {results.cout * 1e6:.0f} uF (min)",
        f"Rsc = {results.rsc:.1f} Ω",
        f"R2  = {results.r2:.1f} KΩ",
    ]
    if results.rb != 0.0:
        lines.append(f"Rb  = {results.rb:.0f} Ω")
    return "\n".join(lines)


def format_failure(fields: AbstractSet[FieldId]) -> str:
    return out_of_limits_message(len(fields))


class ReportPresenter:
    """Presenter that keeps the last rendered output as text."""

    def __init__(self, factory: RegulatorFactory) -> None:
        self._factory = factory
        self.text: str = ""
        self.topology: Optional[Topology] = None
        self.failed_fields: FrozenSet[FieldId] = frozenset()

    def present(self, topology: Topology, results: Results) -> None:
        self.topology = topology
        self.failed_fields = frozenset()
        self.text = format_report(self._factory.info(topology), results)

    def present_validation_failure(self, fields: AbstractSet[FieldId]) -> None:
        self.topology = None
        self.failed_fields = frozenset(fields)
        self.text = format_failure(fields)
