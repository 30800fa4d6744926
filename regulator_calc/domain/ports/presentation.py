"""Ports between the calculation workflow and its user interface."""

from __future__ import annotations

from typing import AbstractSet, Optional, Protocol

from ...shared.dto import FieldId, Results
from ..regulators.base import Topology


class FormSource(Protocol):
    """Supplies the raw text the user typed for each field."""

    def get_value(self, field_id: FieldId) -> Optional[str]:  # pragma: no cover - structural
        ...


class ResultPresenter(Protocol):
    """Receives either computed results or the offending fields."""

    def present(self, topology: Topology, results: Results) -> None:  # pragma: no cover - structural
        ...

    def present_validation_failure(self, fields: AbstractSet[FieldId]) -> None:  # pragma: no cover - structural
        ...
