"""Base contracts for regulator models."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from ...shared.dto import Results, UserValues


class Topology(str, Enum):
    """Regulator configurations supported by the controller."""

    STEP_DOWN = "step_down"
    STEP_UP = "step_up"
    INVERTER = "inverter"


class InvalidInputError(ValueError):
    """Raised when user values cannot be used for a calculation."""


class TopologyNotSupportedError(LookupError):
    """Raised when the factory cannot resolve a model for the topology."""


class RegulatorModel(ABC):
    """Closed-form sizing of the external parts for one topology.

    Implementations are pure: they assume the values already passed the
    input rules and never fail for such values.
    """

    topology: Topology

    @abstractmethod
    def compute(self, values: UserValues) -> Results:
        """Calculate the component values for the regulator."""
