"""Regulator models, topology selection and factory helpers."""

from __future__ import annotations

from ...shared.dto import Results, UserValues
from .base import InvalidInputError, RegulatorModel, Topology, TopologyNotSupportedError
from .factory import RegulatorFactory, TopologyInfo
from .models import InverterModel, StepDownModel, StepUpModel, register_default_models
from .selector import select_topology

_default_factory = register_default_models(RegulatorFactory())


def default_factory() -> RegulatorFactory:
    """Factory preloaded with the three built-in topologies."""

    return _default_factory


def compute(values: UserValues, topology: Topology) -> Results:
    """Compute the component values for validated input and a topology."""

    return _default_factory.resolve(topology).compute(values)


__all__ = [
    "InvalidInputError",
    "InverterModel",
    "RegulatorFactory",
    "RegulatorModel",
    "StepDownModel",
    "StepUpModel",
    "Topology",
    "TopologyInfo",
    "TopologyNotSupportedError",
    "compute",
    "default_factory",
    "register_default_models",
    "select_topology",
]
