"""Component sizing for MC34063-based switching regulators."""

from .domain.regulators import Topology, compute, select_topology
from .domain.validation import out_of_limits_message, validate
from .shared.dto import FieldId, Results, UserValues

__all__ = [
    "FieldId",
    "Results",
    "Topology",
    "UserValues",
    "compute",
    "out_of_limits_message",
    "select_topology",
    "validate",
]
