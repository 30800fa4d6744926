"""Topology selection from the sign and magnitude of the voltages."""

from __future__ import annotations

from ...shared.dto import UserValues
from .base import Topology


def select_topology(values: UserValues) -> Topology:
    """Pick the regulator configuration for already validated values.

    A negative output always means an inverter. Otherwise the output is
    compared with the input; equal voltages fall through to the step-up
    branch because the comparison is strict.
    """

    if values.vout < 0:
        return Topology.INVERTER
    if values.vout < values.vin:
        return Topology.STEP_DOWN
    return Topology.STEP_UP
