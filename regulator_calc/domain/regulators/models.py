"""Concrete regulator models per topology."""

from __future__ import annotations

import math

from ...shared.dto import Results, UserValues
from .base import RegulatorModel, Topology
from .factory import RegulatorFactory

RIPPLE = 0.1  # output ripple design target (10%)
DIODE_DROP = 0.8  # V, catch diode forward voltage
SWITCH_DROP = 1.0  # V, output switch saturation
SENSE_VOLTAGE = 0.33  # V, current-limit threshold across Rsc
REFERENCE_VOLTAGE = 1.25  # V, comparator reference
CT_PER_SECOND = 4e-5  # F per second of on-time


def _period(freq_khz: float) -> float:
    return 1.0 / (freq_khz * 1e3)


def _on_time(period: float, ratio: float) -> float:
    toff = period / (ratio + 1)
    return period - toff


def _feedback_resistor(vout: float, res1: float) -> float:
    # R1 and R2 are both in kilohms
    return (vout - REFERENCE_VOLTAGE) / REFERENCE_VOLTAGE * res1


class StepDownModel(RegulatorModel):
    topology = Topology.STEP_DOWN

    def compute(self, values: UserValues) -> Results:
        headroom = values.vin - DIODE_DROP - values.vout
        # No headroom above the diode drop: the switch stays on for the whole period
        ratio = (values.vout + DIODE_DROP) / headroom if headroom != 0 else math.inf
        tontoff = _period(values.freq)
        ton_max = _on_time(tontoff, ratio)
        ipeak = values.iout / 1e3 * 2.0

        return Results(
            lmin=(values.vin - SWITCH_DROP - values.vout) / ipeak * ton_max,
            ct=ton_max * CT_PER_SECOND,
            cout=(ipeak * tontoff) / (8 * RIPPLE),
            rsc=SENSE_VOLTAGE / ipeak,
            r2=_feedback_resistor(values.vout, values.res1),
            rb=0.0,
        )


class InverterModel(RegulatorModel):
    topology = Topology.INVERTER

    def compute(self, values: UserValues) -> Results:
        vout = abs(values.vout)
        ratio = (vout + DIODE_DROP) / (values.vin - DIODE_DROP)
        tontoff = _period(values.freq)
        ton = _on_time(tontoff, ratio)
        ipeak = 2 * values.iout / 1e3

        return Results(
            lmin=(values.vin - DIODE_DROP) / ipeak * ton,
            ct=ton * CT_PER_SECOND,
            cout=(values.iout / 1e3 * ton) / RIPPLE,
            rsc=SENSE_VOLTAGE / ipeak,
            r2=_feedback_resistor(vout, values.res1),
            rb=0.0,
        )


class StepUpModel(RegulatorModel):
    """Boost configuration; the only one driving an external transistor."""

    topology = Topology.STEP_UP

    def compute(self, values: UserValues) -> Results:
        ratio = (values.vout + DIODE_DROP - values.vin) / (values.vin - SWITCH_DROP)
        tontoff = _period(values.freq)
        ton_max = _on_time(tontoff, ratio)
        ipeak = values.iout / 1e3 * (ratio + 1) * 2.0
        ib = ipeak / 20 + 5e-3
        rsc = SENSE_VOLTAGE / ipeak

        return Results(
            lmin=(values.vin - SWITCH_DROP) / ipeak * ton_max,
            ct=ton_max * CT_PER_SECOND,
            cout=(values.iout / 1e3 * ton_max) / RIPPLE,
            rsc=rsc,
            r2=_feedback_resistor(values.vout, values.res1),
            rb=((values.vin - SWITCH_DROP) - ipeak) * rsc / ib,
        )


def register_default_models(factory: RegulatorFactory) -> RegulatorFactory:
    """Register the three built-in topologies with their display metadata."""

    factory.register(
        Topology.STEP_DOWN,
        StepDownModel,
        name="Step-Down regulator",
        schematic="step_down.png",
        description="Buck: output voltage lower than the input.",
    )
    factory.register(
        Topology.STEP_UP,
        StepUpModel,
        name="Step-Up regulator",
        schematic="step_up.png",
        description="Boost: output voltage higher than the input.",
    )
    factory.register(
        Topology.INVERTER,
        InverterModel,
        name="Inverter regulator",
        schematic="inverter.png",
        description="Negative output voltage from a positive input.",
    )
    return factory
