"""Orchestrates validation, topology selection and sizing for one request."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from regulator_calc.domain.ports import FormSource, ResultPresenter
from regulator_calc.domain.regulators import (
    RegulatorFactory,
    Topology,
    TopologyInfo,
    register_default_models,
    select_topology,
)
from regulator_calc.domain.validation import (
    ValidationEngine,
    ValidationFailedError,
    register_default_rules,
)
from regulator_calc.shared.dto import FieldId, Results, UserValues

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class CalculationResult:
    """Outcome of a successful calculation."""

    values: UserValues
    topology: Topology
    info: TopologyInfo
    results: Results


class CalculationService:
    """Facade that coordinates validation and the regulator models."""

    def __init__(
        self,
        *,
        factory: RegulatorFactory,
        validation_engine: ValidationEngine,
    ) -> None:
        self._factory = factory
        self._validation_engine = validation_engine

    @property
    def factory(self) -> RegulatorFactory:
        return self._factory

    def calculate(self, values: UserValues) -> CalculationResult:
        """Validate ``values`` and size the parts for the selected topology."""

        issues = self._validation_engine.check(values)
        if issues:
            raise ValidationFailedError(issues)
        return self._compute(values)

    def run(self, form: FormSource, presenter: ResultPresenter) -> Optional[CalculationResult]:
        """Read the form, then hand either results or failures to the presenter."""

        raw: Dict[str, Optional[str]] = {fid.value: form.get_value(fid) for fid in FieldId}
        report = self._validation_engine.check_raw(raw)
        if not report.ok or report.values is None:
            logger.warning(
                "Validation failed for %s",
                ", ".join(f"{issue.field_id.value} ({issue.kind.value})" for issue in report.issues),
            )
            presenter.present_validation_failure(report.fields)
            return None

        result = self._compute(report.values)
        presenter.present(result.topology, result.results)
        return result

    def _compute(self, values: UserValues) -> CalculationResult:
        topology = select_topology(values)
        logger.info("Selected %s topology for %s", topology.value, values.as_dict())
        model = self._factory.resolve(topology)
        return CalculationResult(
            values=values,
            topology=topology,
            info=self._factory.info(topology),
            results=model.compute(values),
        )


def build_calculation_service() -> CalculationService:
    """Service wired with the built-in topologies and field ranges."""

    factory = register_default_models(RegulatorFactory())
    engine = register_default_rules(ValidationEngine())
    return CalculationService(factory=factory, validation_engine=engine)
