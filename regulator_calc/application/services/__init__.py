"""Application services exposed to interface adapters."""

from .calculation import CalculationResult, CalculationService, build_calculation_service
from .field_persistence import FieldPersistenceService

__all__ = [
    "CalculationResult",
    "CalculationService",
    "FieldPersistenceService",
    "build_calculation_service",
]
