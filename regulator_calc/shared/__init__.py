"""Shared utilities and data transfer objects."""

from .dto import (
    FieldId,
    IssueKind,
    Results,
    UserValues,
    ValidationIssue,
)
from .config import AppConfig, LoggingConfig, StoreConfig

__all__ = [
    "FieldId",
    "IssueKind",
    "Results",
    "UserValues",
    "ValidationIssue",
    "AppConfig",
    "LoggingConfig",
    "StoreConfig",
]
