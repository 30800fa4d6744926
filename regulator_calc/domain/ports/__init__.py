"""Ports (interfaces) that infrastructure and presentation must implement."""

from .field_store import FieldStore, FieldStoreError, InMemoryFieldStore
from .presentation import FormSource, ResultPresenter

__all__ = [
    "FieldStore",
    "FieldStoreError",
    "FormSource",
    "InMemoryFieldStore",
    "ResultPresenter",
]
