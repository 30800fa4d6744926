"""Persistence port for the raw field strings."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional


class FieldStoreError(RuntimeError):
    """Raised when a store cannot read or write field values."""


class FieldStore(ABC):
    """Opaque key/value storage of raw form values by field name."""

    @abstractmethod
    def get(self, field_name: str) -> Optional[str]:
        """Return the stored value, or ``None`` if it was never saved."""

    @abstractmethod
    def set(self, field_name: str, value: str) -> None:
        """Store the raw value for a field."""


class InMemoryFieldStore(FieldStore):
    """Dictionary-backed store, kept for the lifetime of the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, field_name: str) -> Optional[str]:
        return self._values.get(field_name)

    def set(self, field_name: str, value: str) -> None:
        self._values[field_name] = value
