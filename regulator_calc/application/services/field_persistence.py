"""Saving and restoring the raw form values."""

from __future__ import annotations

import logging
from typing import Dict

from regulator_calc.domain.ports import FieldStore, FormSource
from regulator_calc.shared.dto import FieldId

logger = logging.getLogger(__name__)


class FieldPersistenceService:
    """Copies the five raw field strings between a form and a store."""

    def __init__(self, store: FieldStore) -> None:
        self._store = store

    def save(self, form: FormSource) -> None:
        for field_id in FieldId:
            self._store.set(field_id.value, form.get_value(field_id) or "")
        logger.info("Saved %d fields to %s", len(FieldId), type(self._store).__name__)

    def restore(self) -> Dict[str, str]:
        """Stored values for fields that were saved before."""

        restored: Dict[str, str] = {}
        for field_id in FieldId:
            value = self._store.get(field_id.value)
            if value is not None:
                restored[field_id.value] = value
        logger.debug("Restored fields: %s", sorted(restored))
        return restored
