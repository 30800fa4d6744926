"""Field store adapters backed by a JSON file or Redis."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

import redis

from regulator_calc.domain.ports import FieldStore, FieldStoreError, InMemoryFieldStore
from regulator_calc.shared.config import StoreConfig

logger = logging.getLogger(__name__)


class JsonFileFieldStore(FieldStore):
    """Keeps all field values in one JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def get(self, field_name: str) -> Optional[str]:
        return self._load().get(field_name)

    def set(self, field_name: str, value: str) -> None:
        data = self._load()
        data[field_name] = value
        self._write(data)

    def _load(self) -> Dict[str, str]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Field store read error ({self.path}): {e}")
            raise FieldStoreError(f"Cannot read field store {self.path}") from e

        if not isinstance(data, dict):
            raise FieldStoreError(f"Field store {self.path} does not hold a JSON object")
        return {str(key): str(value) for key, value in data.items()}

    def _write(self, data: Dict[str, str]) -> None:
        tmp_name: Optional[str] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".fields-", suffix=".json")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            logger.error(f"Field store write error ({self.path}): {e}")
            raise FieldStoreError(f"Cannot write field store {self.path}") from e


class RedisFieldStore(FieldStore):
    """Redis-based store; each field lives under ``<prefix><field>``."""

    def __init__(
        self,
        client: Optional[redis.Redis] = None,
        *,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        password: Optional[str] = None,
        key_prefix: str = "mc34063:",
    ) -> None:
        self.key_prefix = key_prefix
        self._redis = client or redis.Redis(
            host=host,
            port=port,
            db=db,
            password=password if password else None,
            decode_responses=True,
        )

    def _key(self, field_name: str) -> str:
        return f"{self.key_prefix}{field_name}"

    def get(self, field_name: str) -> Optional[str]:
        try:
            value = self._redis.get(self._key(field_name))
        except redis.RedisError as e:
            logger.error(f"Field store read error: {e}")
            raise FieldStoreError(f"Cannot read '{field_name}' from Redis") from e
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    def set(self, field_name: str, value: str) -> None:
        try:
            self._redis.set(self._key(field_name), value)
        except redis.RedisError as e:
            logger.error(f"Field store write error: {e}")
            raise FieldStoreError(f"Cannot write '{field_name}' to Redis") from e


def build_field_store(config: StoreConfig) -> FieldStore:
    """Create the store selected by ``config.backend``."""

    backend = config.backend
    if backend == "memory":
        return InMemoryFieldStore()
    if backend == "json":
        return JsonFileFieldStore(config.path)
    if backend == "redis":
        return RedisFieldStore(
            host=config.redis_host,
            port=config.redis_port,
            db=config.redis_db,
            password=config.redis_password,
            key_prefix=config.key_prefix,
        )
    raise ValueError(f"Unknown field store backend: {backend!r}")
