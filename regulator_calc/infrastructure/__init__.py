"""Infrastructure adapters (persistence)."""

from .field_stores import JsonFileFieldStore, RedisFieldStore, build_field_store

__all__ = [
    "JsonFileFieldStore",
    "RedisFieldStore",
    "build_field_store",
]
