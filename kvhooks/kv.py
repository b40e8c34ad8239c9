"""Key-value operations on an in-memory store. Callers persist afterwards."""
from __future__ import annotations

from typing import Optional

from kvhooks.models import KVStore


def get_value(store: KVStore, key: str) -> Optional[str]:
    return store.kvs.get(key)


def set_value(store: KVStore, key: str, value: str) -> None:
    store.kvs[key] = value


def delete_value(store: KVStore, key: str) -> Optional[str]:
    return store.kvs.pop(key, None)
