"""JSON file persistence for the whole kv store."""
from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from kvhooks.models import KVStore

logger = logging.getLogger(__name__)


class StoreFile:
    """Loads and rewrites the single JSON document backing the store.

    Every save rewrites the full document in place. There is no locking, so two
    invocations writing at once can lose each other's updates.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> KVStore:
        try:
            raw = self._path.read_text(encoding="utf-8")
            store = KVStore.model_validate_json(raw)
        except FileNotFoundError:
            logger.debug("Store %s does not exist; starting empty", self._path)
            return KVStore()
        except (OSError, ValueError, ValidationError) as exc:
            logger.debug("Store %s unreadable (%s); starting empty", self._path, exc)
            return KVStore()
        logger.debug(
            "Loaded %d keys, %d commands, %d hooks from %s",
            len(store.kvs),
            len(store.cmds),
            len(store.hooks),
            self._path,
        )
        return store

    def save(self, store: KVStore) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(store.model_dump_json(indent=2), encoding="utf-8")
        logger.debug("Wrote store to %s", self._path)
