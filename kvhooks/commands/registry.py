"""Named shell commands stored alongside the key-value data."""
from __future__ import annotations

import logging
from typing import Optional

from kvhooks.models import KVStore

logger = logging.getLogger(__name__)


def add_command(store: KVStore, name: str, command_line: str) -> None:
    if name in store.cmds:
        logger.info("Replacing command %s", name)
    else:
        logger.info("Adding command %s", name)
    store.cmds[name] = command_line


def lookup_command(store: KVStore, name: str) -> Optional[str]:
    return store.cmds.get(name)
