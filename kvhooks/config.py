"""Runtime settings resolved from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from kvhooks.errors import HomeDirectoryError

DEFAULT_STORE_NAME = "test.json"
DEFAULT_SHELL = "bash"


def default_store_path() -> Path:
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise HomeDirectoryError() from exc
    return home / DEFAULT_STORE_NAME


@dataclass
class Settings:
    store_path: Path
    shell: str = DEFAULT_SHELL

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        store_path: Optional[Path | str] = None,
    ) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``).

        An explicit ``store_path`` wins over ``KV_STORE_PATH``; the home
        directory is only consulted when neither is given.
        """
        env = os.environ if environ is None else environ
        if store_path is None:
            store_path = env.get("KV_STORE_PATH") or None
        path = Path(store_path).expanduser() if store_path else default_store_path()
        shell = env.get("SHELL") or DEFAULT_SHELL
        return cls(store_path=path, shell=shell)
