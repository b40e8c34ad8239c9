"""Fire-and-forget execution of named shell commands."""
from __future__ import annotations

import logging
import subprocess
from typing import Any, Callable, List, Optional

from kvhooks.commands.registry import lookup_command
from kvhooks.errors import CommandNotFoundError, SpawnError
from kvhooks.models import KVStore

logger = logging.getLogger(__name__)

SpawnFn = Callable[..., Any]


def _default_spawn(argv: List[str], **kwargs: Any) -> subprocess.Popen:
    return subprocess.Popen(argv, **kwargs)


class CommandRunner:
    """Starts commands through ``<shell> -c`` without waiting on them.

    The child runs in its own session and inherits stdout/stderr. Only a
    failure to start the shell is reported; the command's own exit status is
    never observed.
    """

    def __init__(self, shell: str, spawn: Optional[SpawnFn] = None) -> None:
        self._shell = shell
        self._spawn = spawn or _default_spawn

    @property
    def shell(self) -> str:
        return self._shell

    def run(self, cmd_name: str, command_line: str) -> None:
        argv = [self._shell, "-c", command_line]
        try:
            self._spawn(argv, start_new_session=True)
        except OSError as exc:
            raise SpawnError(cmd_name, exc.strerror or str(exc)) from exc
        logger.debug("Spawned %s via %s", cmd_name, self._shell)

    def run_named(self, store: KVStore, name: str) -> None:
        command_line = lookup_command(store, name)
        if command_line is None:
            raise CommandNotFoundError(name)
        self.run(name, command_line)
