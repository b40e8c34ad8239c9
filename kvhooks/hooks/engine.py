"""Hook engine: registers hooks and runs them after key-value operations."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Literal, Optional

from kvhooks.commands.registry import lookup_command
from kvhooks.commands.runner import CommandRunner
from kvhooks.errors import DuplicateHookError, HookNotFoundError, SpawnError
from kvhooks.models import Hook, KVStore, OpType

logger = logging.getLogger(__name__)


@dataclass
class HookRun:
    """Outcome of one hook during a dispatch pass."""

    hook: str
    cmd_name: str
    status: Literal["RAN", "MISSING_CMD", "SPAWN_FAILED"]
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "RAN"


class HookEngine:
    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def add_hook(
        self,
        store: KVStore,
        name: str,
        cmd_name: str,
        run_on: OpType,
        key: str,
    ) -> Hook:
        if any(hook.name == name for hook in store.hooks):
            raise DuplicateHookError(name)
        hook = Hook(name=name, cmd_name=cmd_name, run_on=run_on, key=key)
        store.hooks.append(hook)
        logger.info("Added hook %s: %s on %s %s", name, cmd_name, run_on.value, key)
        return hook

    def remove_hook(self, store: KVStore, name: str) -> Hook:
        for position, hook in enumerate(store.hooks):
            if hook.name == name:
                removed = store.hooks.pop(position)
                logger.info("Removed hook %s", name)
                return removed
        raise HookNotFoundError(name)

    @staticmethod
    def matching(store: KVStore, op: OpType, key: str) -> List[Hook]:
        return [hook for hook in store.hooks if hook.run_on == op and hook.key == key]

    def dispatch(self, store: KVStore, op: OpType, key: str) -> List[HookRun]:
        """Run every hook triggered by ``op`` on ``key``, in list order.

        Commands are resolved by name at this point, so a hook follows later
        edits to its command. A missing command or a failed spawn is recorded
        and the remaining hooks still run.
        """
        runs: List[HookRun] = []
        hooks = self.matching(store, op, key)
        logger.debug("%d hook(s) match %s %s", len(hooks), op.value, key)
        for hook in hooks:
            command_line = lookup_command(store, hook.cmd_name)
            if command_line is None:
                runs.append(
                    HookRun(
                        hook=hook.name,
                        cmd_name=hook.cmd_name,
                        status="MISSING_CMD",
                        message=f'Error! Bad hook! Hook "{hook.name}" has no cmd!',
                    )
                )
                continue
            try:
                self._runner.run(hook.cmd_name, command_line)
            except SpawnError as exc:
                runs.append(
                    HookRun(
                        hook=hook.name,
                        cmd_name=hook.cmd_name,
                        status="SPAWN_FAILED",
                        message=str(exc),
                    )
                )
                continue
            runs.append(HookRun(hook=hook.name, cmd_name=hook.cmd_name, status="RAN"))
        return runs
