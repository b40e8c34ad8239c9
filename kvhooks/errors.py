"""Errors raised by kv components and how the CLI treats them."""
from __future__ import annotations


class KVHooksError(RuntimeError):
    """Base error. ``fatal`` errors end the invocation with a non-zero status."""

    fatal = True


class HomeDirectoryError(KVHooksError):
    """Raised when the user's home directory cannot be determined."""

    def __init__(self) -> None:
        super().__init__("Cannot find the user's home!")


class HookNotFoundError(KVHooksError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Error! Hook {name} does not exist!")
        self.name = name


class DuplicateHookError(KVHooksError):
    def __init__(self, name: str) -> None:
        super().__init__(
            f"Error! {name} already exists. To delete it try\n kv cmd del-hook {name}"
        )
        self.name = name


class CommandNotFoundError(KVHooksError):
    fatal = False

    def __init__(self, name: str) -> None:
        super().__init__(f"Error! Command {name} does not exist!")
        self.name = name


class SpawnError(KVHooksError):
    """Raised when the shell process for a command could not be started."""

    fatal = False

    def __init__(self, cmd_name: str, reason: str) -> None:
        super().__init__(f"Error! Failed to run '{cmd_name}' with error:\n {reason}")
        self.cmd_name = cmd_name
        self.reason = reason
