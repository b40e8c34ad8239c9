"""Command registry and runner exports."""
from .registry import add_command, lookup_command
from .runner import CommandRunner

__all__ = [
    "add_command",
    "lookup_command",
    "CommandRunner",
]
