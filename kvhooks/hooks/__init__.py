"""Hook engine exports."""
from .engine import HookEngine, HookRun

__all__ = [
    "HookEngine",
    "HookRun",
]
