"""Pydantic data contracts for the kv store and its hooks."""
from __future__ import annotations

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field


class OpType(str, Enum):
    """Key-value operation that can trigger a hook."""

    GET = "Get"
    SET = "Set"
    DEL = "Del"

    @classmethod
    def from_cli(cls, value: str) -> "OpType":
        mapping = {"get": cls.GET, "set": cls.SET, "del": cls.DEL}
        try:
            return mapping[value]
        except KeyError:
            raise ValueError(f"Unknown trigger '{value}'. Expected one of get, set, del") from None


class Hook(BaseModel):
    """Runs the command named ``cmd_name`` after ``run_on`` touches ``key``."""

    name: str = Field(..., description="Unique hook identifier")
    cmd_name: str = Field(..., description="Command looked up by name when the hook fires")
    run_on: OpType = Field(..., description="Operation that triggers the hook")
    key: str = Field(..., description="Key that triggers the hook")


class KVStore(BaseModel):
    """Entire persisted state: values, named commands and hooks."""

    kvs: Dict[str, str] = Field(default_factory=dict)
    cmds: Dict[str, str] = Field(default_factory=dict)
    hooks: List[Hook] = Field(default_factory=list)
