"""Data models for the Agent-SDD command runner."""

from sdd_runner.models.command import (
    PLACEHOLDER_MARKER,
    SCAFFOLD_DIR_NAME,
    CommandRequest,
    CommandResult,
    SddCommand,
)
from sdd_runner.models.resolution import (
    ResolutionKind,
    ScriptExited,
    ScriptOutcome,
    ScriptResolution,
    ScriptSpawnFailed,
    ScriptTimedOut,
)

__all__ = [
    "PLACEHOLDER_MARKER",
    "SCAFFOLD_DIR_NAME",
    "CommandRequest",
    "CommandResult",
    "ResolutionKind",
    "ScriptExited",
    "ScriptOutcome",
    "ScriptResolution",
    "ScriptSpawnFailed",
    "ScriptTimedOut",
    "SddCommand",
]
