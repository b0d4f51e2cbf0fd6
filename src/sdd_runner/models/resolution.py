"""Script resolution and process outcome models."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from sdd_runner.models.command import SddCommand


class ResolutionKind(str, Enum):
    """How a command is backed inside the scaffold directory."""

    SCRIPT = "script"
    INSTRUCTION = "instruction"
    NONE = "none"


@dataclass(frozen=True)
class ScriptResolution:
    """Result of looking up a command in the scaffold directory.

    Only a script is runnable. An instruction file is documentation for
    humans and never counts as a successful resolution.
    """

    command: SddCommand
    script_path: Path | None
    instruction_path: Path | None

    @property
    def kind(self) -> ResolutionKind:
        if self.script_path is not None:
            return ResolutionKind.SCRIPT
        if self.instruction_path is not None:
            return ResolutionKind.INSTRUCTION
        return ResolutionKind.NONE

    @property
    def is_runnable(self) -> bool:
        return self.script_path is not None


@dataclass(frozen=True)
class ScriptExited:
    """The child process ran to completion.

    exit_code is None when the process was terminated by a signal.
    """

    exit_code: int | None
    stdout: str
    stderr: str
    signal_number: int | None = None


@dataclass(frozen=True)
class ScriptSpawnFailed:
    """The child process could not be started."""

    message: str


@dataclass(frozen=True)
class ScriptTimedOut:
    """The caller stopped waiting after timeout_seconds."""

    timeout_seconds: float


ScriptOutcome = ScriptExited | ScriptSpawnFailed | ScriptTimedOut
