"""Command request and result data models."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from sdd_runner.errors import InvalidCommandError

SCAFFOLD_DIR_NAME = ".agent-sdd"

# Closing sentence of the fallback executor's stdout
PLACEHOLDER_MARKER = "This is a placeholder execution."


class SddCommand(str, Enum):
    """Workflow commands a project may wire up to scripts."""

    EXECUTE_TASK = "sdd-execute-task"
    FIX = "sdd-fix"
    TWEAK = "sdd-tweak"
    CHECK_TASK = "sdd-check-task"
    QUEUE_FIX = "sdd-queue-fix"
    QUEUE_TWEAK = "sdd-queue-tweak"

    @classmethod
    def parse(cls, raw: str) -> "SddCommand":
        """Parse a free-form command name into the closed command set.

        Raises:
            InvalidCommandError: If raw is not one of the allowed commands
        """
        for command in cls:
            if command.value == raw:
                return command
        raise InvalidCommandError(raw)


@dataclass(frozen=True)
class CommandRequest:
    """A single request to run a workflow command for one task.

    task_id is opaque and passed through to the script untouched.
    """

    command: SddCommand
    task_id: str
    spec_path: Path
    project_path: Path

    @property
    def scaffold_dir(self) -> Path:
        """Project's Agent-SDD marker directory."""
        return self.project_path / SCAFFOLD_DIR_NAME


@dataclass(frozen=True)
class CommandResult:
    """Normalized outcome of one command request.

    Every execution path (clean exit, non-zero exit, spawn error, timeout,
    fallback) produces this same shape.

    Attributes:
        success: True iff the command completed with exit status 0
        exit_code: Exit status; None on timeout or signal termination, -1 on spawn failure
        stdout: Full captured standard output
        stderr: Full captured standard error
        duration_ms: Wall-clock milliseconds from request acceptance to result
        error_message: Failure summary, present iff success is False
        simulated: Set only by the fallback executor when no script ran
    """

    success: bool
    exit_code: int | None
    stdout: str
    stderr: str
    duration_ms: int
    error_message: str | None
    simulated: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        if self.success and self.error_message is not None:
            raise ValueError("Successful CommandResult must not carry an error_message")
        if not self.success and self.error_message is None:
            raise ValueError("Failed CommandResult requires an error_message")
        if self.duration_ms < 0:
            raise ValueError(f"duration_ms must be >= 0, got {self.duration_ms}")
        if self.simulated and not self.success:
            raise ValueError("Only a successful CommandResult can be simulated")

    @property
    def is_placeholder(self) -> bool:
        """Whether this result came from the simulated fallback path."""
        return self.simulated
