"""Turn a raw ScriptOutcome into a CommandResult."""

from sdd_runner.models.command import CommandResult
from sdd_runner.models.resolution import (
    ScriptExited,
    ScriptOutcome,
    ScriptSpawnFailed,
    ScriptTimedOut,
)

SPAWN_FAILURE_EXIT_CODE = -1
TIMEOUT_MESSAGE = "Execution timeout"


def normalize_outcome(outcome: ScriptOutcome, duration_ms: int) -> CommandResult:
    """Map each process outcome onto the single result shape.

    - Clean exit: success iff exit code is 0, streams passed through
    - Signal termination: failure, no exit code, streams passed through
    - Spawn failure: failure, exit code -1, empty streams
    - Timeout: failure, no exit code, empty streams
    """
    if isinstance(outcome, ScriptExited):
        if outcome.exit_code is None:
            return CommandResult(
                success=False,
                exit_code=None,
                stdout=outcome.stdout,
                stderr=outcome.stderr,
                duration_ms=duration_ms,
                error_message=f"Script terminated by signal {outcome.signal_number}",
            )
        success = outcome.exit_code == 0
        return CommandResult(
            success=success,
            exit_code=outcome.exit_code,
            stdout=outcome.stdout,
            stderr=outcome.stderr,
            duration_ms=duration_ms,
            error_message=None if success else f"Script exited with code {outcome.exit_code}",
        )

    if isinstance(outcome, ScriptSpawnFailed):
        return CommandResult(
            success=False,
            exit_code=SPAWN_FAILURE_EXIT_CODE,
            stdout="",
            stderr="",
            duration_ms=duration_ms,
            error_message=f"Script execution failed: {outcome.message}",
        )

    if isinstance(outcome, ScriptTimedOut):
        return CommandResult(
            success=False,
            exit_code=None,
            stdout="",
            stderr="",
            duration_ms=duration_ms,
            error_message=TIMEOUT_MESSAGE,
        )

    raise TypeError(f"Unknown script outcome: {outcome!r}")
