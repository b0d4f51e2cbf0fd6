"""In-memory fake implementation of ScriptRunner for testing."""

from dataclasses import dataclass
from pathlib import Path

from sdd_runner.integrations.script_runner.abc import ScriptRunner
from sdd_runner.models.resolution import ScriptExited, ScriptOutcome


@dataclass(frozen=True)
class RunScriptCall:
    """Arguments of one run_script() invocation."""

    interpreter: str
    script_path: Path
    task_id: str
    cwd: Path
    timeout_seconds: float


class FakeScriptRunner(ScriptRunner):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.
    This class has NO public setup methods.
    """

    def __init__(
        self,
        *,
        outcomes: dict[str, ScriptOutcome] | None = None,
        default_outcome: ScriptOutcome | None = None,
    ) -> None:
        """Create FakeScriptRunner with pre-configured outcomes.

        Args:
            outcomes: Mapping of task_id -> outcome to return
            default_outcome: Outcome returned when task_id is not in outcomes;
                defaults to a clean exit with empty output
        """
        self._outcomes = outcomes or {}
        self._default_outcome = default_outcome or ScriptExited(exit_code=0, stdout="", stderr="")
        self._run_calls: list[RunScriptCall] = []

    @property
    def run_calls(self) -> list[RunScriptCall]:
        """Read-only access to recorded calls for test assertions."""
        return self._run_calls.copy()

    async def run_script(
        self,
        interpreter: str,
        script_path: Path,
        task_id: str,
        cwd: Path,
        timeout_seconds: float,
    ) -> ScriptOutcome:
        """Record the call and return the configured outcome."""
        self._run_calls.append(
            RunScriptCall(
                interpreter=interpreter,
                script_path=script_path,
                task_id=task_id,
                cwd=cwd,
                timeout_seconds=timeout_seconds,
            )
        )
        return self._outcomes.get(task_id, self._default_outcome)
