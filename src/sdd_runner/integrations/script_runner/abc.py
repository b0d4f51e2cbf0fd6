"""Abstract interface for running a resolved scaffold script."""

from abc import ABC, abstractmethod
from pathlib import Path

from sdd_runner.models.resolution import ScriptOutcome


class ScriptRunner(ABC):
    """Abstract interface for executing one script as a child process.

    All implementations must implement this interface for testability.
    """

    @abstractmethod
    async def run_script(
        self,
        interpreter: str,
        script_path: Path,
        task_id: str,
        cwd: Path,
        timeout_seconds: float,
    ) -> ScriptOutcome:
        """Run `<interpreter> <script_path> <task_id>` and wait for it.

        Args:
            interpreter: Shell interpreter used to run the script (e.g. "bash")
            script_path: Resolved script file
            task_id: Opaque task identifier, passed as the sole positional argument
            cwd: Working directory for the child (the project root)
            timeout_seconds: How long the caller waits before giving up

        Returns:
            Exactly one of ScriptExited, ScriptSpawnFailed or ScriptTimedOut

        Note:
            Implementations never raise for child-process failures; every
            failure mode is expressed as an outcome value.
        """
        ...
