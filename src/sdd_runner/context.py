"""Runner context for dependency injection."""

from dataclasses import dataclass, field

from sdd_runner.config import RunnerConfig
from sdd_runner.integrations.filesystem import FakeFilesystem, Filesystem, RealFilesystem
from sdd_runner.integrations.script_runner import (
    FakeScriptRunner,
    RealScriptRunner,
    ScriptRunner,
)
from sdd_runner.integrations.time import FakeTime, RealTime, Time


@dataclass(frozen=True)
class RunnerContext:
    """Immutable context holding all dependencies for command execution.

    Created at the CLI or server entry point and threaded through the
    services. Use for_test() for testing scenarios.
    """

    filesystem: Filesystem
    script_runner: ScriptRunner
    time: Time
    config: RunnerConfig = field(default_factory=RunnerConfig)

    @classmethod
    def for_test(
        cls,
        *,
        filesystem: Filesystem | None = None,
        script_runner: ScriptRunner | None = None,
        time: Time | None = None,
        config: RunnerConfig | None = None,
    ) -> "RunnerContext":
        """Create a test context with fake implementations.

        Args:
            filesystem: Filesystem to use (defaults to an empty FakeFilesystem)
            script_runner: Script runner to use (defaults to FakeScriptRunner)
            time: Time integration to use (defaults to FakeTime)
            config: Configuration to use (defaults to RunnerConfig())

        Returns:
            RunnerContext with fake implementations for anything not provided
        """
        return cls(
            filesystem=filesystem or FakeFilesystem(),
            script_runner=script_runner or FakeScriptRunner(),
            time=time or FakeTime(),
            config=config or RunnerConfig(),
        )


def create_context(config: RunnerConfig | None = None) -> RunnerContext:
    """Create production context with real implementations."""
    resolved = config or RunnerConfig.from_env()
    return RunnerContext(
        filesystem=RealFilesystem(),
        script_runner=RealScriptRunner(kill_on_timeout=resolved.kill_on_timeout),
        time=RealTime(),
        config=resolved,
    )
