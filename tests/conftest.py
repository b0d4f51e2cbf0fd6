"""Pytest configuration and fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

from sdd_runner.config import RunnerConfig
from sdd_runner.context import RunnerContext
from sdd_runner.integrations.filesystem import FakeFilesystem
from sdd_runner.integrations.script_runner import FakeScriptRunner
from sdd_runner.integrations.time import FakeTime

PROJECT = Path("/work/project")
SCAFFOLD = PROJECT / ".agent-sdd"
SPEC = SCAFFOLD / "specs" / "2024-01-01-login"

FilesystemFactory = Callable[..., FakeFilesystem]


@pytest.fixture
def project_path() -> Path:
    """Project root known to scaffold_filesystem()."""
    return PROJECT


@pytest.fixture
def spec_path() -> Path:
    """Spec directory known to scaffold_filesystem()."""
    return SPEC


@pytest.fixture
def scaffold_filesystem() -> FilesystemFactory:
    """Factory for a FakeFilesystem holding a valid project, scaffold and spec.

    Call with scripts=(...) and instructions=(...) naming the commands that
    should have a script or instruction file installed.
    """

    def _make(
        *,
        scripts: tuple[str, ...] = (),
        instructions: tuple[str, ...] = (),
        chmod_succeeds: bool = True,
    ) -> FakeFilesystem:
        files = {SCAFFOLD / "scripts" / f"{name}.sh" for name in scripts}
        files |= {SCAFFOLD / "instructions" / f"{name}.md" for name in instructions}
        return FakeFilesystem(
            directories={PROJECT, SCAFFOLD, SPEC},
            files=files,
            chmod_succeeds=chmod_succeeds,
        )

    return _make


@pytest.fixture
def fake_time() -> FakeTime:
    """Create a fresh FakeTime."""
    return FakeTime()


@pytest.fixture
def fake_script_runner() -> FakeScriptRunner:
    """Create a FakeScriptRunner whose scripts all exit cleanly."""
    return FakeScriptRunner()


@pytest.fixture
def runner_context(
    scaffold_filesystem: FilesystemFactory,
    fake_time: FakeTime,
    fake_script_runner: FakeScriptRunner,
) -> RunnerContext:
    """Create a RunnerContext with fakes and a project with no scripts installed."""
    return RunnerContext.for_test(
        filesystem=scaffold_filesystem(),
        script_runner=fake_script_runner,
        time=fake_time,
        config=RunnerConfig(),
    )
