"""Tests for the fallback executor."""

from pathlib import Path

import pytest

from sdd_runner.integrations.time import FakeTime
from sdd_runner.models.command import PLACEHOLDER_MARKER, CommandRequest, SddCommand
from sdd_runner.services.fallback import (
    MISSING_INTEGRATION_MESSAGE,
    placeholder_stdout,
    requires_real_script,
    run_fallback,
)


def _request(command: SddCommand) -> CommandRequest:
    return CommandRequest(
        command=command,
        task_id="3.2",
        spec_path=Path("/repo/.agent-sdd/specs/auth"),
        project_path=Path("/repo"),
    )


def test_only_execute_task_requires_real_script() -> None:
    assert [c for c in SddCommand if requires_real_script(c)] == [SddCommand.EXECUTE_TASK]


async def test_execute_task_fails_deterministically() -> None:
    """sdd-execute-task never simulates success, and does not wait."""
    time = FakeTime()

    result = await run_fallback(_request(SddCommand.EXECUTE_TASK), time, time.monotonic(), 0.5)

    assert result.success is False
    assert result.exit_code == 1
    assert result.stdout == ""
    assert "sdd-execute-task.sh" in result.stderr
    assert result.error_message == MISSING_INTEGRATION_MESSAGE
    assert result.is_placeholder is False
    assert time.sleep_calls == []
    assert result.duration_ms == 0


@pytest.mark.parametrize(
    "command",
    [c for c in SddCommand if c is not SddCommand.EXECUTE_TASK],
)
async def test_other_commands_get_placeholder(command: SddCommand) -> None:
    time = FakeTime()
    request = _request(command)

    result = await run_fallback(request, time, time.monotonic(), 0.5)

    assert result.success is True
    assert result.exit_code == 0
    assert result.stderr == ""
    assert result.error_message is None
    assert result.is_placeholder is True
    assert result.stdout == placeholder_stdout(request)
    assert time.sleep_calls == [0.5]
    assert result.duration_ms == 500


def test_placeholder_stdout_echoes_request() -> None:
    stdout = placeholder_stdout(_request(SddCommand.TWEAK))

    assert stdout.splitlines()[:4] == [
        "Agent-SDD Command: sdd-tweak",
        "Task ID: 3.2",
        "Spec Path: /repo/.agent-sdd/specs/auth",
        "Project Path: /repo",
    ]
    assert PLACEHOLDER_MARKER in stdout


async def test_placeholder_duration_includes_time_before_fallback() -> None:
    """duration_ms is measured from request acceptance, not from the sleep."""
    time = FakeTime(start=10.0)
    started_at = time.monotonic()
    await time.sleep(0.25)

    result = await run_fallback(_request(SddCommand.FIX), time, started_at, 0.5)

    assert result.duration_ms == 750
