"""Deterministic results for commands with no runnable script."""

import logging

from sdd_runner.integrations.time import Time
from sdd_runner.models.command import (
    PLACEHOLDER_MARKER,
    CommandRequest,
    CommandResult,
    SddCommand,
)

logger = logging.getLogger(__name__)

MISSING_INTEGRATION_MESSAGE = "Agent-SDD script execution requires the Claude CLI"


def missing_integration_stderr(command: SddCommand) -> str:
    script_name = f"{command.value}.sh"
    return (
        f"Script execution failed: {script_name} not found or not executable.\n"
        "\n"
        "To use the execute feature, ensure:\n"
        "1. The Claude CLI is installed\n"
        f"2. The {script_name} script exists in .agent-sdd/scripts/\n"
        "3. The project has a complete Agent-SDD setup\n"
        "\n"
        "This command never falls back to a simulated run."
    )


def placeholder_stdout(request: CommandRequest) -> str:
    return (
        f"Agent-SDD Command: {request.command.value}\n"
        f"Task ID: {request.task_id}\n"
        f"Spec Path: {request.spec_path}\n"
        f"Project Path: {request.project_path}\n"
        "\n"
        f"{PLACEHOLDER_MARKER} No script is installed for this command yet."
    )


def requires_real_script(command: SddCommand) -> bool:
    """Commands that must fail loudly instead of simulating success."""
    return command is SddCommand.EXECUTE_TASK


def missing_integration_result(request: CommandRequest, duration_ms: int) -> CommandResult:
    """Hard failure for a command that cannot be simulated."""
    logger.warning(
        "Script not found for %s, returning error instead of placeholder", request.command.value
    )
    return CommandResult(
        success=False,
        exit_code=1,
        stdout="",
        stderr=missing_integration_stderr(request.command),
        duration_ms=duration_ms,
        error_message=MISSING_INTEGRATION_MESSAGE,
    )


async def run_placeholder(
    request: CommandRequest, time: Time, started_at: float, delay_seconds: float
) -> CommandResult:
    """Simulated success standing in for a script that is not wired up yet.

    Args:
        request: The validated request
        time: Time integration used for the delay and the duration
        started_at: Monotonic reading taken when the request was accepted
        delay_seconds: Simulated processing delay
    """
    logger.info(
        "Running placeholder for %s, task %s", request.command.value, request.task_id
    )
    await time.sleep(delay_seconds)
    return CommandResult(
        success=True,
        exit_code=0,
        stdout=placeholder_stdout(request),
        stderr="",
        duration_ms=time.elapsed_ms(started_at),
        error_message=None,
        simulated=True,
    )


async def run_fallback(
    request: CommandRequest, time: Time, started_at: float, delay_seconds: float
) -> CommandResult:
    """Dispatch an unresolved request to the hard-failure or placeholder path."""
    if requires_real_script(request.command):
        return missing_integration_result(request, time.elapsed_ms(started_at))
    return await run_placeholder(request, time, started_at, delay_seconds)
