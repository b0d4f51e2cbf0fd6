"""Command to execute one Agent-SDD workflow command for a task."""

import asyncio
from pathlib import Path

import click

from sdd_runner.cli.error_boundary import cli_error_boundary
from sdd_runner.cli.output import (
    emit_json,
    format_result_summary,
    machine_output,
    stderr_console,
    user_output,
)
from sdd_runner.context import RunnerContext
from sdd_runner.schemas import CommandResultResponse
from sdd_runner.services.command_service import CommandService


@click.command("run")
@click.argument("command", metavar="COMMAND")
@click.argument("task_id")
@click.option(
    "--project",
    "project_path",
    type=click.Path(path_type=Path),
    default=Path("."),
    show_default=True,
    help="Project directory containing the .agent-sdd scaffold",
)
@click.option(
    "--spec",
    "spec_path",
    type=click.Path(path_type=Path),
    required=True,
    help="Spec directory the task belongs to",
)
@click.option("--json", "json_output", is_flag=True, help="Output the result as JSON")
@click.pass_obj
@cli_error_boundary
def run_cmd(
    ctx: RunnerContext,
    command: str,
    task_id: str,
    project_path: Path,
    spec_path: Path,
    json_output: bool,
) -> None:
    """Execute COMMAND for TASK_ID.

    COMMAND is one of: sdd-execute-task, sdd-fix, sdd-tweak, sdd-check-task,
    sdd-queue-fix, sdd-queue-tweak. Exits 0 if the command succeeded and 1
    otherwise.
    """
    service = CommandService(ctx)
    result = asyncio.run(
        service.execute_command(
            command=command,
            task_id=task_id,
            spec_path=spec_path.resolve(),
            project_path=project_path.resolve(),
        )
    )

    if json_output:
        emit_json(CommandResultResponse.from_result(result).model_dump(mode="json"))
    else:
        if result.stdout:
            machine_output(result.stdout, nl=not result.stdout.endswith("\n"))
        if result.stderr:
            user_output(result.stderr, nl=not result.stderr.endswith("\n"))
        stderr_console().print(format_result_summary(command, task_id, result))

    raise SystemExit(0 if result.success else 1)
