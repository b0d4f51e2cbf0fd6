"""Command to show how each workflow command is backed in a project."""

from pathlib import Path

import click

from sdd_runner.cli.error_boundary import cli_error_boundary
from sdd_runner.cli.output import emit_json, format_resolution_table, stderr_console
from sdd_runner.context import RunnerContext
from sdd_runner.schemas import ResolutionResponse
from sdd_runner.services.command_service import CommandService


@click.command("resolve")
@click.option(
    "--project",
    "project_path",
    type=click.Path(path_type=Path),
    default=Path("."),
    show_default=True,
    help="Project directory containing the .agent-sdd scaffold",
)
@click.option("--json", "json_output", is_flag=True, help="Output resolutions as JSON")
@click.pass_obj
@cli_error_boundary
def resolve_cmd(ctx: RunnerContext, project_path: Path, json_output: bool) -> None:
    """Show which commands have a script, only instructions, or nothing."""
    resolutions = CommandService(ctx).resolve(project_path.resolve())

    if json_output:
        emit_json(
            [ResolutionResponse.from_resolution(r).model_dump(mode="json") for r in resolutions]
        )
        return

    stderr_console().print(format_resolution_table(resolutions))
