"""Output utilities for CLI commands with clear intent.

user_output() is for humans and goes to stderr; machine_output() is for data
and goes to stdout, so `--json` output can be piped safely.
"""

import json
from typing import Any

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from sdd_runner.models.command import CommandResult
from sdd_runner.models.resolution import ResolutionKind, ScriptResolution


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write machine-readable data to stdout."""
    click.echo(message, nl=nl)


def emit_json(data: dict[str, Any] | list[Any]) -> None:
    """Output JSON data to stdout for machine consumption.

    For Pydantic models, call model.model_dump(mode='json') before
    passing to this function.
    """
    machine_output(json.dumps(data, indent=2))


def format_duration_ms(duration_ms: int) -> str:
    """Format milliseconds as a short human-readable duration.

    Example:
        >>> format_duration_ms(950)
        '950ms'
        >>> format_duration_ms(83_400)
        '1m 23s'
    """
    if duration_ms < 1000:
        return f"{duration_ms}ms"
    total_seconds = duration_ms // 1000
    minutes, seconds = divmod(total_seconds, 60)
    if minutes == 0:
        return f"{duration_ms / 1000:.1f}s"
    return f"{minutes}m {seconds}s"


def format_result_summary(command: str, task_id: str, result: CommandResult) -> Panel:
    """Format final summary box with status, exit code, timing, errors."""
    lines: list[Text] = []

    if result.is_placeholder:
        lines.append(Text("⚠️  Status: Simulated (no script installed)", style="yellow"))
    elif result.success:
        lines.append(Text("✅ Status: Success", style="green"))
    else:
        lines.append(Text("❌ Status: Failed", style="red"))

    lines.append(Text(f"📋 Task: {task_id}"))
    exit_code = "none" if result.exit_code is None else str(result.exit_code)
    lines.append(Text(f"🔢 Exit code: {exit_code}"))
    lines.append(Text(f"⏱  Duration: {format_duration_ms(result.duration_ms)}"))

    if result.error_message is not None:
        lines.append(Text(""))
        lines.append(Text(result.error_message, style="red"))

    title = f"{command} complete" if result.success else f"{command} failed"
    return Panel(
        Text("\n").join(lines),
        title=title,
        border_style="green" if result.success else "red",
        padding=(1, 2),
    )


_KIND_STYLES = {
    ResolutionKind.SCRIPT: "green",
    ResolutionKind.INSTRUCTION: "yellow",
    ResolutionKind.NONE: "dim",
}


def format_resolution_table(resolutions: list[ScriptResolution]) -> Table:
    """Render how each command is backed in a project."""
    table = Table(title="Agent-SDD commands")
    table.add_column("Command", style="bold")
    table.add_column("Backed by")
    table.add_column("Path")

    for resolution in resolutions:
        kind = resolution.kind
        path = resolution.script_path or resolution.instruction_path
        table.add_row(
            resolution.command.value,
            Text(kind.value, style=_KIND_STYLES[kind]),
            str(path) if path is not None else "-",
        )
    return table


def stderr_console() -> Console:
    return Console(stderr=True)
