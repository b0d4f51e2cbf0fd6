"""Command to serve the HTTP API."""

import dataclasses

import click

from sdd_runner.context import RunnerContext


@click.command("serve")
@click.option("--host", default=None, help="Interface to bind (default: SDD_RUNNER_HOST)")
@click.option("--port", type=int, default=None, help="Port to bind (default: SDD_RUNNER_PORT)")
@click.pass_obj
def serve_cmd(ctx: RunnerContext, host: str | None, port: int | None) -> None:
    """Serve the command execution API over HTTP."""
    # uvicorn and fastapi load only when serving
    from sdd_runner.main import run

    config = ctx.config
    if host is not None:
        config = dataclasses.replace(config, host=host)
    if port is not None:
        config = dataclasses.replace(config, port=port)
    run(config)
