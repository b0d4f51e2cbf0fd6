import logging

import click

from sdd_runner.cli.commands.resolve_cmd import resolve_cmd
from sdd_runner.cli.commands.run_cmd import run_cmd
from sdd_runner.cli.commands.serve_cmd import serve_cmd
from sdd_runner.cli.output import user_output
from sdd_runner.config import RunnerConfig
from sdd_runner.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="agent-sdd-runner")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Run Agent-SDD workflow commands against a project's scripts."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            config = RunnerConfig.from_env()
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None
        ctx.obj = create_context(config)

    if debug or ctx.obj.config.debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


cli.add_command(run_cmd)
cli.add_command(resolve_cmd)
cli.add_command(serve_cmd)


def main() -> None:
    """CLI entry point used by the `sdd-runner` console script."""
    cli()
