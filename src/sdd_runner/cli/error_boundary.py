"""Error boundary handling for CLI commands.

This module provides a decorator to catch rejected requests at CLI entry
points and display clean error messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from sdd_runner.cli.output import emit_json, user_output
from sdd_runner.errors import CommandRequestError
from sdd_runner.schemas import ErrorResponse

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches CommandRequestError and displays a clean message.

    When the wrapped command was invoked with json_output=True, the error is
    also emitted as an ErrorResponse on stdout. All other exceptions bubble up
    normally with full stack traces.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except CommandRequestError as e:
            if kwargs.get("json_output"):
                emit_json(ErrorResponse.from_error(e).model_dump(mode="json"))
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
