"""Request validation run before any script is resolved or spawned."""

import logging
from pathlib import Path

from sdd_runner.errors import (
    InvalidProjectPathError,
    InvalidSpecPathError,
    MissingScaffoldError,
)
from sdd_runner.integrations.filesystem import Filesystem
from sdd_runner.models.command import SCAFFOLD_DIR_NAME, CommandRequest, SddCommand

logger = logging.getLogger(__name__)


def parse_command(raw: str) -> SddCommand:
    """Check a command name against the allow-list.

    Pure: never touches the filesystem.

    Raises:
        InvalidCommandError: If raw is not an allowed command
    """
    return SddCommand.parse(raw)


def build_request(
    command: str | SddCommand,
    task_id: str,
    spec_path: str | Path,
    project_path: str | Path,
) -> CommandRequest:
    """Build a CommandRequest from boundary values.

    Raises:
        InvalidCommandError: If command is not an allowed command
    """
    parsed = command if isinstance(command, SddCommand) else parse_command(command)
    return CommandRequest(
        command=parsed,
        task_id=task_id,
        spec_path=Path(spec_path),
        project_path=Path(project_path),
    )


def validate_project(project_path: Path, filesystem: Filesystem) -> Path:
    """Check the project directory and its scaffold directory.

    Returns:
        The scaffold directory

    Raises:
        InvalidProjectPathError: If the project path is not a directory
        MissingScaffoldError: If the project has no scaffold directory
    """
    if not filesystem.is_dir(project_path):
        raise InvalidProjectPathError(project_path)

    scaffold_dir = project_path / SCAFFOLD_DIR_NAME
    if not filesystem.is_dir(scaffold_dir):
        raise MissingScaffoldError(scaffold_dir)

    return scaffold_dir


def validate_paths(request: CommandRequest, filesystem: Filesystem) -> None:
    """Check project, scaffold and spec directories in that order.

    The first failing check short-circuits the rest.

    Raises:
        InvalidProjectPathError: If the project path is not a directory
        MissingScaffoldError: If the project has no scaffold directory
        InvalidSpecPathError: If the spec path is not a directory
    """
    validate_project(request.project_path, filesystem)

    if not filesystem.is_dir(request.spec_path):
        raise InvalidSpecPathError(request.spec_path)

    logger.debug(
        "Paths validated: project=%s, spec=%s", request.project_path, request.spec_path
    )
