"""Request-rejection errors.

These are raised before any subprocess is spawned and are never wrapped in a
CommandResult. Execution failures are reported inside CommandResult instead.
"""

from pathlib import Path


class CommandRequestError(Exception):
    """Base class for errors that reject a command request outright."""

    error_type = "request_error"


class InvalidCommandError(CommandRequestError):
    """Raised when the command name is not in the allow-list."""

    error_type = "invalid_command"

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Command '{command}' is not allowed")


class InvalidProjectPathError(CommandRequestError):
    """Raised when the project path is missing or not a directory."""

    error_type = "invalid_project_path"

    def __init__(self, project_path: Path) -> None:
        self.project_path = project_path
        super().__init__(f"Project path does not exist or is not a directory: {project_path}")


class MissingScaffoldError(CommandRequestError):
    """Raised when the project has no Agent-SDD scaffold directory."""

    error_type = "missing_scaffold"

    def __init__(self, scaffold_dir: Path) -> None:
        self.scaffold_dir = scaffold_dir
        super().__init__(f"Project does not contain {scaffold_dir.name} directory: {scaffold_dir}")


class InvalidSpecPathError(CommandRequestError):
    """Raised when the spec path is missing or not a directory."""

    error_type = "invalid_spec_path"

    def __init__(self, spec_path: Path) -> None:
        self.spec_path = spec_path
        super().__init__(f"Spec path does not exist or is not a directory: {spec_path}")
