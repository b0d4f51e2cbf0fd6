"""Pydantic models for the JSON wire format shared by the CLI and HTTP API."""

from pydantic import BaseModel, ConfigDict, Field

from sdd_runner.errors import CommandRequestError
from sdd_runner.models.command import CommandResult
from sdd_runner.models.resolution import ScriptResolution


class ExecuteCommandRequest(BaseModel):
    """Request body for executing a command.

    command stays a plain string here so that unknown names reach the
    allow-list check and come back as an invalid_command error.
    """

    model_config = ConfigDict(extra="forbid")

    command: str
    task_id: str
    spec_path: str
    project_path: str


class CommandResultResponse(BaseModel):
    """Wire shape of a CommandResult."""

    success: bool
    exit_code: int | None
    stdout: str
    stderr: str
    duration_ms: int = Field(ge=0)
    error_message: str | None

    @classmethod
    def from_result(cls, result: CommandResult) -> "CommandResultResponse":
        """Create response from CommandResult model."""
        return cls(
            success=result.success,
            exit_code=result.exit_code,
            stdout=result.stdout,
            stderr=result.stderr,
            duration_ms=result.duration_ms,
            error_message=result.error_message,
        )


class ResolutionResponse(BaseModel):
    """How one command is backed in a project's scaffold directory."""

    command: str
    kind: str
    script_path: str | None
    instruction_path: str | None

    @classmethod
    def from_resolution(cls, resolution: ScriptResolution) -> "ResolutionResponse":
        """Create response from ScriptResolution model."""
        return cls(
            command=resolution.command.value,
            kind=resolution.kind.value,
            script_path=str(resolution.script_path) if resolution.script_path else None,
            instruction_path=(
                str(resolution.instruction_path) if resolution.instruction_path else None
            ),
        )


class ErrorResponse(BaseModel):
    """Pydantic model for error JSON responses.

    Attributes:
        error: Error message
        error_type: Machine-readable rejection kind (e.g., "missing_scaffold")
    """

    model_config = ConfigDict(strict=True)

    error: str
    error_type: str

    @classmethod
    def from_error(cls, error: CommandRequestError) -> "ErrorResponse":
        return cls(error=str(error), error_type=error.error_type)
