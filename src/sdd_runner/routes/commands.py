"""HTTP route handlers for command execution."""

from fastapi import APIRouter, Request

from sdd_runner.models.command import SddCommand
from sdd_runner.schemas import (
    CommandResultResponse,
    ExecuteCommandRequest,
    ResolutionResponse,
)
from sdd_runner.services.command_service import CommandService

router = APIRouter(prefix="/api/commands", tags=["commands"])


def get_command_service(request: Request) -> CommandService:
    """Get CommandService from request state."""
    return request.app.state.command_service


@router.get("", response_model=list[str])
async def list_commands() -> list[str]:
    """List the allowed workflow commands."""
    return [command.value for command in SddCommand]


@router.get("/resolve", response_model=list[ResolutionResponse])
async def resolve_commands(request: Request, project_path: str) -> list[ResolutionResponse]:
    """Report how each command is backed in the given project."""
    service = get_command_service(request)
    resolutions = service.resolve(project_path)
    return [ResolutionResponse.from_resolution(r) for r in resolutions]


@router.post("/execute", response_model=CommandResultResponse)
async def execute_command(
    request: Request,
    body: ExecuteCommandRequest,
) -> CommandResultResponse:
    """Execute a command for one task.

    Rejected requests are turned into 400 responses by the application's
    CommandRequestError handler; execution failures come back as a 200 with
    success=false.
    """
    service = get_command_service(request)
    result = await service.execute_command(
        command=body.command,
        task_id=body.task_id,
        spec_path=body.spec_path,
        project_path=body.project_path,
    )
    return CommandResultResponse.from_result(result)
