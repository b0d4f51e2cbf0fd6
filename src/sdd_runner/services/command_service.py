"""Business logic for executing Agent-SDD workflow commands."""

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator
from pathlib import Path

from sdd_runner.context import RunnerContext
from sdd_runner.models.command import CommandRequest, CommandResult, SddCommand
from sdd_runner.models.resolution import ScriptResolution
from sdd_runner.services.fallback import run_fallback
from sdd_runner.services.normalizer import normalize_outcome
from sdd_runner.services.resolution import resolve_all, resolve_script
from sdd_runner.services.validation import build_request, validate_paths, validate_project

logger = logging.getLogger(__name__)


class CommandService:
    """Orchestrates validation, resolution, execution and fallback.

    Each call is an independent unit of work with its own child process and
    buffers. Nothing is shared between calls apart from the optional
    admission semaphore, and nothing is retried.
    """

    def __init__(self, ctx: RunnerContext) -> None:
        """Create CommandService with runner context.

        Args:
            ctx: Runner context with injected dependencies
        """
        self._ctx = ctx
        limit = ctx.config.max_concurrent_scripts
        self._admission = asyncio.Semaphore(limit) if limit is not None else None

    async def execute_command(
        self,
        command: str | SddCommand,
        task_id: str,
        spec_path: str | Path,
        project_path: str | Path,
    ) -> CommandResult:
        """Validate and execute a command given as boundary values.

        The allow-list check runs before anything touches the filesystem.

        Raises:
            CommandRequestError: If the command or any path is rejected
        """
        started_at = self._ctx.time.monotonic()
        request = build_request(command, task_id, spec_path, project_path)
        return await self._execute(request, started_at)

    async def execute(self, request: CommandRequest) -> CommandResult:
        """Validate paths for an already-built request and execute it.

        Raises:
            CommandRequestError: If any path is rejected
        """
        return await self._execute(request, self._ctx.time.monotonic())

    def resolve(self, project_path: str | Path) -> list[ScriptResolution]:
        """Report how each allowed command is backed in a project.

        Raises:
            InvalidProjectPathError: If project_path is not a directory
            MissingScaffoldError: If the project has no scaffold directory
        """
        scaffold_dir = validate_project(Path(project_path), self._ctx.filesystem)
        return resolve_all(scaffold_dir, self._ctx.filesystem)

    async def _execute(self, request: CommandRequest, started_at: float) -> CommandResult:
        logger.info(
            "Executing Agent-SDD command: %s for task: %s", request.command.value, request.task_id
        )
        validate_paths(request, self._ctx.filesystem)

        resolution = resolve_script(request.command, request.scaffold_dir, self._ctx.filesystem)
        if resolution.script_path is None:
            return await run_fallback(
                request,
                self._ctx.time,
                started_at,
                self._ctx.config.placeholder_delay_seconds,
            )

        return await self._run_script(request, resolution.script_path, started_at)

    async def _run_script(
        self, request: CommandRequest, script_path: Path, started_at: float
    ) -> CommandResult:
        if not self._ctx.filesystem.make_executable(script_path):
            logger.warning("Continuing without executable bit on %s", script_path)

        config = self._ctx.config
        async with self._admitted():
            outcome = await self._ctx.script_runner.run_script(
                interpreter=config.shell,
                script_path=script_path,
                task_id=request.task_id,
                cwd=request.project_path,
                timeout_seconds=config.timeout_seconds,
            )

        result = normalize_outcome(outcome, self._ctx.time.elapsed_ms(started_at))
        logger.info(
            "Script execution completed in %dms (success=%s, exit_code=%s)",
            result.duration_ms,
            result.success,
            result.exit_code,
        )
        return result

    @contextlib.asynccontextmanager
    async def _admitted(self) -> AsyncIterator[None]:
        if self._admission is None:
            yield
            return
        async with self._admission:
            yield
