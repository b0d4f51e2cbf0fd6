"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sdd_runner import __version__
from sdd_runner.config import RunnerConfig
from sdd_runner.context import RunnerContext, create_context
from sdd_runner.errors import CommandRequestError
from sdd_runner.routes.commands import router as commands_router
from sdd_runner.schemas import ErrorResponse
from sdd_runner.services.command_service import CommandService


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup.

    Creates production context with real implementations on startup.
    """
    app.state.command_service = CommandService(create_context())
    yield


async def handle_request_error(request: Request, exc: CommandRequestError) -> JSONResponse:
    """Render a rejected command request as a 400 response."""
    return JSONResponse(
        status_code=400,
        content=ErrorResponse.from_error(exc).model_dump(mode="json"),
    )


def create_app(context: RunnerContext | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        context: Optional RunnerContext for testing. If None, uses lifespan
                 to create production context.

    Returns:
        Configured FastAPI application
    """
    if context is not None:
        # Test mode: use provided context, no lifespan
        app = FastAPI(
            title="Agent-SDD Runner",
            description="Runs Agent-SDD workflow commands against project scripts",
            version=__version__,
        )
        app.state.command_service = CommandService(context)
    else:
        # Production mode: use lifespan for DI
        app = FastAPI(
            title="Agent-SDD Runner",
            description="Runs Agent-SDD workflow commands against project scripts",
            version=__version__,
            lifespan=lifespan,
        )

    # The desktop shell serves its UI from a local origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CommandRequestError, handle_request_error)
    app.include_router(commands_router)

    return app


def run(config: RunnerConfig | None = None) -> None:
    """Run the server (entry point for CLI)."""
    resolved = config or RunnerConfig.from_env()
    app = create_app(create_context(resolved))
    uvicorn.run(
        app,
        host=resolved.host,
        port=resolved.port,
        log_level="debug" if resolved.debug else "info",
    )


if __name__ == "__main__":
    run()
