"""Main FastAPI application and command line entrypoint for the task manager."""
from contextlib import asynccontextmanager
from dataclasses import replace
from typing import Optional
import argparse
import asyncio
import logging
import sys

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from task_manager import __version__
from task_manager.db.config import Settings
from task_manager.db.store import StoreClient
from task_manager.errors import (
    Conflict,
    ConfigurationError,
    InvalidInput,
    NotFound,
    StoreUnavailable,
    TaskManagerError,
)
from task_manager.mcp.registry import build_mcp_server
from task_manager.routers import MCPEndpoint, create_session_manager, projects_router
from task_manager.services.project_service import ProjectService
from task_manager.services.task_service import TaskService
from task_manager.utils.logger import setup_logging

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    InvalidInput: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    Conflict: status.HTTP_409_CONFLICT,
    StoreUnavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def store_from_settings(settings: Settings) -> StoreClient:
    return StoreClient(settings.redis_url, ssl_cert_reqs=settings.redis_ssl_cert_reqs)


def create_app(settings: Optional[Settings] = None, store: Optional[StoreClient] = None) -> FastAPI:
    """
    Build the HTTP application around one shared store client.

    The store is connected on startup (a failure aborts startup) and closed
    on shutdown.
    """
    if store is None:
        store = store_from_settings(settings or Settings.from_env())

    project_service = ProjectService(store)
    task_service = TaskService(store)
    mcp_server = build_mcp_server(project_service, task_service)
    session_manager = create_session_manager(mcp_server)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await store.connect()
        try:
            async with session_manager.run():
                logger.info("Redis connected, application startup complete.")
                yield
        finally:
            await store.close()

    app = FastAPI(
        title="Task Manager MCP Server",
        description="Project and task management exposed over the Model Context Protocol",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.project_service = project_service
    app.state.task_service = task_service
    app.state.mcp_server = mcp_server

    @app.exception_handler(TaskManagerError)
    async def task_manager_error_handler(request: Request, exc: TaskManagerError):
        return JSONResponse(
            status_code=ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR),
            content={"error": exc.to_dict()},
        )

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        try:
            await store.health_check()
        except StoreUnavailable as e:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"ok": False, "error": e.message},
            )
        return {"ok": True}

    @app.get("/")
    async def root():
        """Root endpoint - service description."""
        return {
            "title": "Task Manager MCP Server",
            "version": __version__,
            "mcp": "/mcp",
            "health": "/health",
        }

    app.add_route("/mcp", MCPEndpoint(session_manager), methods=["GET", "POST", "DELETE"])
    app.include_router(projects_router)

    return app


async def run_stdio(settings: Settings) -> None:
    store = store_from_settings(settings)
    await store.connect()
    try:
        project_service = ProjectService(store)
        task_service = TaskService(store)
        await build_mcp_server(project_service, task_service).run_stdio()
    finally:
        await store.close()


def run_http(settings: Settings) -> None:
    import uvicorn

    logger.info(f"HTTP listening on :{settings.port}")
    logger.info(f"MCP listening on http://localhost:{settings.port}/mcp")
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port, log_config=None)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="task-manager",
        description="Project and task management MCP server backed by Redis",
    )
    parser.add_argument("mode", nargs="?", choices=["stdio", "http"], default="http",
                        help="transport to serve (default: http)")
    parser.add_argument("--port", type=int, default=None, help="HTTP port (overrides PORT)")
    return parser.parse_args(argv)


def run(argv=None) -> int:
    """Console script entrypoint."""
    args = parse_args(argv)

    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        setup_logging()
        logger.critical(f"Invalid configuration: {str(e)}")
        return 1

    setup_logging(settings.log_level)

    if args.mode == "stdio":
        try:
            asyncio.run(run_stdio(settings))
        except StoreUnavailable as e:
            logger.critical(f"Cannot reach Redis: {e.message}")
            return 1
        return 0

    if args.port is not None:
        settings = replace(settings, port=args.port)
    run_http(settings)
    return 0


if __name__ == "__main__":
    sys.exit(run())
