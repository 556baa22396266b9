"""
Task Tracker - FastAPI Server
HTTP/JSON API over a single in-memory TaskStore
"""

from datetime import datetime
from typing import Optional
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

import config
from tasktracker import ERROR_KEY, HandlerResponse, TaskHandlers, TaskStore
from tasktracker.logging_setup import setup_logging

# Setup logging
setup_logging(config.LOG_LEVEL, config.LOG_FILE, config.LOG_JSON)
logger = logging.getLogger(__name__)


def to_response(result: HandlerResponse) -> Response:
    """Convert a HandlerResponse into a FastAPI response."""
    if result.body is None:
        return Response(status_code=result.status_code)
    return JSONResponse(content=result.body, status_code=result.status_code)


def create_app(store: Optional[TaskStore] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: TaskStore to serve; a fresh empty store when not given

    Returns:
        Configured FastAPI app with the store on ``app.state.task_store``
    """
    app = FastAPI(
        title=config.APP_NAME,
        description="In-memory task tracking API",
        version=config.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if store is None:
        store = TaskStore()
    app.state.task_store = store
    handlers = TaskHandlers(store)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms:.1f}ms)"
        )
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        """Keep framework errors (unknown route, wrong method) in the API error shape."""
        return JSONResponse(
            status_code=exc.status_code,
            content={ERROR_KEY: str(exc.detail).lower()},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={ERROR_KEY: "internal server error"})

    @app.post("/tasks")
    async def create_task(request: Request):
        """Create a task"""
        return to_response(handlers.create(await request.body()))

    @app.get("/tasks")
    def list_tasks(completed: Optional[str] = None):
        """List tasks, optionally filtered by completion state"""
        return to_response(handlers.list(completed))

    @app.get("/tasks/{task_id}")
    def get_task(task_id: str):
        """Get a single task"""
        return to_response(handlers.get(task_id))

    @app.put("/tasks/{task_id}")
    async def update_task(task_id: str, request: Request):
        """Partially update a task"""
        return to_response(handlers.update(task_id, await request.body()))

    @app.delete("/tasks/{task_id}")
    def delete_task(task_id: str):
        """Delete a task"""
        return to_response(handlers.delete(task_id))

    @app.get("/health")
    def health_check():
        """Health check endpoint with task counts."""
        return {
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "version": config.APP_VERSION,
            "environment": config.ENVIRONMENT,
            "tasks": store.get_stats(),
        }

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "name": config.APP_NAME,
            "version": config.APP_VERSION,
            "status": "operational",
            "docs": "/docs"
        }

    return app


app = create_app()


if __name__ == "__main__":
    logger.info(f"Server starting at {config.API_HOST}:{config.API_PORT}")
    uvicorn.run(
        "api_server:app",
        host=config.API_HOST,
        port=config.API_PORT,
        workers=config.API_WORKERS,
        reload=False,
        log_level=config.LOG_LEVEL.lower()
    )
