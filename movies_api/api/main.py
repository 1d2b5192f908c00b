"""
FastAPI application entry point for the Movies API.
"""

import logging
from typing import Iterable, Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from movies_api import __version__
from movies_api.api.config import (
    get_allowed_origins,
    get_api_host,
    get_api_port,
    get_log_level,
    get_seed_path,
)
from movies_api.api.routers import movies, system
from movies_api.core.origin_policy import (
    ALLOWED_METHODS,
    AllowListCORSMiddleware,
    OriginPolicyMiddleware,
)
from movies_api.core.validation import format_errors
from movies_api.database.store import MovieStore
from movies_api.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unreadable request bodies in the same shape as payload errors."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": format_errors(exc.errors())},
    )


def create_app(
    store: Optional[MovieStore] = None,
    allow_origins: Optional[Iterable[str]] = None,
) -> FastAPI:
    """
    Build the application around a movie store.

    Args:
        store: Store to serve (default: a fresh store loaded from the seed file)
        allow_origins: CORS allow-list (default: from configuration)

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Movies API",
        description="REST API for browsing and editing an in-memory movie collection",
        version=__version__,
    )

    app.state.store = store if store is not None else MovieStore.from_seed(get_seed_path())

    origins = list(allow_origins) if allow_origins is not None else get_allowed_origins()

    app.add_middleware(
        AllowListCORSMiddleware,
        allow_origins=origins,
        allow_methods=list(ALLOWED_METHODS),
        allow_headers=["*"],
    )
    # Added last so it runs first: unlisted origins never reach CORS or routes
    app.add_middleware(OriginPolicyMiddleware, allow_origins=origins)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(movies.router)
    app.include_router(system.router)

    @app.get("/")
    def root():
        """Root endpoint."""
        return {
            "message": "Movies API",
            "docs": "/docs",
            "movies": "/movies",
            "health": "/health",
        }

    return app


app = create_app()


def run() -> None:
    """Configure logging and serve the API with uvicorn."""
    configure_api_logging(level=get_log_level())
    host, port = get_api_host(), get_api_port()
    logger.info("App listening on port http://localhost:%s", port)
    uvicorn.run(app, host=host, port=port, log_config=None, server_header=False)


if __name__ == "__main__":
    run()
