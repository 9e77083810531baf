"""
Main FastAPI application for the Books API backend
"""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..database import check_database_connection, init_database
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Books API...")
    init_database()

    success, error_message = await check_database_connection()
    if success:
        logger.info("Database connection validation successful")
    else:
        logger.error("Database connection validation failed", error=error_message)
        # Only production refuses to start without a database
        if settings.environment.lower() in ("production", "prod"):
            raise RuntimeError(f"Database connection failed: {error_message}")

    yield

    logger.info("Shutting down Books API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Books API",
        description="Catalogue of books and the awards they have won",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    # GraphQL endpoint (allow disabling for tests)
    if not os.getenv("BOOKSAPI_DISABLE_GRAPHQL"):
        try:
            from ..graphql.schema import create_graphql_router, validate_schema

            logger.info("Validating GraphQL schema...")
            validate_schema()

            app.include_router(create_graphql_router(), prefix="")
            logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
        except Exception as e:  # pragma: no cover
            logger.error("Failed to initialize GraphQL endpoint", error=str(e))
            raise

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "booksapi.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
