"""
Main FastAPI application for Bookshelf
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import LibraryStore, create_seeded_store

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Bookshelf API...", **app.state.store.stats())

    yield

    # Shutdown
    logger.info("Shutting down Bookshelf API...", **app.state.store.stats())


def create_app(store: LibraryStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Store to serve. A new one, seeded according to settings, is
            created when omitted.
    """
    if store is None:
        try:
            store = create_seeded_store(
                seed_path=settings.seed_path, seed_on_startup=settings.seed_on_startup
            )
        except Exception as e:
            logger.error("Failed to seed library store", error=str(e))
            raise

    app = FastAPI(
        title="Bookshelf API",
        description="GraphQL API over an in-memory collection of books and authors",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store = store

    app.add_middleware(LoggingContextMiddleware)

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check endpoint
    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__, **store.stats()}

    # GraphQL endpoint
    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        # Validate schema at startup to catch unresolved types early
        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(store)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint=settings.graphql_path)
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        # Server should not start with broken GraphQL
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookshelf.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
