# Standard library imports
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import auth_router, post_router, user_router, docs_router, register_error_handlers
from .core.config import Settings, get_settings
from .di.container import DIContainer
from .domain.repositories import PostRepository, UserRepository
from .infrastructure.db import SeedGenerator, open_database, ensure_schema, close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Opens the store, ensures the schema, seeds an empty store and builds the
    DI container. Requests are only served after all of that succeeded; any
    failure here is logged and re-raised so the server process exits.
    """
    settings: Settings = app.state.settings
    
    try:
        connection = await open_database(settings.database_file)
    except Exception as e:
        logger.error(f"Failed to open database {settings.database_file}: {e}", exc_info=True)
        raise
    
    try:
        await ensure_schema(connection)
        container = DIContainer(connection)
        seed_generator = SeedGenerator(
            user_repository=container.get(UserRepository),
            post_repository=container.get(PostRepository),
            user_count=settings.seed_user_count,
        )
        await seed_generator.seed_if_empty()
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}", exc_info=True)
        await close_database(connection)
        raise
    
    app.state.container = container
    logger.info("Database initialization completed successfully")
    
    yield
    
    logger.info("Shutting down server...")
    await close_database(connection)
    logger.info("Application shutdown complete")


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - CORS middleware configuration
    - Error handlers giving every failure an {"error": message} body
    - API route registration
    
    Args:
        settings: Settings to use; read from the environment when omitted
    
    Returns:
        Configured FastAPI application instance
    """
    settings = settings if settings is not None else get_settings()
    
    # Only the HTML page at / documents the API
    application = FastAPI(
        title="Placeholder API",
        version="1.0.0",
        description="Mock REST API with users and posts backed by SQLite",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    application.state.settings = settings
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_error_handlers(application)
    
    application.include_router(auth_router)
    application.include_router(post_router, prefix="/posts")
    application.include_router(user_router, prefix="/users")
    # Must stay last: it ends with the catch-all route
    application.include_router(docs_router)
    
    return application


# Create application instance
app = create_application()
