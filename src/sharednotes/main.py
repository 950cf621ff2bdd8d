# Main application entry point
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .api import health_router, notes_router
from .config import get_settings
from .core.exceptions import NoteNotFoundError, SharedNotesError
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.schemas.common import MessageResponse
from .database import Database

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect to the store once; refuse to serve if that fails."""
    logger.info(
        "Starting sharednotes application",
        extra={"version": __version__, "environment": settings.environment, "debug": settings.debug},
    )

    database = Database.from_settings(settings)
    try:
        await database.ping()
        await database.create_tables()
    except Exception as e:
        logger.critical("Failed to connect to the database", exc_info=e, extra={"db": database.name})
        await database.dispose()
        raise
    logger.info("Database connected", extra={"db": database.name})
    app.state.database = database

    yield

    logger.info("Shutting down sharednotes application")
    await database.dispose()


app = FastAPI(
    title="sharednotes",
    description="Shared notes addressed by name",
    version=__version__,
    lifespan=lifespan,
)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception handlers
@app.exception_handler(SharedNotesError)
async def sharednotes_error_handler(request: Request, exc: SharedNotesError):
    """Domain errors that escaped a route still answer with a {message} body."""
    if isinstance(exc, NoteNotFoundError):
        return JSONResponse(status_code=404, content=MessageResponse(message="Note not found").model_dump())

    logger.error("Unhandled store error", exc_info=exc, extra={"method": request.method, "path": request.url.path})
    return JSONResponse(status_code=500, content=MessageResponse(message="Internal server error").model_dump())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error", exc_info=exc, extra={"method": request.method, "path": request.url.path})
    return JSONResponse(status_code=500, content=MessageResponse(message="Internal server error").model_dump())


# Include routers
app.include_router(notes_router, prefix=settings.api_prefix)
app.include_router(health_router, prefix=settings.api_prefix)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("sharednotes.main:app", host=settings.host, port=settings.port, reload=settings.reload)
