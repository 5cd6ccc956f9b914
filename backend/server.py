from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import logging

from core.config import Settings, configure_logging, load_settings
from core.database import create_client, create_database_indexes
from routes import health_router, invites_router
from services.invites import InviteStore, StorageFailure

logger = logging.getLogger(__name__)


def _format_validation_errors(exc: RequestValidationError) -> list:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return messages


async def invalid_input_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid payload", "errors": _format_validation_errors(exc)}
    )


async def storage_failure_handler(request: Request, exc: StorageFailure):
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app(settings: Optional[Settings] = None, db=None) -> FastAPI:
    """
    Build the invite API.

    When no database handle is passed, a MongoDB client is opened from
    settings on startup and closed on shutdown.
    """
    if settings is None:
        settings = load_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup/shutdown"""
        client = None
        if app.state.db is None:
            client = create_client(settings)
            app.state.db = client[settings.db_name]
            app.state.invite_store = InviteStore(app.state.db)
        await create_database_indexes(app.state.db)
        yield
        if client is not None:
            client.close()

    app = FastAPI(title="Invite API", lifespan=lifespan)
    app.state.settings = settings
    app.state.db = db
    app.state.invite_store = InviteStore(db) if db is not None else None

    app.include_router(health_router)
    app.include_router(invites_router)

    app.add_exception_handler(RequestValidationError, invalid_input_handler)
    app.add_exception_handler(StorageFailure, storage_failure_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_credentials=True,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app


if __name__ == "__main__":
    import uvicorn

    settings = load_settings()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)
