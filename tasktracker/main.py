import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from tasktracker.config import Settings, load_settings
from tasktracker.database import Base, build_engine, build_session_factory
from tasktracker.errors import AppError, describe_errors
from tasktracker.logging_setup import setup_logging
from tasktracker.responses import envelope
from tasktracker.routers import auth, ping, tasks
from tasktracker.services.tokens import TokenService

import tasktracker.models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application; configuration errors abort here, before serving."""
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    engine = build_engine(settings.database_url)
    Base.metadata.create_all(bind=engine)

    app = FastAPI(title="Task Tracker API")
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.token_service = TokenService(settings.secret_key)

    app.include_router(ping.router)
    app.include_router(auth.router)
    app.include_router(tasks.router)

    _install_error_handlers(app)
    logger.info("Task Tracker API initialised")
    return app


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return envelope(None, status_code=exc.status_code, message=exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return envelope(None, status_code=422, message=describe_errors(exc.errors()))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return envelope(None, status_code=exc.status_code, message=str(exc.detail))

    # Generic error handler to return JSON errors for unexpected exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return envelope(None, status_code=500, message="Internal server error")


def run() -> None:
    settings = load_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
