"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from photo_share.api.auth import router as auth_router
from photo_share.api.diagnostics import router as diagnostics_router
from photo_share.api.photos import router as photos_router
from photo_share.api.users import router as users_router
from photo_share.app_logging import configure_logging
from photo_share.config import parse_cors_origins
from photo_share.containers import AppContainer
from photo_share.errors import InternalError, PhotoShareError

_GENERIC_ERROR = "Internal server error."


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Photo Share")
    app.state.container = container

    origins = parse_cors_origins(container.settings.cors_origins)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(PhotoShareError)
    async def handle_app_error(
        request: Request, exc: PhotoShareError
    ) -> JSONResponse:
        if isinstance(exc, InternalError):
            logger.error(
                "Request failed: %s",
                exc.message,
                extra={"path": request.url.path},
            )
            return JSONResponse(
                status_code=exc.status_code, content={"detail": _GENERIC_ERROR}
            )
        return JSONResponse(
            status_code=exc.status_code, content={"detail": exc.message}
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": _first_validation_message(exc)},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": _GENERIC_ERROR},
        )

    app.include_router(diagnostics_router)
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(photos_router)

    return app


def _first_validation_message(exc: RequestValidationError) -> str:
    """Describe the first failing field of a rejected request."""
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = ".".join(location)
    message = str(first.get("msg", "Invalid value"))
    return f"{field}: {message}" if field else message
