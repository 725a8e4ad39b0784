"""Liveness and diagnostic endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from photo_share.api.dependencies import get_container
from photo_share.containers import AppContainer
from photo_share.errors import ValidationError

router = APIRouter(tags=["diagnostics"])


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "Photo share API is running."


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "ok"}


@router.get("/test/{param}")
async def test_info(
    param: str, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Return server info or collection counts."""
    if param == "info":
        return container.diagnostics_service.info()
    if param == "counts":
        return container.diagnostics_service.counts()
    raise ValidationError(f"Bad param {param}")
