# This project was developed with assistance from AI tools.
"""Liveness endpoint."""

from fastapi import APIRouter

from .. import __version__
from ..core.config import settings

router = APIRouter()


@router.get("/")
async def health() -> dict[str, str]:
    """Report that the service is up. No dependencies are probed."""
    return {"status": "ok", "service": settings.APP_NAME, "version": __version__}
