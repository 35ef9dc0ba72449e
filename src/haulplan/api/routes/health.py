"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import settings

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't touch any dataset."""
    return {"status": "ok", "service": settings.app_name}


@router.get("/health/data", status_code=status.HTTP_200_OK)
def health_data() -> dict:
    """Report whether the roads dataset used for planning is present."""
    roads_path = settings.roads_path
    return {
        "data_root": str(settings.data_root),
        "roads_file": roads_path.name,
        "roads_file_exists": roads_path.exists(),
    }
