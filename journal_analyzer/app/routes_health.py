# journal_analyzer/app/routes_health.py

from __future__ import annotations
from fastapi import APIRouter

router = APIRouter()

@router.get("/health")
async def health():
    """
    Liveness check.

    Only reports that the process is up; the catalog is not touched.
    """
    return {
        "status": "ok",
        "service": "journal-analyzer",
    }
