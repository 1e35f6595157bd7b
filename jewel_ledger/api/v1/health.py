"""Health and version endpoints"""
from fastapi import APIRouter, Depends

from ...core.config import Settings, get_settings


router = APIRouter()


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)):
    """Liveness check"""
    return {"ok": True, "version": settings.app_version}


@router.get("/version")
async def version(settings: Settings = Depends(get_settings)):
    """Version and tax defaults"""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "env": settings.app_env,
        "currency": settings.currency,
        "default_cgst_rate": settings.default_cgst_rate,
        "default_sgst_rate": settings.default_sgst_rate,
    }
