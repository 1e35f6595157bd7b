"""Versioned API router registration."""

from fastapi import APIRouter

from .health import router as health_router
from .invoices import router as invoices_router
from .loyalty import router as loyalty_router
from .reports import router as reports_router
from .schemes import router as schemes_router
from .upi import router as upi_router
from .words import router as words_router


def create_v1_router() -> APIRouter:
    """Create and configure v1 API router"""
    router = APIRouter(prefix="/v1")

    router.include_router(health_router, tags=["health"])
    router.include_router(invoices_router, tags=["invoices"])
    router.include_router(words_router, tags=["invoices"])
    router.include_router(loyalty_router, tags=["loyalty"])
    router.include_router(reports_router, tags=["reports"])
    router.include_router(schemes_router, tags=["schemes"])
    router.include_router(upi_router, tags=["upi"])

    return router
