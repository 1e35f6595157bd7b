"""Startup/shutdown lifecycle hooks"""
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from .core.config import get_settings


logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load shop-wide defaults into app state for the request dependencies"""
    logger.info("application_starting")

    settings = get_settings()
    app.state.default_tax_rates = settings.default_tax_rates
    app.state.currency = settings.currency

    logger.info(
        "application_started",
        env=settings.app_env,
        cgst_rate=settings.default_cgst_rate,
        sgst_rate=settings.default_sgst_rate,
    )

    yield

    logger.info("application_shutdown_complete")
