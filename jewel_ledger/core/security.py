"""Static API key check for shop integrations."""

from __future__ import annotations

import secrets
from typing import Optional

import structlog
from fastapi import Header, HTTPException, status

from .config import get_settings

logger = structlog.get_logger(__name__)


async def enforce_api_key(x_api_key: Optional[str] = Header(default=None)) -> None:
    """Reject requests without the configured key; open when no key is set."""
    expected = get_settings().api_key
    if not expected:
        return
    if x_api_key is None or not secrets.compare_digest(x_api_key, expected):
        logger.warning("api_key_rejected", key_present=x_api_key is not None)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key",
        )
