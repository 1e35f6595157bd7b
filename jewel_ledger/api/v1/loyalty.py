"""Loyalty redemption check endpoint."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel, Field, field_validator

from ...models.ledger_models import LoyaltySettings, coerce_number
from ...services.loyalty import LoyaltyRedemptionError, max_redeemable_points, validate_redemption
from ..errors import loyalty_api_error

router = APIRouter()


class RedemptionRequest(BaseModel):
    settings: LoyaltySettings
    customer_points: int = Field(default=0, ge=0)
    subtotal: float = 0.0
    points: int = Field(default=0, ge=0)

    @field_validator("subtotal", mode="before")
    @classmethod
    def _coerce_subtotal(cls, value):
        return coerce_number(value)


class RedemptionResponse(BaseModel):
    points: int
    max_points: int
    discount: float


@router.post("/loyalty/redemption", response_model=RedemptionResponse)
async def check_redemption(payload: RedemptionRequest) -> RedemptionResponse:
    """Refuses with LOYALTY_REDEMPTION_INVALID when the points cannot be used."""
    try:
        discount = validate_redemption(
            payload.points, payload.customer_points, payload.subtotal, payload.settings
        )
    except LoyaltyRedemptionError as exc:
        raise loyalty_api_error(exc) from exc
    return RedemptionResponse(
        points=payload.points,
        max_points=max_redeemable_points(payload.customer_points, payload.subtotal, payload.settings),
        discount=discount,
    )
