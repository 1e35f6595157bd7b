"""Gold savings scheme endpoints."""

from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field, field_validator

from ...models.ledger_models import coerce_number
from ...models.scheme_models import RedemptionCalculation, Scheme, SchemeEnrollment
from ...services.schemes import (
    calculate_gold_weight,
    calculate_maturity_value,
    calculate_redemption_value,
    is_payment_late,
)

router = APIRouter()


class SchemeRedemptionRequest(BaseModel):
    scheme: Scheme
    enrollment: SchemeEnrollment
    current_gold_rate: float = 0.0
    is_matured: bool = True

    @field_validator("current_gold_rate", mode="before")
    @classmethod
    def _coerce_rate(cls, value):
        return coerce_number(value)


class MaturityRequest(BaseModel):
    scheme: Scheme
    current_total_paid: float = 0.0

    @field_validator("current_total_paid", mode="before")
    @classmethod
    def _coerce_paid(cls, value):
        return coerce_number(value)


class MaturityResponse(BaseModel):
    maturity_value: float


class InstallmentRequest(BaseModel):
    amount: float
    gold_rate: float = 0.0
    due_date: Optional[date] = None
    payment_date: Optional[date] = None
    grace_period_days: int = Field(default=0, ge=0)

    @field_validator("amount", "gold_rate", mode="before")
    @classmethod
    def _coerce_amounts(cls, value):
        return coerce_number(value)


class InstallmentResponse(BaseModel):
    gold_weight: float
    is_late: bool


@router.post("/schemes/redemption", response_model=RedemptionCalculation)
async def scheme_redemption(payload: SchemeRedemptionRequest) -> RedemptionCalculation:
    return calculate_redemption_value(
        payload.scheme, payload.enrollment, payload.current_gold_rate, payload.is_matured
    )


@router.post("/schemes/maturity", response_model=MaturityResponse)
async def scheme_maturity(payload: MaturityRequest) -> MaturityResponse:
    return MaturityResponse(
        maturity_value=calculate_maturity_value(payload.scheme, payload.current_total_paid)
    )


@router.post("/schemes/installment", response_model=InstallmentResponse)
async def scheme_installment(payload: InstallmentRequest) -> InstallmentResponse:
    """Grams credited for an installment and whether it missed its due date."""
    is_late = False
    if payload.due_date is not None:
        payment_date = payload.payment_date or date.today()
        is_late = is_payment_late(payload.due_date, payment_date, payload.grace_period_days)
    return InstallmentResponse(
        gold_weight=calculate_gold_weight(payload.amount, payload.gold_rate),
        is_late=is_late,
    )
