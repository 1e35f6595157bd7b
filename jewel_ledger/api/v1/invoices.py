"""Invoice totals endpoint."""

from __future__ import annotations

from typing import List, Optional

import structlog
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field, field_validator

from ...models.ledger_models import (
    InvoiceTotals,
    LineItem,
    LoyaltySettings,
    TaxRates,
    ValuedLine,
    build_line_items,
    coerce_number,
)
from ...services.loyalty import LoyaltyRedemptionError, points_to_earn, validate_redemption
from ...services.totals import compute_invoice, compute_totals
from ...services.upi import invoice_payment_link
from ..deps import get_currency, get_default_tax_rates, resolve_tax_rates
from ..errors import APIError, loyalty_api_error

router = APIRouter()
logger = structlog.get_logger(__name__)


class LoyaltyRequest(BaseModel):
    settings: LoyaltySettings
    customer_points: int = 0
    points_to_redeem: int = 0


class InvoiceTotalsRequest(BaseModel):
    invoice_number: Optional[str] = None
    items: List[LineItem] = Field(default_factory=list)
    discount: float = 0.0
    cgst_rate: Optional[float] = None
    sgst_rate: Optional[float] = None
    current_rate: float = 0.0
    loyalty: Optional[LoyaltyRequest] = None
    upi_id: Optional[str] = None
    payee_name: Optional[str] = None

    @field_validator("discount", "current_rate", mode="before")
    @classmethod
    def _coerce_amounts(cls, value):
        return coerce_number(value)

    @field_validator("cgst_rate", "sgst_rate", mode="before")
    @classmethod
    def _coerce_rates(cls, value):
        # None means "use the shop default", not zero.
        return None if value is None else coerce_number(value)


class InvoiceTotalsResponse(BaseModel):
    lines: List[ValuedLine]
    totals: InvoiceTotals
    amount_in_words: str
    currency: str = "INR"
    loyalty_discount: float = 0.0
    points_to_earn: int = 0
    upi_deeplink: Optional[str] = None


@router.post("/invoices/totals", response_model=InvoiceTotalsResponse)
async def invoice_totals(
    payload: InvoiceTotalsRequest,
    default_rates: TaxRates = Depends(get_default_tax_rates),
    currency: str = Depends(get_currency),
) -> InvoiceTotalsResponse:
    rates = resolve_tax_rates(default_rates, payload.cgst_rate, payload.sgst_rate)
    items = build_line_items(payload.items, payload.current_rate)

    loyalty_discount = 0.0
    if payload.loyalty is not None:
        subtotal = compute_totals(items).subtotal
        try:
            loyalty_discount = validate_redemption(
                payload.loyalty.points_to_redeem,
                payload.loyalty.customer_points,
                subtotal,
                payload.loyalty.settings,
            )
        except LoyaltyRedemptionError as exc:
            raise loyalty_api_error(exc) from exc

    ledger = compute_invoice(items, payload.discount + loyalty_discount, rates)
    totals = ledger.totals

    if totals.non_finite_total:
        logger.warning(
            "non_finite_invoice_total",
            invoice_number=payload.invoice_number,
            subtotal=totals.subtotal,
            total_before_rounding=totals.total_before_rounding,
        )
        raise APIError(
            code="INVOICE_TOTAL_NOT_FINITE",
            message="Invoice amounts are too large to total",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details={"invoice_number": payload.invoice_number},
        )

    if totals.negative_total:
        logger.warning(
            "negative_invoice_total",
            invoice_number=payload.invoice_number,
            subtotal=totals.subtotal,
            discount=totals.discount,
            grand_total=totals.grand_total,
        )

    earned = 0
    if payload.loyalty is not None:
        earned = points_to_earn(totals.grand_total, payload.loyalty.settings)

    return InvoiceTotalsResponse(
        lines=ledger.lines,
        totals=totals,
        amount_in_words=ledger.amount_in_words,
        currency=currency,
        loyalty_discount=loyalty_discount,
        points_to_earn=earned,
        upi_deeplink=invoice_payment_link(
            payload.upi_id,
            payload.payee_name,
            totals.grand_total,
            payload.invoice_number,
            currency,
        ),
    )
