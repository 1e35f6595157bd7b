"""UPI deeplink endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ...services.upi import generate_upi_deeplink, generate_upi_qr_payload
from ..deps import get_currency

router = APIRouter()


class UPIDeeplinkRequest(BaseModel):
    upi_id: str = Field(min_length=3)
    payee_name: str = Field(min_length=1)
    amount: Optional[float] = Field(default=None, gt=0)
    currency: Optional[str] = None
    note: Optional[str] = None
    txn_ref: Optional[str] = None


class UPIDeeplinkResponse(BaseModel):
    deeplink: str
    qr_payload: str


@router.post("/upi/deeplink", response_model=UPIDeeplinkResponse)
async def create_upi_deeplink(
    payload: UPIDeeplinkRequest,
    default_currency: str = Depends(get_currency),
) -> UPIDeeplinkResponse:
    fields = payload.model_dump()
    fields["currency"] = payload.currency or default_currency
    return UPIDeeplinkResponse(
        deeplink=generate_upi_deeplink(**fields),
        qr_payload=generate_upi_qr_payload(**fields),
    )
