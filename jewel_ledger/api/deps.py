"""Request-scoped dependencies"""
from typing import Optional

from fastapi import Request

from ..models.ledger_models import TaxRates, coerce_number


def get_default_tax_rates(request: Request) -> TaxRates:
    """Shop GST rates configured at startup"""
    return request.app.state.default_tax_rates


def get_currency(request: Request) -> str:
    return request.app.state.currency


def resolve_tax_rates(
    defaults: TaxRates,
    cgst_rate: Optional[float] = None,
    sgst_rate: Optional[float] = None,
) -> TaxRates:
    """Per-request rates win; missing ones fall back to the shop defaults"""
    return TaxRates(
        cgst_rate=defaults.cgst_rate if cgst_rate is None else coerce_number(cgst_rate),
        sgst_rate=defaults.sgst_rate if sgst_rate is None else coerce_number(sgst_rate),
    )
