"""GST report endpoint."""

from __future__ import annotations

import math
from typing import List

import structlog
from fastapi import APIRouter, status
from pydantic import BaseModel

from ...models.ledger_models import InvoiceRecord
from ...models.report_models import GstReport
from ...services.gst_report import build_gst_report
from ..errors import APIError

router = APIRouter()
logger = structlog.get_logger(__name__)


class GstReportRequest(BaseModel):
    invoices: List[InvoiceRecord]


@router.post("/reports/gst", response_model=GstReport)
async def gst_report(payload: GstReportRequest) -> GstReport:
    report = build_gst_report(payload.invoices)

    overflowed = [row.invoice_number for row in report.invoices if not math.isfinite(row.grand_total)]
    if overflowed:
        logger.warning("non_finite_invoice_total", invoice_numbers=overflowed)
        raise APIError(
            code="INVOICE_TOTAL_NOT_FINITE",
            message="Invoice amounts are too large to total",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details={"invoice_numbers": overflowed},
        )
    return report
