"""Rows and totals of the GST export report."""

from __future__ import annotations

from datetime import date
from typing import List, Optional, Union

from pydantic import BaseModel


class GstInvoiceRow(BaseModel):
    invoice_number: str
    invoice_date: Optional[date] = None
    taxable_value: float
    central_tax: float
    state_tax: float
    round_off: float
    grand_total: Union[int, float]


class HsnSummaryRow(BaseModel):
    hsn_code: str
    total_quantity: float
    total_value: float
    taxable_value: float
    central_tax: float
    state_tax: float


class GstReportTotals(BaseModel):
    invoice_count: int = 0
    taxable_value: float = 0.0
    central_tax: float = 0.0
    state_tax: float = 0.0
    grand_total: Union[int, float] = 0


class GstReport(BaseModel):
    invoices: List[GstInvoiceRow]
    hsn_summary: List[HsnSummaryRow]
    totals: GstReportTotals
