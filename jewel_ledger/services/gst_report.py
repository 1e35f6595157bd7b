"""GST export report built from issued invoices.

Invoice-level figures come straight from ``compute_totals`` so the report
matches the printed invoices. For the HSN-wise summary the invoice discount is
spread over the lines in proportion to their value.
"""

from __future__ import annotations

from typing import Dict, Iterable

from ..models.ledger_models import InvoiceRecord
from ..models.report_models import GstInvoiceRow, GstReport, GstReportTotals, HsnSummaryRow
from .totals import compute_totals
from .valuation import valuate

_UNCLASSIFIED_HSN = "NA"


def _invoice_row(invoice: InvoiceRecord) -> GstInvoiceRow:
    totals = compute_totals(invoice.items, invoice.discount, invoice.cgst_rate, invoice.sgst_rate)
    return GstInvoiceRow(
        invoice_number=invoice.invoice_number,
        invoice_date=invoice.invoice_date,
        taxable_value=round(totals.taxable_amount, 2),
        central_tax=round(totals.cgst_amount, 2),
        state_tax=round(totals.sgst_amount, 2),
        round_off=round(totals.round_off, 2),
        grand_total=totals.grand_total,
    )


def _accumulate_hsn(invoice: InvoiceRecord, buckets: Dict[str, Dict[str, float]]) -> None:
    lines = [(item, valuate(item)) for item in invoice.items]
    subtotal = sum(line.line_total for _, line in lines)

    for item, line in lines:
        share = line.line_total / subtotal if subtotal else 0.0
        taxable = line.line_total - invoice.discount * share
        bucket = buckets.setdefault(
            item.hsn_code or _UNCLASSIFIED_HSN,
            {"quantity": 0.0, "value": 0.0, "taxable": 0.0, "central": 0.0, "state": 0.0},
        )
        bucket["quantity"] += item.net_weight
        bucket["value"] += line.line_total
        bucket["taxable"] += taxable
        bucket["central"] += taxable * invoice.cgst_rate / 100
        bucket["state"] += taxable * invoice.sgst_rate / 100


def build_gst_report(invoices: Iterable[InvoiceRecord]) -> GstReport:
    rows = []
    buckets: Dict[str, Dict[str, float]] = {}
    totals = GstReportTotals()

    for invoice in invoices:
        row = _invoice_row(invoice)
        rows.append(row)
        _accumulate_hsn(invoice, buckets)

        totals.invoice_count += 1
        totals.taxable_value += row.taxable_value
        totals.central_tax += row.central_tax
        totals.state_tax += row.state_tax
        totals.grand_total += row.grand_total

    totals.taxable_value = round(totals.taxable_value, 2)
    totals.central_tax = round(totals.central_tax, 2)
    totals.state_tax = round(totals.state_tax, 2)

    hsn_summary = [
        HsnSummaryRow(
            hsn_code=code,
            total_quantity=round(bucket["quantity"], 3),
            total_value=round(bucket["value"], 2),
            taxable_value=round(bucket["taxable"], 2),
            central_tax=round(bucket["central"], 2),
            state_tax=round(bucket["state"], 2),
        )
        for code, bucket in buckets.items()
    ]

    return GstReport(invoices=rows, hsn_summary=hsn_summary, totals=totals)
