"""Invoice totals: subtotal, discount, CGST/SGST split and rupee rounding.

Every surface that shows an invoice (screen, print, PDF, export) goes through
``compute_totals`` so the numbers agree. The steps below run in a fixed order
with a single running accumulator; changing either changes the floating point
results and breaks agreement with totals printed earlier.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional, Union

from ..models.ledger_models import InvoiceLedger, InvoiceTotals, LineItem, TaxRates, ValuedLine
from .valuation import valuate
from .words import amount_in_words


def round_half_away_from_zero(value: float) -> Union[int, float]:
    # inf and nan have no nearest integer; hand them back unchanged.
    if not math.isfinite(value):
        return value
    # Decimal(value) is the exact binary value, so only true halves round outward.
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def _sum_lines(lines: Iterable[ValuedLine]) -> float:
    subtotal = 0.0
    for line in lines:
        subtotal += line.line_total
    return subtotal


def _totals_from_subtotal(
    subtotal: float,
    discount: float,
    cgst_rate: float,
    sgst_rate: float,
) -> InvoiceTotals:
    taxable_amount = subtotal - discount
    cgst_amount = taxable_amount * cgst_rate / 100
    sgst_amount = taxable_amount * sgst_rate / 100
    total_before_rounding = taxable_amount + cgst_amount + sgst_amount
    grand_total = round_half_away_from_zero(total_before_rounding)
    round_off = grand_total - total_before_rounding

    return InvoiceTotals(
        subtotal=subtotal,
        discount=discount,
        taxable_amount=taxable_amount,
        cgst_amount=cgst_amount,
        sgst_amount=sgst_amount,
        total_before_rounding=total_before_rounding,
        round_off=round_off,
        grand_total=grand_total,
        negative_total=taxable_amount < 0 or grand_total < 0,
        non_finite_total=not math.isfinite(total_before_rounding),
    )


def compute_totals(
    items: Iterable[LineItem],
    discount: float = 0.0,
    cgst_rate: float = 0.0,
    sgst_rate: float = 0.0,
) -> InvoiceTotals:
    """Compute the financial summary of an invoice.

    Never raises for numeric input. A discount larger than the subtotal gives a
    negative taxable amount, negative taxes and a negative grand total; the
    result carries ``negative_total=True`` so callers can refuse to save it.
    """
    subtotal = _sum_lines(valuate(item) for item in items)
    return _totals_from_subtotal(subtotal, discount, cgst_rate, sgst_rate)


def compute_invoice(
    items: Iterable[LineItem],
    discount: float = 0.0,
    rates: Optional[TaxRates] = None,
) -> InvoiceLedger:
    """Value every line and compute totals plus the amount in words."""
    if rates is None:
        rates = TaxRates()
    lines: List[ValuedLine] = [valuate(item) for item in items]
    totals = _totals_from_subtotal(
        _sum_lines(lines), discount, rates.cgst_rate, rates.sgst_rate
    )
    return InvoiceLedger(
        lines=lines,
        totals=totals,
        amount_in_words="" if totals.non_finite_total else amount_in_words(totals.grand_total),
    )
