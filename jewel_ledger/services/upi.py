"""UPI payment links for invoice settlement."""

from __future__ import annotations

import math
from typing import Optional, Union
from urllib.parse import quote


def generate_upi_deeplink(
    upi_id: str,
    payee_name: str,
    amount: Optional[float] = None,
    currency: str = "INR",
    note: Optional[str] = None,
    txn_ref: Optional[str] = None,
) -> str:
    """Build a ``upi://pay`` link in the NPCI deeplink format."""
    parts = [f"upi://pay?pa={quote(upi_id)}", f"pn={quote(payee_name)}"]

    if amount is not None:
        parts.append(f"am={amount:.2f}")

    parts.append(f"cu={currency}")

    if note:
        parts.append(f"tn={quote(note)}")
    if txn_ref:
        parts.append(f"tr={quote(txn_ref)}")

    return "&".join(parts)


def generate_upi_qr_payload(
    upi_id: str,
    payee_name: str,
    amount: Optional[float] = None,
    currency: str = "INR",
    note: Optional[str] = None,
    txn_ref: Optional[str] = None,
) -> str:
    """QR payload for the same payment; UPI QR codes carry the deeplink text."""
    return generate_upi_deeplink(upi_id, payee_name, amount, currency, note, txn_ref)


def invoice_payment_link(
    upi_id: Optional[str],
    payee_name: Optional[str],
    grand_total: Union[int, float],
    invoice_number: Optional[str] = None,
    currency: str = "INR",
) -> Optional[str]:
    """Deeplink asking the customer to pay the invoice total, if one applies."""
    if not upi_id or not payee_name:
        return None
    if not math.isfinite(grand_total) or grand_total <= 0:
        return None
    note = f"Invoice {invoice_number}" if invoice_number else None
    return generate_upi_deeplink(
        upi_id=upi_id,
        payee_name=payee_name,
        amount=float(grand_total),
        currency=currency,
        note=note,
        txn_ref=invoice_number,
    )
