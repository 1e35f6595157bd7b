"""Invoice ledger service for jewellery retail shops."""
from .models.ledger_models import InvoiceTotals, LineItem, TaxRates
from .services.totals import compute_invoice, compute_totals
from .services.valuation import valuate
from .services.words import to_words

__all__ = [
    "InvoiceTotals",
    "LineItem",
    "TaxRates",
    "compute_invoice",
    "compute_totals",
    "to_words",
    "valuate",
]
