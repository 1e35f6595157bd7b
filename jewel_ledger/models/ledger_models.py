"""Pydantic models for invoice lines, shop tax rates and computed totals.

External records (shop settings, invoice rows, item rows) arrive loosely typed.
Every numeric field is coerced here, once, so the calculators can assume
well-formed floats.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Any, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def coerce_number(value: Any) -> float:
    """Parse a loose numeric value, falling back to 0 for anything unusable."""
    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


class LineItem(BaseModel):
    """A single priced line of a jewellery invoice."""

    model_config = ConfigDict(frozen=True)

    description: Optional[str] = None
    purity: Optional[str] = None
    hsn_code: Optional[str] = None
    gross_weight: float = 0.0
    stone_weight: float = 0.0
    net_weight: float = 0.0
    rate: float = 0.0
    making_charge: float = 0.0
    flat_making: float = 0.0
    stone_amount: float = 0.0

    @field_validator(
        "gross_weight",
        "stone_weight",
        "net_weight",
        "rate",
        "making_charge",
        "flat_making",
        "stone_amount",
        mode="before",
    )
    @classmethod
    def _coerce_numbers(cls, value):
        return coerce_number(value)


class TaxRates(BaseModel):
    """Shop-level GST rates, in percent."""

    model_config = ConfigDict(frozen=True)

    cgst_rate: float = 0.0
    sgst_rate: float = 0.0

    @field_validator("cgst_rate", "sgst_rate", mode="before")
    @classmethod
    def _coerce_rates(cls, value):
        return coerce_number(value)


class ValuedLine(BaseModel):
    metal_amount: float
    making_amount: float
    line_total: float


class InvoiceTotals(BaseModel):
    subtotal: float
    discount: float
    taxable_amount: float
    cgst_amount: float
    sgst_amount: float
    total_before_rounding: float
    round_off: float
    # Whole rupees; left unrounded (inf or nan) when the arithmetic overflowed.
    grand_total: Union[int, float]
    negative_total: bool = False
    non_finite_total: bool = False


class InvoiceLedger(BaseModel):
    """Valued lines, totals and the printable amount for one invoice."""

    lines: List[ValuedLine]
    totals: InvoiceTotals
    amount_in_words: str


class LoyaltySettings(BaseModel):
    """Shop loyalty programme configuration."""

    is_enabled: bool = False
    earning_type: str = Field(default="flat", pattern="^(flat|percentage)$")
    flat_points_ratio: Optional[float] = None
    percentage_back: Optional[float] = None
    redemption_enabled: bool = False
    redemption_conversion_rate: float = 1.0
    max_redemption_percentage: float = 100.0
    min_points_required: int = 0

    @field_validator("flat_points_ratio", "percentage_back", mode="before")
    @classmethod
    def _coerce_optional(cls, value):
        if value is None:
            return None
        return coerce_number(value)

    @field_validator("redemption_conversion_rate", mode="before")
    @classmethod
    def _coerce_conversion(cls, value):
        return coerce_number(value) or 1.0

    @field_validator("max_redemption_percentage", mode="before")
    @classmethod
    def _coerce_max_percentage(cls, value):
        return coerce_number(value) or 100.0

    @field_validator("min_points_required", mode="before")
    @classmethod
    def _coerce_min_points(cls, value):
        return int(coerce_number(value))


class InvoiceRecord(BaseModel):
    """An issued invoice as read back for reporting."""

    invoice_number: str
    invoice_date: Optional[date] = None
    items: List[LineItem] = Field(default_factory=list)
    discount: float = 0.0
    cgst_rate: float = 0.0
    sgst_rate: float = 0.0

    @field_validator("discount", "cgst_rate", "sgst_rate", mode="before")
    @classmethod
    def _coerce_amounts(cls, value):
        return coerce_number(value)

    @property
    def tax_rates(self) -> TaxRates:
        return TaxRates(cgst_rate=self.cgst_rate, sgst_rate=self.sgst_rate)


def build_line_items(records: Iterable[Any], current_rate: Any = 0) -> List[LineItem]:
    """Turn raw item records into ``LineItem`` objects.

    Lines without a rate of their own are priced at the shop's current rate.
    """
    fallback_rate = coerce_number(current_rate)
    items: List[LineItem] = []
    for record in records:
        item = record if isinstance(record, LineItem) else LineItem.model_validate(record)
        if not item.rate and fallback_rate:
            item = item.model_copy(update={"rate": fallback_rate})
        items.append(item)
    return items
