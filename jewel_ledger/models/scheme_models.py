"""Gold savings scheme plans, customer enrollments and payout figures."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .ledger_models import coerce_number


class Scheme(BaseModel):
    """A savings plan offered by the shop.

    Older plans carry ``bonus_months`` or ``interest_rate`` instead of a
    ``benefit_type``; those are read as a ``BONUS_MONTH`` or ``INTEREST``
    benefit.
    """

    name: Optional[str] = None
    scheme_type: str = Field(default="FIXED_DURATION", pattern="^(FIXED_DURATION|FLEXIBLE)$")
    calculation_type: str = Field(default="FLAT_AMOUNT", pattern="^(FLAT_AMOUNT|WEIGHT_ACCUMULATION)$")
    payment_frequency: str = Field(default="MONTHLY", pattern="^(MONTHLY|WEEKLY|DAILY|FLEXIBLE)$")
    min_amount: float = 0.0
    benefit_type: Optional[str] = Field(
        default=None, pattern="^(BONUS_MONTH|INTEREST|MAKING_CHARGE_DISCOUNT|FIXED_AMOUNT)$"
    )
    benefit_value: float = 0.0
    duration_months: int = 0
    scheme_amount: float = 0.0
    bonus_months: float = 0.0
    interest_rate: float = 0.0
    is_active: bool = True

    @field_validator(
        "min_amount",
        "benefit_value",
        "scheme_amount",
        "bonus_months",
        "interest_rate",
        mode="before",
    )
    @classmethod
    def _coerce_numbers(cls, value):
        return coerce_number(value)

    @field_validator("duration_months", mode="before")
    @classmethod
    def _coerce_duration(cls, value):
        return int(coerce_number(value))

    @model_validator(mode="after")
    def _map_legacy_benefit(self) -> "Scheme":
        if self.benefit_type is None:
            if self.bonus_months:
                self.benefit_type = "BONUS_MONTH"
                self.benefit_value = self.bonus_months
            elif self.interest_rate:
                self.benefit_type = "INTEREST"
                self.benefit_value = self.interest_rate
        return self


class SchemeEnrollment(BaseModel):
    """A customer's account in a scheme."""

    account_number: Optional[str] = None
    start_date: Optional[date] = None
    maturity_date: Optional[date] = None
    status: str = Field(default="ACTIVE", pattern="^(ACTIVE|MATURED|CLOSED|CANCELLED)$")
    total_paid: float = 0.0
    total_gold_weight_accumulated: float = 0.0
    target_weight: Optional[float] = None
    target_amount: Optional[float] = None
    current_weight_balance: Optional[float] = None

    @field_validator("total_paid", "total_gold_weight_accumulated", mode="before")
    @classmethod
    def _coerce_totals(cls, value):
        return coerce_number(value)

    @field_validator("target_weight", "target_amount", "current_weight_balance", mode="before")
    @classmethod
    def _coerce_targets(cls, value):
        if value is None:
            return None
        return coerce_number(value)


class RedemptionCalculation(BaseModel):
    principal_amount: float
    principal_weight: float
    benefit_amount: float
    benefit_description: str
    total_payout_amount: float
    total_payout_weight: float
    is_eligible_for_benefit: bool
