"""Gold savings scheme payouts.

A scheme either collects cash (``FLAT_AMOUNT``) or converts each installment
into grams of gold at the day's rate (``WEIGHT_ACCUMULATION``). The benefit is
only paid on a matured enrollment.
"""

from __future__ import annotations

from datetime import date, timedelta

from ..models.scheme_models import RedemptionCalculation, Scheme, SchemeEnrollment


def _format_value(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def _benefit(scheme: Scheme, total_paid: float):
    value = scheme.benefit_value
    if scheme.benefit_type == "BONUS_MONTH":
        return value * scheme.scheme_amount, f"{_format_value(value)} Bonus Month(s)"
    if scheme.benefit_type == "INTEREST":
        return total_paid * value / 100, f"{_format_value(value)}% Interest"
    if scheme.benefit_type == "FIXED_AMOUNT":
        return value, "Fixed Bonus"
    if scheme.benefit_type == "MAKING_CHARGE_DISCOUNT":
        # Redeemed against a later purchase, never paid out in cash.
        return 0.0, f"Making Charge Discount (up to {_format_value(value)}%)"
    return 0.0, ""


def calculate_redemption_value(
    scheme: Scheme,
    enrollment: SchemeEnrollment,
    current_gold_rate: float = 0.0,
    is_matured: bool = True,
) -> RedemptionCalculation:
    """Work out what a customer receives when closing an enrollment.

    Weight schemes pay out the accumulated grams, valued at
    ``current_gold_rate``; cash schemes pay back what was paid. The benefit is
    added in both cases when ``is_matured`` is true.
    """
    total_paid = enrollment.total_paid
    total_weight = enrollment.total_gold_weight_accumulated

    benefit_amount, benefit_description = 0.0, ""
    if is_matured:
        benefit_amount, benefit_description = _benefit(scheme, total_paid)

    if scheme.calculation_type == "WEIGHT_ACCUMULATION":
        return RedemptionCalculation(
            principal_amount=total_paid,
            principal_weight=total_weight,
            benefit_amount=benefit_amount,
            benefit_description=benefit_description,
            total_payout_amount=total_weight * current_gold_rate + benefit_amount,
            total_payout_weight=total_weight,
            is_eligible_for_benefit=is_matured,
        )

    return RedemptionCalculation(
        principal_amount=total_paid,
        principal_weight=0.0,
        benefit_amount=benefit_amount,
        benefit_description=benefit_description,
        total_payout_amount=total_paid + benefit_amount,
        total_payout_weight=0.0,
        is_eligible_for_benefit=is_matured,
    )


def calculate_gold_weight(amount: float, rate_per_gram: float) -> float:
    """Grams bought by an installment, to the milligram."""
    if rate_per_gram <= 0:
        return 0.0
    return round(amount / rate_per_gram, 3)


def calculate_maturity_value(scheme: Scheme, current_total_paid: float) -> float:
    """Projected payout at maturity, assuming every installment is paid."""
    if scheme.scheme_type == "FIXED_DURATION":
        principal = scheme.scheme_amount * scheme.duration_months
        return principal + _benefit(scheme, principal)[0]

    # Flexible plans only project interest on what has been paid so far.
    benefit = 0.0
    if scheme.benefit_type == "INTEREST":
        benefit = current_total_paid * scheme.benefit_value / 100
    return current_total_paid + benefit


def is_payment_late(due_date: date, payment_date: date, grace_period_days: int) -> bool:
    return payment_date > due_date + timedelta(days=grace_period_days)
