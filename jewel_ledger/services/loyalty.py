"""Loyalty points: redemption caps, redemption value and points earned."""

from __future__ import annotations

import math

from ..models.ledger_models import LoyaltySettings


class LoyaltyRedemptionError(Exception):
    """Raised when a requested points redemption is not allowed."""

    def __init__(self, message: str, points: int, limit: int = 0):
        self.points = points
        self.limit = limit
        super().__init__(message)


def max_redeemable_points(customer_points: int, subtotal: float, settings: LoyaltySettings) -> int:
    """Largest redemption allowed for this customer on this invoice."""
    if not settings.redemption_enabled or settings.redemption_conversion_rate <= 0:
        return 0
    cap_value = subtotal * (settings.max_redemption_percentage / 100)
    if not math.isfinite(cap_value):
        # inf leaves only the balance as a cap; nan allows nothing.
        return max(0, customer_points) if cap_value > 0 else 0
    cap_points = math.floor(cap_value / settings.redemption_conversion_rate)
    return max(0, min(customer_points, cap_points))


def redemption_discount(points: int, settings: LoyaltySettings) -> float:
    return points * settings.redemption_conversion_rate


def validate_redemption(
    points: int,
    customer_points: int,
    subtotal: float,
    settings: LoyaltySettings,
) -> float:
    """Check a redemption request and return the discount it is worth."""
    if points <= 0:
        return 0.0
    if not settings.redemption_enabled:
        raise LoyaltyRedemptionError("Points redemption is disabled for this shop", points)
    if points < settings.min_points_required:
        raise LoyaltyRedemptionError(
            f"At least {settings.min_points_required} points are required to redeem",
            points,
            settings.min_points_required,
        )
    limit = max_redeemable_points(customer_points, subtotal, settings)
    if points > limit:
        raise LoyaltyRedemptionError(f"At most {limit} points can be redeemed", points, limit)
    return redemption_discount(points, settings)


def points_to_earn(grand_total: float, settings: LoyaltySettings) -> int:
    if not settings.is_enabled or not math.isfinite(grand_total) or grand_total <= 0:
        return 0
    if settings.earning_type == "flat" and settings.flat_points_ratio:
        return math.floor(grand_total * settings.flat_points_ratio)
    if settings.earning_type == "percentage" and settings.percentage_back:
        return math.floor(grand_total * (settings.percentage_back / 100))
    return 0
