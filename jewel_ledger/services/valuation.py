"""Per-line valuation of jewellery invoice items."""

from __future__ import annotations

from ..models.ledger_models import LineItem, ValuedLine


def valuate(item: LineItem) -> ValuedLine:
    """Price one line: metal by weight, making per gram plus any flat fee, stones."""
    metal_amount = item.net_weight * item.rate
    making_amount = item.net_weight * item.making_charge + item.flat_making
    line_total = metal_amount + making_amount + item.stone_amount
    return ValuedLine(
        metal_amount=metal_amount,
        making_amount=making_amount,
        line_total=line_total,
    )
