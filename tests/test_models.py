import pytest
from pydantic import ValidationError

from jewel_ledger.models.ledger_models import (
    InvoiceRecord,
    LineItem,
    LoyaltySettings,
    TaxRates,
    build_line_items,
    coerce_number,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 0.0),
        ("", 0.0),
        ("abc", 0.0),
        ("12.5", 12.5),
        (" 7 ", 7.0),
        (3, 3.0),
        (float("nan"), 0.0),
        ("Infinity", 0.0),
        (float("-inf"), 0.0),
    ],
)
def test_coerce_number(raw, expected):
    assert coerce_number(raw) == expected


def test_line_item_from_loose_record():
    item = LineItem.model_validate(
        {"description": "Bangle", "net_weight": "10.5", "rate": None, "making_charge": "n/a"}
    )
    assert item.net_weight == 10.5
    assert item.rate == 0
    assert item.making_charge == 0
    assert item.stone_amount == 0


def test_line_item_is_frozen():
    item = LineItem(net_weight=1, rate=5000)
    with pytest.raises(ValidationError):
        item.rate = 6000


def test_tax_rates_default_to_zero():
    rates = TaxRates.model_validate({"cgst_rate": "", "sgst_rate": "1.5"})
    assert rates.cgst_rate == 0
    assert rates.sgst_rate == 1.5
    assert TaxRates() == TaxRates(cgst_rate=0, sgst_rate=0)


def test_build_line_items_applies_current_rate_to_unpriced_lines():
    items = build_line_items(
        [{"net_weight": 2}, {"net_weight": 1, "rate": 6200}],
        current_rate="6000",
    )
    assert [item.rate for item in items] == [6000, 6200]


def test_build_line_items_without_current_rate_keeps_zero():
    items = build_line_items([{"net_weight": 2}, LineItem(net_weight=3, rate=10)])
    assert [item.rate for item in items] == [0, 10]


def test_loyalty_settings_defaults_for_unset_values():
    settings = LoyaltySettings.model_validate(
        {"redemption_conversion_rate": None, "max_redemption_percentage": 0, "min_points_required": "50"}
    )
    assert settings.redemption_conversion_rate == 1.0
    assert settings.max_redemption_percentage == 100.0
    assert settings.min_points_required == 50


def test_loyalty_settings_rejects_unknown_earning_type():
    with pytest.raises(ValidationError):
        LoyaltySettings(earning_type="cashback")


def test_invoice_record_exposes_tax_rates():
    record = InvoiceRecord.model_validate(
        {"invoice_number": "INV-1", "cgst_rate": "1.5", "sgst_rate": None, "discount": "oops"}
    )
    assert record.tax_rates == TaxRates(cgst_rate=1.5, sgst_rate=0)
    assert record.discount == 0
    assert record.items == []
