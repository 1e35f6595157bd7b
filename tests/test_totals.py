import math

import pytest

from jewel_ledger.models.ledger_models import LineItem, TaxRates
from jewel_ledger.services.totals import compute_invoice, compute_totals, round_half_away_from_zero
from jewel_ledger.services.valuation import valuate


def test_single_gold_line_with_three_percent_gst():
    items = [LineItem(net_weight=10, rate=5000, making_charge=200)]
    totals = compute_totals(items, 0, 1.5, 1.5)

    assert totals.subtotal == 52000
    assert totals.taxable_amount == 52000
    assert totals.cgst_amount == 780
    assert totals.sgst_amount == 780
    assert totals.total_before_rounding == 53560
    assert totals.grand_total == 53560
    assert totals.round_off == 0
    assert totals.negative_total is False


def test_fractional_weight_rounds_up_to_next_rupee():
    items = [LineItem(net_weight=3.333, rate=6000, making_charge=0)]
    totals = compute_totals(items, 0, 1.5, 1.5)

    assert totals.subtotal == pytest.approx(19998, abs=1e-6)
    assert totals.cgst_amount == pytest.approx(299.97, abs=1e-6)
    assert totals.sgst_amount == pytest.approx(299.97, abs=1e-6)
    assert totals.total_before_rounding == pytest.approx(20597.94, abs=1e-6)
    assert totals.grand_total == 20598
    assert totals.round_off == pytest.approx(0.06, abs=1e-6)


def test_discount_above_subtotal_passes_through_as_negative_total():
    items = [LineItem(net_weight=1, rate=1000)]
    totals = compute_totals(items, 1500, 1.5, 1.5)

    assert totals.subtotal == 1000
    assert totals.taxable_amount == -500
    assert totals.cgst_amount == -7.5
    assert totals.sgst_amount == -7.5
    assert totals.grand_total == -515
    assert totals.negative_total is True


def test_negative_tax_rate_flags_negative_grand_total():
    totals = compute_totals([LineItem(net_weight=1, rate=1000)], 0, -150, 0)

    assert totals.taxable_amount == 1000
    assert totals.grand_total == -500
    assert totals.negative_total is True


@pytest.mark.parametrize("cgst, sgst", [(0, 0), (1.5, 1.5), (9, 9), (2.5, 6)])
def test_no_items_gives_all_zero_totals(cgst, sgst):
    totals = compute_totals([], 0, cgst, sgst)

    assert totals.subtotal == 0
    assert totals.taxable_amount == 0
    assert totals.cgst_amount == 0
    assert totals.sgst_amount == 0
    assert totals.grand_total == 0
    assert totals.round_off == 0


def test_repeated_calls_are_identical():
    items = [
        LineItem(net_weight=3.333, rate=6012.5, making_charge=415.75),
        LineItem(net_weight=0.785, rate=7120, making_charge=600, stone_amount=1499.99),
    ]
    first = compute_totals(items, 125.5, 1.5, 1.5)
    second = compute_totals(items, 125.5, 1.5, 1.5)
    assert first.model_dump() == second.model_dump()


def test_subtotal_is_accumulated_in_input_order():
    items = [
        LineItem(net_weight=0.1, rate=0.7),
        LineItem(net_weight=1e6, rate=1e10),
        LineItem(net_weight=0.3, rate=0.9),
    ]
    expected = 0.0
    for item in items:
        expected += valuate(item).line_total

    assert compute_totals(items).subtotal == expected


@pytest.mark.parametrize("rate", [5000, 6123.45, 7250.5])
@pytest.mark.parametrize("cgst, sgst", [(1.5, 1.5), (2.5, 2.5), (0, 3), (6, 6)])
def test_tax_split_is_linear(rate, cgst, sgst):
    items = [LineItem(net_weight=4.217, rate=rate, making_charge=350)]
    totals = compute_totals(items, 100, cgst, sgst)

    combined = totals.taxable_amount * (cgst + sgst) / 100
    assert totals.cgst_amount + totals.sgst_amount == pytest.approx(combined, abs=1e-9)


@pytest.mark.parametrize("weight", [0.001, 1.111, 2.345, 7.777, 12.5, 99.999])
def test_round_off_stays_within_half_a_rupee(weight):
    totals = compute_totals([LineItem(net_weight=weight, rate=6543.21, making_charge=123.4)], 0, 1.5, 1.5)

    assert isinstance(totals.grand_total, int)
    assert abs(totals.round_off) <= 0.5
    assert totals.grand_total == pytest.approx(totals.total_before_rounding + totals.round_off)


@pytest.mark.parametrize(
    "value, expected",
    [(10.5, 11), (-10.5, -11), (2.5, 3), (-2.5, -3), (10.4999, 10), (-0.4, 0), (0.49999999999999994, 0)],
)
def test_round_half_away_from_zero(value, expected):
    assert round_half_away_from_zero(value) == expected


def test_half_rupee_total_rounds_away_from_zero():
    items = [LineItem(net_weight=1, rate=10.5)]

    positive = compute_totals(items)
    assert positive.grand_total == 11
    assert positive.round_off == 0.5

    negative = compute_totals(items, 21)
    assert negative.total_before_rounding == -10.5
    assert negative.grand_total == -11
    assert negative.round_off == -0.5


def test_compute_invoice_matches_compute_totals():
    items = [
        LineItem(net_weight=10, rate=5000, making_charge=200),
        LineItem(net_weight=3.333, rate=6000),
    ]
    ledger = compute_invoice(items, 500, TaxRates(cgst_rate=1.5, sgst_rate=1.5))

    assert ledger.totals == compute_totals(items, 500, 1.5, 1.5)
    assert [line.line_total for line in ledger.lines] == [52000, pytest.approx(19998)]
    assert ledger.amount_in_words.endswith("Rupees Only")


def test_compute_invoice_words_use_grand_total():
    ledger = compute_invoice([LineItem(net_weight=10, rate=5000, making_charge=200)], 0, TaxRates(cgst_rate=1.5, sgst_rate=1.5))
    assert ledger.amount_in_words == "Fifty-three Thousand Five Hundred Sixty Rupees Only"


def test_compute_invoice_without_rates_is_untaxed():
    ledger = compute_invoice([LineItem(net_weight=2, rate=100)])
    assert ledger.totals.cgst_amount == 0
    assert ledger.totals.grand_total == 200


@pytest.mark.parametrize("value", [math.inf, -math.inf])
def test_round_half_away_from_zero_leaves_infinity_alone(value):
    assert round_half_away_from_zero(value) == value


def test_round_half_away_from_zero_leaves_nan_alone():
    assert math.isnan(round_half_away_from_zero(math.nan))


def test_overflowing_line_is_flagged_instead_of_raising():
    items = [LineItem(net_weight=1e200, rate=1e200)]
    totals = compute_totals(items, 0, 1.5, 1.5)

    assert totals.subtotal == math.inf
    assert totals.grand_total == math.inf
    assert totals.non_finite_total is True
    assert totals.negative_total is False


def test_nan_discount_is_flagged_instead_of_raising():
    totals = compute_totals([LineItem(net_weight=1, rate=1000)], math.nan, 1.5, 1.5)

    assert math.isnan(totals.grand_total)
    assert totals.non_finite_total is True


def test_finite_totals_are_not_flagged():
    totals = compute_totals([LineItem(net_weight=10, rate=5000)], 0, 1.5, 1.5)
    assert totals.non_finite_total is False


def test_compute_invoice_has_no_words_for_overflowed_total():
    ledger = compute_invoice([LineItem(net_weight=1e200, rate=1e200)])
    assert ledger.totals.non_finite_total is True
    assert ledger.amount_in_words == ""
