"""
Tax + round-off tests.

Tests:
1-3. Concrete cases (105.50, exact whole totals, .5 boundary)
4-5. Ledger identity across many subtotals
6-8. finalize_many, custom rates, junk input
"""

import pytest

from estimator.financial import FinancialRounding, finalize


def test_finalize_concrete_case():
    summary = finalize(105.50)
    assert summary.sgst == pytest.approx(9.495)
    assert summary.cgst == pytest.approx(9.495)
    assert summary.raw_total == pytest.approx(124.49)
    assert summary.grand_total == 124
    assert summary.round_off == pytest.approx(-0.49)


def test_finalize_rounds_up_from_half():
    """raw 88.5 rounds up to 89 (not to the even 88)."""
    summary = FinancialRounding().finalize(75)
    assert summary.raw_total == 88.5
    assert summary.grand_total == 89
    assert summary.round_off == 0.5


def test_finalize_whole_raw_total():
    summary = finalize(250)
    assert summary.raw_total == pytest.approx(295.0)
    assert summary.grand_total == 295
    assert summary.round_off == pytest.approx(0.0)


def test_finalize_positive_round_off():
    summary = finalize(10)  # 11.8 → 12
    assert summary.grand_total == 12
    assert summary.round_off == pytest.approx(0.2)


@pytest.mark.parametrize("subtotal", [
    0, 0.01, 0.42, 1, 9.99, 105.50, 1234.56, 99999.99, 123456.789, 0.4237,
])
def test_ledger_identity_holds_exactly(subtotal):
    s = finalize(subtotal)
    assert s.subtotal + s.sgst + s.cgst + s.round_off == s.grand_total


def test_grand_total_is_whole_and_within_half_unit():
    for cents in range(0, 100000, 737):
        s = finalize(cents / 100)
        assert s.grand_total == int(s.grand_total)
        assert abs(s.round_off) <= 0.5


def test_finalize_many_sums_first():
    rounding = FinancialRounding()
    many = rounding.finalize_many([50, 55.5])
    single = rounding.finalize(105.5)
    assert many.model_dump() == single.model_dump()


def test_custom_tax_rates():
    summary = FinancialRounding(sgst_rate=0.06, cgst_rate=0.06).finalize(100)
    assert summary.sgst == pytest.approx(6)
    assert summary.grand_total == 112


def test_junk_subtotal_is_zero():
    for junk in (None, "abc", float("nan"), float("inf"), -50):
        s = finalize(junk)
        assert s.subtotal == 0
        assert s.grand_total == 0
        assert s.round_off == 0
