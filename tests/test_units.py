from __future__ import annotations

from defi_positions.units import format_amount, normalize_amount


def test_normalize_amount_candidate_order_matters():
    assert normalize_amount(150_000_000, [6, 8]) == "150.0000"
    assert normalize_amount(150_000_000, [8, 6]) == "1.5000"


def test_normalize_amount_non_positive_is_zero():
    assert normalize_amount(0, [8]) == "0"
    assert normalize_amount(-5, [8]) == "0"


def test_normalize_amount_non_finite_is_zero():
    assert normalize_amount(float("inf"), [8]) == "0"
    assert normalize_amount(float("nan"), [8]) == "0"


def test_normalize_amount_skips_candidates_out_of_window():
    # 10**18 / 10**8 is above the window; 10**18 / 10**12 is inside it.
    assert normalize_amount(10**18, [8, 12]) == "1000000.0000"


def test_normalize_amount_falls_back_to_raw_units():
    assert normalize_amount(1, [8]) == "1.0000"
    assert normalize_amount(10**18, [8]) == "1000000000000000000.0000"


def test_normalize_amount_without_candidates_shows_raw_units():
    assert normalize_amount(123_456, []) == "123456.0000"


def test_normalize_amount_window_bounds():
    # Lower bound is inclusive, upper bound exclusive.
    assert normalize_amount(10_000, [8]) == "0.0001"
    assert normalize_amount(10**17, [8]) == "100000000000000000.0000"


def test_format_amount_has_four_fractional_digits():
    assert format_amount(2.5) == "2.5000"
    assert format_amount(1 / 3) == "0.3333"
