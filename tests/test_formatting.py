from __future__ import annotations

import math

import pytest

from investcalc.core.formatting import format_currency, format_result
from investcalc.core.projection import project


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "₹0"),
        (999, "₹999"),
        (1000, "₹1,000"),
        (423970.3095172884, "₹423,970"),
        (336784.66018088197, "₹336,785"),
        (1234567.5, "₹1,234,568"),
        (2.5, "₹3"),
        (-2.5, "-₹3"),
        (-0.4, "₹0"),
        (-14025.5, "-₹14,026"),
    ],
)
def test_whole_rupee_display(value, expected):
    assert format_currency(value) == expected


def test_decimal_scale_pads_and_rounds():
    assert format_currency(1234.5, decimal_scale=2) == "₹1,234.50"
    assert format_currency(0.125, decimal_scale=2) == "₹0.13"


def test_prefix_and_separator_are_configurable():
    assert format_currency(1234567, prefix="$", thousand_separator=" ") == "$1 234 567"


def test_very_large_values_keep_every_digit():
    assert format_currency(1e30) == "₹1,000,000,000,000,000,000,000,000,000,000"


def test_non_finite_values_have_no_prefix():
    assert format_currency(math.nan) == "NaN"
    assert format_currency(math.inf) == "∞"
    assert format_currency(-math.inf) == "-∞"


def test_format_result_covers_every_field(make_input):
    formatted = format_result(project(make_input()))

    assert formatted == {
        "future_value": "₹423,970",
        "total_principal": "₹310,000",
        "total_contributions": "₹300,000",
        "total_interest": "₹113,970",
        "inflation_adjusted_value": "₹336,785",
    }


def test_negative_decimal_scale_is_rejected():
    with pytest.raises(ValueError, match="decimal_scale"):
        format_currency(1234.0, decimal_scale=-1)
