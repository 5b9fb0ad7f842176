import pytest

from price_predictor.core.utils import format_indian_price, group_indian


@pytest.mark.parametrize("price,expected", [
    (12_600_000, "₹1.26 Cr"),
    (10_000_000, "₹1.00 Cr"),
    (9_999_999, "₹100.00 L"),
    (2_000_000, "₹20.00 L"),
    (100_000, "₹1.00 L"),
    (99_999, "₹99,999"),
    (950, "₹950"),
])
def test_format_indian_price(price, expected):
    assert format_indian_price(price) == expected


def test_group_indian():
    assert group_indian(1_234_567) == "12,34,567"
    assert group_indian(123_456_789) == "12,34,56,789"
    assert group_indian(1000) == "1,000"
    assert group_indian(-45_000) == "-45,000"
    assert group_indian(7) == "7"
