"""Tests for rupee price formatting."""

import math
from decimal import Decimal

import pytest

from estate_metrics.exceptions import InvalidAmountError
from estate_metrics.formatting import (
    format_currency,
    format_percentage,
    format_price,
    format_price_range,
    group_indian,
    round_half_up,
)
from estate_metrics.pricing import PriceRange


class TestFormatPrice:
    """Tests for format_price."""

    def test_crore_with_precision(self) -> None:
        assert format_price(28_000_000, precision=1) == "₹2.8 Cr"

    def test_crore_default_precision(self) -> None:
        assert format_price(28_000_000) == "₹2.80 Cr"

    def test_lakh(self) -> None:
        assert format_price(4_550_000) == "₹45.50 L"

    def test_lakh_rounds_half_up(self) -> None:
        assert format_price(4_550_000, precision=0) == "₹46 L"

    def test_below_one_lakh_uses_grouping(self) -> None:
        assert format_price(85_000) == "₹85,000"
        assert format_price(999) == "₹999"

    def test_zero(self) -> None:
        assert format_price(0) == "₹0"

    def test_crore_boundary(self) -> None:
        """The unit switches exactly at one crore."""
        assert format_price(9_999_999).endswith(" L")
        assert format_price(10_000_000) == "₹1.00 Cr"

    def test_lakh_boundary(self) -> None:
        assert format_price(100_000) == "₹1.00 L"
        assert format_price(99_999) == "₹99,999"

    def test_trim_zeros(self) -> None:
        assert format_price(20_000_000, trim_zeros=True) == "₹2 Cr"
        assert format_price(25_000_000, trim_zeros=True) == "₹2.5 Cr"
        assert format_price(4_500_000, precision=1, trim_zeros=True) == "₹45 L"

    def test_accepts_decimal(self) -> None:
        assert format_price(Decimal("15000000")) == "₹1.50 Cr"

    @pytest.mark.parametrize("amount", [-1, -0.01, math.nan, math.inf, -math.inf])
    def test_invalid_numbers_rejected(self, amount: float) -> None:
        with pytest.raises(InvalidAmountError):
            format_price(amount)

    @pytest.mark.parametrize("amount", ["100", None, True])
    def test_non_numbers_rejected(self, amount: object) -> None:
        with pytest.raises(InvalidAmountError):
            format_price(amount)  # type: ignore[arg-type]

    def test_negative_precision_rejected(self) -> None:
        with pytest.raises(InvalidAmountError):
            format_price(1_000_000, precision=-1)

    def test_idempotent(self) -> None:
        assert format_price(12_345_678, precision=2) == format_price(12_345_678, precision=2)

    def test_very_large_amount(self) -> None:
        assert format_price(1e40).endswith(" Cr")


class TestFormatCurrency:
    """Tests for format_currency."""

    def test_indian_grouping(self) -> None:
        assert format_currency(12_345_678) == "₹1,23,45,678"

    def test_rounds_to_rupee(self) -> None:
        assert format_currency(1_000.5) == "₹1,001"
        assert format_currency(1_000.49) == "₹1,000"

    def test_rejects_negative(self) -> None:
        with pytest.raises(InvalidAmountError):
            format_currency(-5)

    def test_very_large_amount(self) -> None:
        assert format_currency(1e30) == "₹" + group_indian(10**30)


class TestFormatPriceRange:
    """Tests for format_price_range."""

    def test_range(self) -> None:
        assert format_price_range(PriceRange(10_200_000, 28_000_000)) == "₹1.02 Cr - ₹2.80 Cr"

    def test_single_price(self) -> None:
        assert format_price_range(PriceRange(10_200_000, 10_200_000)) == "₹1.02 Cr"

    def test_mixed_units(self) -> None:
        assert (
            format_price_range(PriceRange(8_500_000, 12_000_000), precision=1, trim_zeros=True)
            == "₹85 L - ₹1.2 Cr"
        )


class TestHelpers:
    """Tests for grouping, rounding and percentages."""

    @pytest.mark.parametrize(
        "number,expected",
        [
            (0, "0"),
            (999, "999"),
            (1_000, "1,000"),
            (100_000, "1,00,000"),
            (1_234_567, "12,34,567"),
            (123_456_789, "12,34,56,789"),
        ],
    )
    def test_group_indian(self, number: int, expected: str) -> None:
        assert group_indian(number) == expected

    def test_round_half_up(self) -> None:
        assert round_half_up(2.675, 2) == Decimal("2.68")
        assert round_half_up(0.5, 0) == Decimal("1")
        assert round_half_up(2.5, 0) == Decimal("3")

    def test_round_half_up_large_value(self) -> None:
        assert round_half_up(1e40, 2) == Decimal(10**40)
        assert round_half_up(1e40, 2).as_tuple().exponent == -2

    def test_format_percentage(self) -> None:
        assert format_percentage(0.0312) == "3.1%"
        assert format_percentage(0.5) == "50.0%"
        assert format_percentage(-0.1, precision=0) == "-10%"

    def test_format_percentage_rejects_nan(self) -> None:
        with pytest.raises(InvalidAmountError):
            format_percentage(math.nan)
