"""Rupee price formatting in lakh and crore units."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import TYPE_CHECKING

from estate_metrics.exceptions import InvalidAmountError

if TYPE_CHECKING:
    from estate_metrics.pricing import PriceRange

ONE_CRORE = 10_000_000
ONE_LAKH = 100_000
RUPEE = "₹"

# Numeric types accepted for amounts, rates and scores across the package
NUMBER_TYPES = (int, float, Decimal)


def format_price(amount: float, precision: int = 2, trim_zeros: bool = False) -> str:
    """Format a rupee amount for display.

    Amounts from one crore upward render as ``₹2.80 Cr``, from one lakh
    upward as ``₹45.50 L``, and anything smaller as a grouped whole-rupee
    figure (``₹85,000``). The unit is chosen from the raw amount; the
    scaled value is then rounded half-up to ``precision`` places.

    Parameters
    ----------
    amount : float
        Non-negative amount in rupees.
    precision : int
        Decimal places for lakh and crore values.
    trim_zeros : bool
        Drop trailing fractional zeros (``₹2 Cr`` rather than ``₹2.00 Cr``).

    Returns
    -------
    str
        Display string.

    Raises
    ------
    InvalidAmountError
        If ``amount`` is negative, NaN, infinite or not a number, or
        ``precision`` is negative.
    """
    value = _require_amount(amount)
    if not isinstance(precision, int) or isinstance(precision, bool) or precision < 0:
        raise InvalidAmountError(f"precision must be a non-negative integer, got {precision!r}")

    if value >= ONE_CRORE:
        return f"{RUPEE}{_fixed(value / ONE_CRORE, precision, trim_zeros)} Cr"
    if value >= ONE_LAKH:
        return f"{RUPEE}{_fixed(value / ONE_LAKH, precision, trim_zeros)} L"
    return f"{RUPEE}{group_indian(int(round_half_up(value, 0)))}"


def format_currency(amount: float) -> str:
    """Format a full rupee amount with Indian digit grouping (``₹1,23,45,678``)."""
    value = _require_amount(amount)
    return f"{RUPEE}{group_indian(int(round_half_up(value, 0)))}"


def format_price_range(
    price_range: PriceRange,
    precision: int = 2,
    trim_zeros: bool = False,
) -> str:
    """Format a price range, collapsing it to one price when min equals max."""
    low = format_price(price_range.min, precision, trim_zeros)
    if price_range.is_single:
        return low
    return f"{low} - {format_price(price_range.max, precision, trim_zeros)}"


def format_percentage(ratio: float, precision: int = 1) -> str:
    """Format a ratio as a percentage (``0.0312`` -> ``3.1%``)."""
    if isinstance(ratio, bool) or not isinstance(ratio, NUMBER_TYPES):
        raise InvalidAmountError(f"ratio must be a number, got {ratio!r}")
    if not math.isfinite(ratio):
        raise InvalidAmountError(f"ratio must be finite, got {ratio!r}")
    return f"{round_half_up(float(ratio) * 100, precision):.{precision}f}%"


def round_half_up(value: float, places: int) -> Decimal:
    """Round half away from zero at ``places`` decimals.

    The float's shortest repr is used so ``2.675`` rounds to ``2.68``.
    Precision is widened to fit the result, so any finite amount rounds.
    """
    number = Decimal(str(value))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + places + 2)
        return number.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def group_indian(number: int) -> str:
    """Group digits the Indian way: last three, then pairs (``12,34,567``)."""
    digits = str(abs(number))
    sign = "-" if number < 0 else ""
    if len(digits) <= 3:
        return sign + digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return sign + ",".join(pairs + [tail])


def _fixed(value: float, precision: int, trim_zeros: bool) -> str:
    text = f"{round_half_up(value, precision):.{precision}f}"
    if trim_zeros and "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _require_amount(amount: float) -> float:
    if isinstance(amount, bool) or not isinstance(amount, NUMBER_TYPES):
        raise InvalidAmountError(f"amount must be a number, got {amount!r}")
    value = float(amount)
    if not math.isfinite(value):
        raise InvalidAmountError(f"amount must be finite, got {amount!r}")
    if value < 0:
        raise InvalidAmountError(f"amount must be non-negative, got {amount!r}")
    return value
