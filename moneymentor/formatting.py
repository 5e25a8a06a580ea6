"""Formatting utilities for rupee amounts and percentages."""

from __future__ import annotations

import math
from typing import Union

from .config import CURRENCY_SYMBOL


def group_indian(digits: str) -> str:
    """Insert separators using Indian grouping (last three, then pairs).

    Example:
        >>> group_indian("1234567")
        '12,34,567'
    """
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ','.join(pairs + [tail])


def format_currency(
    amount: Union[float, int],
    include_sign: bool = True,
    decimals: int = 2,
) -> str:
    """Format an amount the way ``en-IN`` locales display rupees.

    Trailing zero decimals are dropped, so whole amounts print without a
    fractional part.

    Args:
        amount: The amount to format
        include_sign: Whether to prefix the rupee symbol
        decimals: Maximum number of fractional digits

    Returns:
        Formatted string (e.g. "₹1,00,000" or "-₹50.5")

    Example:
        >>> format_currency(123456.5)
        '₹1,23,456.5'
        >>> format_currency(1000, include_sign=False)
        '1,000'
    """
    negative = amount < 0
    text = f"{abs(amount):.{decimals}f}"
    whole, _, fraction = text.partition('.')
    fraction = fraction.rstrip('0')
    formatted = group_indian(whole)
    if fraction:
        formatted = f"{formatted}.{fraction}"
    if include_sign:
        formatted = f"{CURRENCY_SYMBOL}{formatted}"
    if negative and (whole.strip('0') or fraction):
        formatted = f"-{formatted}"
    return formatted


def format_percentage(value: float, decimals: int = 1) -> str:
    """Format a percentage value (e.g. 82.456 -> "82.5%")."""
    return f"{value:.{decimals}f}%"


def round_half_up(value: float) -> int:
    """Round to the nearest whole number with halves rounded up (32.5 -> 33)."""
    return math.floor(value + 0.5)
