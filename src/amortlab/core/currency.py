"""
Currency and percentage formatting for AmortLab.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal
from enum import Enum


class RoundingPolicy(Enum):
    """Rounding policies for displayed amounts."""

    BANKERS = ROUND_HALF_EVEN
    HALF_UP = ROUND_HALF_UP


class Currency:
    """
    Display rules for a currency.

    Attributes:
        code: ISO currency code
        symbol: Prefix symbol used when formatting
        decimals: Number of decimal places shown
        rounding: Rounding policy applied before display
    """

    def __init__(
        self,
        code: str,
        symbol: str,
        decimals: int = 2,
        rounding: RoundingPolicy = RoundingPolicy.HALF_UP,
    ):
        self.code = code.upper()
        self.symbol = symbol
        self.decimals = decimals
        self.rounding = rounding

    def quantize(self, amount: Decimal) -> Decimal:
        """Quantize amount to display precision."""
        quantum = Decimal("1").scaleb(-self.decimals)  # e.g., 0.01 for 2 dp, 1 for 0 dp
        return amount.quantize(quantum, rounding=self.rounding.value)

    def format(self, value: float) -> str:
        amount = self.quantize(Decimal(str(value)))
        sign = "-" if amount < 0 else ""
        return f"{sign}{self.symbol}{abs(amount):,.{self.decimals}f}"

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Currency('{self.code}', decimals={self.decimals})"


# Whole dollars, as shown throughout the simulator
USD = Currency("USD", "$", decimals=0)


def format_currency(value: float, currency: Currency = USD) -> str:
    """
    Format a monetary value for display.

    >>> format_currency(1266.71)
    '$1,267'
    """
    return currency.format(value)


def format_percentage(value: float, decimals: int = 2) -> str:
    """
    >>> format_percentage(82.4066)
    '82.41%'
    """
    return f"{value:.{decimals}f}%"


def format_ratio(value: float, decimals: int = 2) -> str:
    """Format a multiplier such as the interest efficiency ("1.21x")."""
    if math.isinf(value):
        return "∞"
    return f"{value:.{decimals}f}x"


def round_half_up(value: float, decimals: int) -> float:
    """
    Round ``value`` to ``decimals`` places with ties rounded away from zero.

    The float is converted exactly, so ``1.25`` rounds to ``1.3`` where the
    builtin ``round`` gives ``1.2``.

    >>> round_half_up(15 / 12, 1)
    1.3
    """
    quantum = Decimal("1").scaleb(-decimals)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
