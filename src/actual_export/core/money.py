#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Prevents floating-point errors and keeps sign changes out of the
records they were computed from.
"""

from dataclasses import dataclass

from .currency import cents_to_dollars_str


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents.

    Supports both positive (income/inflows) and negative (expense/outflows) amounts.

    Examples:
        >>> paycheck = Money.from_cents(500000)
        >>> (-paycheck).to_decimal_str()
        '-5000.00'

        >>> coffee = Money.from_cents(-4200)
        >>> str(coffee)
        '$-42.00'
    """

    cents: int

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_decimal_str(self) -> str:
        """Get plain decimal string with two fraction digits (no currency symbol)."""
        return cents_to_dollars_str(self.cents)

    def __neg__(self) -> "Money":
        """Return a new Money with the sign inverted."""
        return Money(cents=-self.cents)

    def __str__(self) -> str:
        """Format as dollar string."""
        return f"${cents_to_dollars_str(self.cents)}"

    def __repr__(self) -> str:
        return f"Money(cents={self.cents})"
