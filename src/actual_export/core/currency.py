#!/usr/bin/env python3
"""
Currency Conversion and Handling Utilities

Actual Budget stores every amount as an integer number of cents
(100 = $1.00). Amounts stay integers until they are rendered for output.

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Render decimal strings only at output time
- Sign is always preserved (negative = outflow)
"""


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to dollar string using pure integer arithmetic.

    Args:
        cents: Amount in cents

    Returns:
        Decimal string with exactly two fraction digits

    Example:
        cents_to_dollars_str(4599) -> "45.99"
        cents_to_dollars_str(-4200) -> "-42.00"
    """
    # Handle negative amounts properly
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    dollars = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{dollars}.{remainder:02d}"
    return f"{dollars}.{remainder:02d}"

