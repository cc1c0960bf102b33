#!/usr/bin/env python3
"""Tests for currency conversion utilities."""

import pytest

from actual_export.core.currency import cents_to_dollars_str


@pytest.mark.currency
class TestCentsToDollars:
    """Test cents → decimal string conversion."""

    def test_positive_amount(self):
        assert cents_to_dollars_str(4599) == "45.99"

    def test_negative_amount_under_one_dollar(self):
        """Test sign is kept when the dollar part is zero."""
        assert cents_to_dollars_str(-7) == "-0.07"

    def test_zero(self):
        assert cents_to_dollars_str(0) == "0.00"

