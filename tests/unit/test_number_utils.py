"""Unit tests for numeric helpers"""

import math
from decision_assistant.utils.number_utils import finite_or_none, format_currency, round_money


def test_finite_or_none():
    assert finite_or_none(12.5) == 12.5
    assert finite_or_none(3) == 3.0
    assert finite_or_none(math.inf) is None
    assert finite_or_none(-math.inf) is None
    assert finite_or_none(math.nan) is None
    assert finite_or_none(None) is None


def test_round_money():
    assert round_money(58912.456) == 58912.46
    assert round_money(None) is None


def test_format_currency():
    """Test Brazilian separators and the uncomputable placeholder"""
    assert format_currency(58912.5) == "R$ 58.912,50"
    assert format_currency(1234567.891) == "R$ 1.234.567,89"
    assert format_currency(0) == "R$ 0,00"
    assert format_currency(-50) == "-R$ 50,00"
    assert format_currency(99.9, symbol="$") == "$ 99,90"
    assert format_currency(None) == "n/a"
