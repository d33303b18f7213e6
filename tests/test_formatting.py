import math

from src.formatting import finite_or_zero, format_currency, format_percent


class TestFormatCurrency:
    def test_whole_dollars(self):
        assert format_currency(1234.4) == "$1,234"
        assert format_currency(1234.6) == "$1,235"

    def test_negative(self):
        assert format_currency(-13295.2) == "-$13,295"

    def test_halves_round_away_from_zero(self):
        assert format_currency(2.5) == "$3"
        assert format_currency(1234.5) == "$1,235"
        assert format_currency(-0.5) == "-$1"
        assert format_currency(-2.5) == "-$3"

    def test_tiny_negative_is_zero(self):
        assert format_currency(-0.2) == "$0"

    def test_non_finite_shown_as_zero(self):
        assert format_currency(math.nan) == "$0"
        assert format_currency(math.inf) == "$0"


class TestFormatPercent:
    def test_fraction_to_percent(self):
        assert format_percent(0.065) == "6.5%"
        assert format_percent(0.034088) == "3.4%"

    def test_negative(self):
        assert format_percent(-0.0512) == "-5.1%"

    def test_non_finite_shown_as_zero(self):
        assert format_percent(math.nan) == "0.0%"
        assert format_percent(-math.inf) == "0.0%"


def test_finite_or_zero():
    assert finite_or_zero(3.5) == 3.5
    assert finite_or_zero(math.nan) == 0
    assert finite_or_zero(math.inf) == 0
