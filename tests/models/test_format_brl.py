from decimal import Decimal

from pixcode.models import format_brl, parse_brl


class TestFormatBrl:
    def test_zero(self):
        assert format_brl(Decimal("0")) == "R$ 0,00"

    def test_small_value(self):
        assert format_brl(Decimal("1.5")) == "R$ 1,50"

    def test_exact_reais(self):
        assert format_brl(Decimal("100")) == "R$ 100,00"

    def test_thousands_separator(self):
        assert format_brl(Decimal("2850")) == "R$ 2.850,00"

    def test_large_value(self):
        assert format_brl(Decimal("15000")) == "R$ 15.000,00"

    def test_single_centavo(self):
        assert format_brl(Decimal("0.01")) == "R$ 0,01"


class TestParseBrl:
    def test_plain_integer(self):
        assert parse_brl("2850") == Decimal("2850")

    def test_decimal_dot(self):
        assert parse_brl("2850.00") == Decimal("2850.00")

    def test_br_format(self):
        assert parse_brl("2.850,00") == Decimal("2850.00")

    def test_decimal_comma(self):
        assert parse_brl("2850,50") == Decimal("2850.50")

    def test_empty_string(self):
        assert parse_brl("") is None

    def test_whitespace(self):
        assert parse_brl("   ") is None

    def test_invalid_text(self):
        assert parse_brl("abc") is None

    def test_infinity(self):
        assert parse_brl("Infinity") is None

    def test_with_leading_whitespace(self):
        assert parse_brl("  100  ") == Decimal("100")

    def test_zero(self):
        assert parse_brl("0") == Decimal("0")
