# tests/test_money.py
import unittest
from decimal import Decimal

from financas.core.money import (
    format_brl, format_for_display, parse_minor_units, to_decimal, to_minor_units,
)


class TestMoney(unittest.TestCase):
    def test_parse_minor_units(self):
        self.assertEqual(parse_minor_units("2500"), Decimal("25.00"))
        self.assertEqual(parse_minor_units("1"), Decimal("0.01"))
        self.assertEqual(parse_minor_units("123456"), Decimal("1234.56"))

    def test_parse_minor_units_ignores_non_digits(self):
        # valor colado com símbolo e separadores
        self.assertEqual(parse_minor_units("R$ 25,00"), Decimal("25.00"))
        self.assertEqual(parse_minor_units("1.234,56"), Decimal("1234.56"))

    def test_parse_minor_units_empty_is_zero(self):
        self.assertEqual(parse_minor_units(""), Decimal("0"))
        self.assertEqual(parse_minor_units(None), Decimal("0"))
        self.assertEqual(parse_minor_units("abc"), Decimal("0"))

    def test_entry_round_trip(self):
        stored = parse_minor_units("2500")
        self.assertEqual(stored, Decimal("25.00"))
        self.assertEqual(format_for_display("2500"), "25,00")
        self.assertEqual(format_for_display(to_minor_units(stored)), "25,00")

    def test_format_for_display_grouping(self):
        self.assertEqual(format_for_display("123456"), "1.234,56")
        self.assertEqual(format_for_display("5"), "0,05")
        self.assertEqual(format_for_display("100000000"), "1.000.000,00")

    def test_format_for_display_placeholder_state(self):
        self.assertEqual(format_for_display(""), "")
        self.assertEqual(format_for_display(None), "")
        self.assertEqual(format_for_display("0"), "")
        self.assertEqual(format_for_display("00"), "")

    def test_to_minor_units(self):
        self.assertEqual(to_minor_units(Decimal("25.00")), "2500")
        self.assertEqual(to_minor_units(12.5), "1250")
        self.assertEqual(to_minor_units(0), "")

    def test_to_decimal(self):
        self.assertEqual(to_decimal(10), Decimal("10.00"))
        self.assertEqual(to_decimal("18.5"), Decimal("18.50"))
        self.assertEqual(to_decimal(0.1), Decimal("0.10"))
        self.assertEqual(to_decimal(None), Decimal("0.00"))
        self.assertEqual(to_decimal("abc"), Decimal("0.00"))

    def test_format_brl(self):
        self.assertEqual(format_brl(Decimal("1234.5")), "R$ 1.234,50")
        self.assertEqual(format_brl(0), "R$ 0,00")
        self.assertEqual(format_brl(Decimal("-50")), "-R$ 50,00")
