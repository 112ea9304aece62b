# tests/test_forms.py
import datetime
import unittest
from decimal import Decimal

from financas.core.errors import InvalidGoalError, InvalidTransactionError
from financas.web.forms import default_date, parse_goal_form, parse_recurring_form, parse_transaction_form


class TestForms(unittest.TestCase):
    def test_transaction_form(self):
        tx = parse_transaction_form({
            "type": "expense", "amount": "2500", "category_id": "c1",
            "date": "2025-07-10", "description": "  Mercado ",
        }, "u1")
        self.assertEqual(tx.amount, Decimal("25.00"))
        self.assertEqual(tx.date, "2025-07-10")
        self.assertEqual(tx.description, "Mercado")
        self.assertEqual(tx.user_id, "u1")

    def test_transaction_form_optional_description(self):
        tx = parse_transaction_form({"type": "income", "amount": "100", "category_id": "c1",
                                     "date": "2025-07-10", "description": ""}, "u1")
        self.assertIsNone(tx.description)

    def test_transaction_form_rejects(self):
        base = {"type": "expense", "amount": "2500", "category_id": "c1", "date": "2025-07-10"}
        for field, value in [("amount", "0"), ("amount", ""), ("category_id", ""),
                             ("date", "10/07/2025"), ("type", "transfer")]:
            with self.assertRaises(InvalidTransactionError):
                parse_transaction_form(dict(base, **{field: value}), "u1")

    def test_goal_form(self):
        goal = parse_goal_form({"title": "Viagem", "target_amount": "500000", "current_amount": "",
                                "deadline": "", "color": "#3b82f6"}, "u1", goal_id="g1")
        self.assertEqual(goal.target_amount, Decimal("5000.00"))
        self.assertEqual(goal.current_amount, Decimal("0.00"))
        self.assertIsNone(goal.deadline)
        self.assertEqual(goal.id, "g1")

    def test_goal_form_rejects_zero_target(self):
        with self.assertRaises(InvalidGoalError):
            parse_goal_form({"title": "Viagem", "target_amount": "0"}, "u1")

    def test_recurring_form(self):
        item = parse_recurring_form({"title": "Aluguel", "amount": "120000", "day_of_month": "10",
                                     "category_id": "c1"}, "u1")
        self.assertEqual(item.amount, Decimal("1200.00"))
        self.assertEqual(item.day_of_month, 10)

    def test_default_date(self):
        self.assertEqual(default_date(datetime.date(2025, 7, 10)), "2025-07-10")
