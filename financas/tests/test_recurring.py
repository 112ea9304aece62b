# tests/test_recurring.py
import datetime
import unittest
from decimal import Decimal

from financas.core.errors import InvalidRecurringError
from financas.core.models import RecurringExpense, URGENT, WARNING
from financas.core.recurring import build_launch_payload, evaluate_due, validate_recurring


def item(item_id, day, active=True, title="Aluguel", amount="1200.00", category_id="c1"):
    return RecurringExpense(id=item_id, title=title, amount=Decimal(amount), day_of_month=day,
                            category_id=category_id, active=active)


class TestEvaluateDue(unittest.TestCase):
    def test_today_and_soon(self):
        items = [item("a", 10), item("b", 12), item("c", 20)]
        notifications = evaluate_due(items, datetime.date(2025, 7, 10))
        self.assertEqual([n.severity for n in notifications], [URGENT, WARNING])
        self.assertEqual(notifications[0].id, "a-hoje")
        self.assertEqual(notifications[0].title, "Conta vence hoje!")
        self.assertIn("R$ 1.200,00", notifications[0].message)
        self.assertEqual(notifications[1].id, "b-breve")
        self.assertIn("no dia 12", notifications[1].message)

    def test_window_edges(self):
        today = datetime.date(2025, 7, 10)
        notifications = evaluate_due([item("a", 13), item("b", 14), item("c", 9)], today)
        self.assertEqual([n.id for n in notifications], ["a-breve"])

    def test_no_month_wrap(self):
        notifications = evaluate_due([item("a", 2)], datetime.date(2025, 7, 30))
        self.assertEqual(notifications, [])

    def test_inactive_skipped(self):
        notifications = evaluate_due([item("a", 10, active=False)], datetime.date(2025, 7, 10))
        self.assertEqual(notifications, [])

    def test_keeps_input_order(self):
        items = [item("x", 12), item("y", 10), item("z", 11)]
        notifications = evaluate_due(items, datetime.date(2025, 7, 10))
        self.assertEqual([n.id for n in notifications], ["x-breve", "y-hoje", "z-breve"])

    def test_custom_window(self):
        notifications = evaluate_due([item("a", 15)], datetime.date(2025, 7, 10), window_days=5)
        self.assertEqual(len(notifications), 1)


class TestValidateRecurring(unittest.TestCase):
    def test_valid(self):
        r = validate_recurring(" Internet ", Decimal("99.90"), "5", category_id="", user_id="u1")
        self.assertEqual(r.title, "Internet")
        self.assertEqual(r.day_of_month, 5)
        self.assertIsNone(r.category_id)
        self.assertTrue(r.active)

    def test_invalid(self):
        for day in ("0", "32", "abc", None):
            with self.assertRaises(InvalidRecurringError):
                validate_recurring("Internet", Decimal("99.90"), day)
        with self.assertRaises(InvalidRecurringError):
            validate_recurring("", Decimal("99.90"), 5)
        with self.assertRaises(InvalidRecurringError):
            validate_recurring("Internet", Decimal("-1"), 5)


class TestLaunchPayload(unittest.TestCase):
    def test_payload(self):
        payload = build_launch_payload(item("a", 5), "u1", datetime.date(2025, 7, 10))
        self.assertEqual(payload, {
            "user_id": "u1",
            "amount": 1200.0,
            "type": "expense",
            "category_id": "c1",
            "description": "[Conta Fixa] Aluguel",
            "date": "2025-07-10",
        })
