from datetime import date, datetime

from models.transaction import Transaction


def test_constructor_normalizes_dates():
    assert Transaction(date="2024-03-15", amount=1.0, type="expense").date == date(2024, 3, 15)
    assert Transaction(date=datetime(2024, 3, 15, 9, 30), amount=1.0, type="expense").date == date(2024, 3, 15)
    assert Transaction(date="not-a-date", amount=1.0, type="expense").date is None


def test_from_dict_keeps_missing_type_empty():
    tx = Transaction.from_dict({"date": "2024-03-15", "amount": "12.5", "description": "Coffee"})

    assert tx.type == ""
    assert tx.amount == 12.5
    assert tx.date == date(2024, 3, 15)
