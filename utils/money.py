from decimal import Decimal, ROUND_HALF_UP

from models.transaction import EXPENSE, INCOME


def round_money(value) -> float:
    """Round a monetary value to cents (half up) for display and JSON."""
    if value is None:
        return 0.0

    amount = Decimal(str(value)).quantize(
        Decimal("0.01"),
        rounding=ROUND_HALF_UP
    )
    return float(amount)


def signed_amount(amount, tx_type: str) -> float:
    """Income adds to the balance, expenses subtract, unknown types are neutral."""
    amount = float(amount)
    if tx_type == INCOME:
        return amount
    if tx_type == EXPENSE:
        return -amount
    return 0.0
