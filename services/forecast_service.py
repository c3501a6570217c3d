### Forecast service projects recurring expenses forward, merges them with confirmed future
### transactions and walks the timeline to build a running balance.
import logging
import os
from datetime import date

from models.projection_dto import (
    BalancePoint,
    CONFIRMED,
    ForecastItem,
    ForecastResult,
    PREDICTED,
)
from models.transaction import EXPENSE
from services.pattern_detector import detect_recurring_patterns, normalize_description
from utils.dates import add_months
from utils.money import signed_amount

DEFAULT_MONTHS = int(os.getenv("FORECAST_DEFAULT_MONTHS", "3"))

# Used only when duplicate suppression is requested.
DUPLICATE_TOLERANCE_DAYS = 3
DUPLICATE_AMOUNT_TOLERANCE = 0.10


def compute_current_balance(transactions, reference_date=None):
    """Signed sum of every transaction dated on or before ``reference_date``."""
    if reference_date is None:
        reference_date = date.today()

    return sum(
        signed_amount(tx.amount, tx.type)
        for tx in transactions
        if tx.date is not None and tx.date <= reference_date
    )


def project_patterns(patterns, reference_date, months_to_project=DEFAULT_MONTHS):
    items = []
    for i in range(months_to_project):
        for pattern in patterns:
            # same day of month as the last occurrence, clamped to the target month
            occ_date = add_months(reference_date, 1 + i, day=pattern.last_occurrence.day)
            items.append(ForecastItem(
                date=occ_date,
                amount=pattern.avg_amount,
                description=pattern.description,
                type=EXPENSE,
                status=PREDICTED,
                category=pattern.category,
            ))
    return items


def get_confirmed_future(transactions, reference_date):
    return [
        ForecastItem(
            date=tx.date,
            amount=tx.amount,
            description=tx.description,
            type=tx.type,
            status=CONFIRMED,
            category=tx.category,
        )
        for tx in transactions
        if tx.date is not None and tx.date > reference_date
    ]


def is_confirmed_duplicate(predicted, confirmed_items):
    key = normalize_description(predicted.description)
    for confirmed in confirmed_items:
        if normalize_description(confirmed.description) != key:
            continue
        if abs((confirmed.date - predicted.date).days) > DUPLICATE_TOLERANCE_DAYS:
            continue
        if abs(confirmed.amount - predicted.amount) <= DUPLICATE_AMOUNT_TOLERANCE * predicted.amount:
            return True
    return False


def calculate_running_balance(items, current_balance):
    points = []
    running = current_balance
    for item in items:
        running += signed_amount(item.amount, item.type)
        points.append(BalancePoint(date=item.date, balance=running))
    return points


def generate_forecast(transactions, current_balance, months_to_project=DEFAULT_MONTHS,
                      reference_date=None, suppress_duplicates=False,
                      patterns=None) -> ForecastResult:
    """
    Build the forward timeline and its running balance.

    Predicted items (one per recurring pattern per month) and confirmed items
    (transactions dated after ``reference_date``) are concatenated in that
    order and stable-sorted by date, so predictions come first on ties.
    Predictions are not deduplicated against confirmed items unless
    ``suppress_duplicates`` is set. Pass ``patterns`` to reuse an earlier
    detection pass over the same transactions.
    """
    if reference_date is None:
        reference_date = date.today()

    transactions = list(transactions)
    if patterns is None:
        patterns = detect_recurring_patterns(transactions, reference_date)

    predicted = project_patterns(patterns, reference_date, months_to_project)
    confirmed = get_confirmed_future(transactions, reference_date)

    if suppress_duplicates:
        kept = [item for item in predicted if not is_confirmed_duplicate(item, confirmed)]
        logging.info(f"Suppressed {len(predicted) - len(kept)} predicted items matching confirmed ones")
        predicted = kept

    all_items = sorted(predicted + confirmed, key=lambda item: item.date)
    balances = calculate_running_balance(all_items, current_balance)

    logging.info(
        f"Forecast built: {len(predicted)} predicted, {len(confirmed)} confirmed, "
        f"{months_to_project} months from {reference_date.isoformat()}"
    )

    return ForecastResult(forecast=all_items, projected_balance=balances)
