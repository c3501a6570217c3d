"""
Recurring Pattern Detector — Monthly Expense Inference

Pure functions that group historical expenses by normalized description and
keep the groups that occur often enough to be projected forward.
No database access; no side effects.
"""
import logging
import os
from datetime import date

from models.projection_dto import RecurringPattern
from models.transaction import EXPENSE
from utils.dates import add_months

# Expenses older than this many months are ignored.
LOOKBACK_MONTHS = int(os.getenv("FORECAST_LOOKBACK_MONTHS", "7"))
MIN_OCCURRENCES = 2


def normalize_description(description: str) -> str:
    return (description or "").strip().lower()


def detect_recurring_patterns(transactions, reference_date=None,
                              lookback_months=LOOKBACK_MONTHS) -> list:
    """
    Infer monthly recurring expenses from a transaction list.

    Args:
        transactions: Iterable of ``Transaction``.
        reference_date: "Today" for the lookback window. Defaults to
                        ``date.today()``.
        lookback_months: Only expenses dated strictly after
                         ``reference_date - lookback_months`` are grouped.

    Returns:
        List of ``RecurringPattern``, one per description group with at
        least two members, in first-seen order.

    Same inputs → same output.
    """
    if reference_date is None:
        reference_date = date.today()

    cutoff = add_months(reference_date, -lookback_months)

    groups = {}
    for tx in transactions:
        if tx.type != EXPENSE:
            continue
        if tx.date is None:
            logging.warning(f"Skipping transaction without a valid date: {tx.description!r}")
            continue
        if tx.date <= cutoff:
            continue

        key = normalize_description(tx.description)
        groups.setdefault(key, []).append(tx)

    patterns = []
    for group in groups.values():
        if len(group) < MIN_OCCURRENCES:
            continue

        # description and category keep the casing of the first grouped transaction
        first = group[0]
        patterns.append(RecurringPattern(
            description=first.description,
            category=first.category,
            avg_amount=sum(tx.amount for tx in group) / len(group),
            last_occurrence=max(tx.date for tx in group),
        ))

    logging.info(
        f"Detected {len(patterns)} recurring patterns from {len(groups)} expense groups "
        f"(cutoff={cutoff.isoformat()})"
    )
    return patterns
