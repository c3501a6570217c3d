from datetime import date, datetime

import pytest

from models.transaction import Transaction
from services.pattern_detector import detect_recurring_patterns

TODAY = date(2024, 5, 15)


def make_tx(day, amount, description, type="expense", category="Bills"):
    return Transaction(date=day, amount=amount, type=type, category=category, description=description)


def test_two_occurrences_make_a_pattern():
    patterns = detect_recurring_patterns(
        [
            make_tx(date(2024, 3, 15), 39.90, "Netflix", category="Streaming"),
            make_tx(date(2024, 4, 15), 39.90, "Netflix", category="Streaming"),
        ],
        reference_date=TODAY,
    )

    assert len(patterns) == 1
    assert patterns[0].description == "Netflix"
    assert patterns[0].category == "Streaming"
    assert patterns[0].avg_amount == pytest.approx(39.90)
    assert patterns[0].last_occurrence == date(2024, 4, 15)


def test_single_occurrence_is_not_a_pattern():
    patterns = detect_recurring_patterns(
        [make_tx(date(2024, 3, 10), 250.0, "Concert Ticket")],
        reference_date=TODAY,
    )

    assert patterns == []


def test_descriptions_are_normalized_but_first_casing_is_kept():
    patterns = detect_recurring_patterns(
        [
            make_tx(date(2024, 2, 1), 100.0, "Gym Club "),
            make_tx(date(2024, 4, 1), 110.0, "gym club"),
            make_tx(date(2024, 3, 1), 120.0, "  GYM CLUB"),
        ],
        reference_date=TODAY,
    )

    assert len(patterns) == 1
    assert patterns[0].description == "Gym Club "
    assert patterns[0].avg_amount == pytest.approx(110.0)
    assert patterns[0].last_occurrence == date(2024, 4, 1)


def test_income_is_never_a_pattern():
    patterns = detect_recurring_patterns(
        [
            make_tx(date(2024, 3, 5), 3000.0, "Salary", type="income"),
            make_tx(date(2024, 4, 5), 3000.0, "Salary", type="income"),
        ],
        reference_date=TODAY,
    )

    assert patterns == []


def test_lookback_cutoff_is_exclusive():
    # 7 months before 2024-05-15 is 2023-10-15
    txs = [
        make_tx(date(2023, 10, 15), 80.0, "Internet"),
        make_tx(date(2024, 4, 15), 80.0, "Internet"),
    ]
    assert detect_recurring_patterns(txs, reference_date=TODAY) == []

    txs[0] = make_tx(date(2023, 10, 16), 80.0, "Internet")
    assert len(detect_recurring_patterns(txs, reference_date=TODAY)) == 1


def test_custom_lookback_window():
    txs = [
        make_tx(date(2023, 12, 1), 80.0, "Internet"),
        make_tx(date(2024, 4, 1), 80.0, "Internet"),
    ]

    assert len(detect_recurring_patterns(txs, reference_date=TODAY)) == 1
    assert detect_recurring_patterns(txs, reference_date=TODAY, lookback_months=3) == []


def test_empty_description_still_groups():
    patterns = detect_recurring_patterns(
        [
            make_tx(date(2024, 3, 2), 10.0, ""),
            make_tx(date(2024, 4, 2), 20.0, "  "),
        ],
        reference_date=TODAY,
    )

    assert len(patterns) == 1
    assert patterns[0].avg_amount == pytest.approx(15.0)


def test_undated_transactions_are_skipped():
    patterns = detect_recurring_patterns(
        [
            make_tx(None, 50.0, "Water"),
            make_tx(date(2024, 4, 20), 50.0, "Water"),
        ],
        reference_date=TODAY,
    )

    assert patterns == []


def test_no_expenses_no_patterns():
    assert detect_recurring_patterns([], reference_date=TODAY) == []


def test_string_and_datetime_dates_group_together():
    patterns = detect_recurring_patterns(
        [
            make_tx("2024-03-20", 15.0, "Cloud Storage"),
            make_tx(datetime(2024, 4, 20, 18, 45), 15.0, "cloud storage"),
            make_tx("garbage", 15.0, "Cloud Storage"),
        ],
        reference_date=TODAY,
    )

    assert len(patterns) == 1
    assert patterns[0].last_occurrence == date(2024, 4, 20)
    assert patterns[0].avg_amount == pytest.approx(15.0)
