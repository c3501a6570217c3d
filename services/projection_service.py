from datetime import date

from models.projection_dto import ProjectionResult
from services.transaction_service import get_all_transactions
from services.pattern_detector import detect_recurring_patterns
from services.forecast_service import (
    DEFAULT_MONTHS,
    compute_current_balance,
    generate_forecast,
)
from services.cash_flow_risk import summarize_cash_flow_risk
from utils.dates import add_months, last_day_of_month


def build_projection(transactions, starting_balance, months=DEFAULT_MONTHS,
                     today=None, suppress_duplicates=False) -> ProjectionResult:
    """Run detection, forecasting and risk summary over an in-memory ledger."""
    if today is None:
        today = date.today()

    transactions = list(transactions)
    # window ends on the last day of the final projected month
    end_date = last_day_of_month(add_months(today, months, day=1))

    patterns = detect_recurring_patterns(transactions, today)
    result = generate_forecast(
        transactions,
        starting_balance,
        months_to_project=months,
        reference_date=today,
        suppress_duplicates=suppress_duplicates,
        patterns=patterns,
    )

    return ProjectionResult(
        start_date=today,
        end_date=end_date,
        months=months,
        starting_balance=starting_balance,
        patterns=patterns,
        forecast=result.forecast,
        projected_balance=result.projected_balance,
        risk=summarize_cash_flow_risk(result),
    )


def calculate_cash_flow_projection(months=DEFAULT_MONTHS, as_of_date=None,
                                   suppress_duplicates=False) -> ProjectionResult:
    """Deterministic multi-month cash-flow projection over the stored ledger.

    Pure function of ledger state and ``as_of_date`` (defaults to
    ``date.today()``). No writes, no side effects.
    """
    today = as_of_date or date.today()

    # --- starting balance via service/repository chain ---
    txs = get_all_transactions()
    starting_balance = compute_current_balance(txs, today)

    return build_projection(
        txs,
        starting_balance,
        months=months,
        today=today,
        suppress_duplicates=suppress_duplicates,
    )
