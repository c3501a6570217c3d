import os

from models.projection_dto import CashFlowRisk, PREDICTED

# Predicted bills above this amount are surfaced as upcoming risks.
RISK_ITEM_THRESHOLD = float(os.getenv("FORECAST_RISK_THRESHOLD", "500"))


def summarize_cash_flow_risk(result, threshold=RISK_ITEM_THRESHOLD) -> CashFlowRisk:
    """Reduce a ``ForecastResult`` to what the chart and alerts need.

    An empty projection has a min and final balance of 0.0 and no risk.
    """
    balances = [point.balance for point in result.projected_balance]

    min_balance = min(balances) if balances else 0.0
    final_balance = balances[-1] if balances else 0.0

    return CashFlowRisk(
        min_balance=min_balance,
        final_balance=final_balance,
        is_negative_risk=min_balance < 0,
        risk_items=[
            item for item in result.forecast
            if item.status == PREDICTED and item.amount > threshold
        ],
    )
