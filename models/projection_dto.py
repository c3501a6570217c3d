from dataclasses import dataclass, field
from datetime import date
from typing import List

PREDICTED = "predicted"
CONFIRMED = "confirmed"


@dataclass
class RecurringPattern:
    description: str
    category: str
    avg_amount: float
    last_occurrence: date


@dataclass
class ForecastItem:
    date: date
    amount: float
    description: str
    category: str
    type: str
    status: str


@dataclass
class BalancePoint:
    date: date
    balance: float


@dataclass
class ForecastResult:
    forecast: List[ForecastItem] = field(default_factory=list)
    projected_balance: List[BalancePoint] = field(default_factory=list)


@dataclass
class CashFlowRisk:
    min_balance: float
    final_balance: float
    is_negative_risk: bool
    risk_items: List[ForecastItem]


@dataclass
class ProjectionResult:
    start_date: date
    end_date: date
    months: int
    starting_balance: float
    patterns: List[RecurringPattern]
    forecast: List[ForecastItem]
    projected_balance: List[BalancePoint]
    risk: CashFlowRisk
