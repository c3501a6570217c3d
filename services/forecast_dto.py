from dataclasses import dataclass
from typing import List

from utils.money import round_money


@dataclass
class BalancePointDTO:
    """Single point of the running-balance series."""
    date: str  # ISO format YYYY-MM-DD
    balance: float


@dataclass
class ForecastItemDTO:
    date: str  # ISO format
    amount: float
    description: str
    category: str
    type: str
    status: str

    @classmethod
    def from_item(cls, item):
        return cls(
            date=item.date.isoformat(),
            amount=round_money(item.amount),
            description=item.description,
            category=item.category,
            type=item.type,
            status=item.status,
        )


@dataclass
class RecurringPatternDTO:
    description: str
    category: str
    avg_amount: float
    last_occurrence: str  # ISO format


@dataclass
class ForecastResponseDTO:
    """Complete cash-flow forecast response."""
    start_date: str  # ISO format
    end_date: str  # ISO format
    months: int
    starting_balance: float
    min_balance: float
    final_balance: float
    is_negative_risk: bool
    patterns: List[RecurringPatternDTO]
    forecast: List[ForecastItemDTO]
    projected_balance: List[BalancePointDTO]
    risk_items: List[ForecastItemDTO]

    @classmethod
    def from_projection(cls, projection):
        """Convert ProjectionResult to JSON-serializable DTO."""
        return cls(
            start_date=projection.start_date.isoformat(),
            end_date=projection.end_date.isoformat(),
            months=projection.months,
            starting_balance=round_money(projection.starting_balance),
            min_balance=round_money(projection.risk.min_balance),
            final_balance=round_money(projection.risk.final_balance),
            is_negative_risk=projection.risk.is_negative_risk,
            patterns=[
                RecurringPatternDTO(
                    description=p.description,
                    category=p.category,
                    avg_amount=round_money(p.avg_amount),
                    last_occurrence=p.last_occurrence.isoformat(),
                )
                for p in projection.patterns
            ],
            forecast=[ForecastItemDTO.from_item(item) for item in projection.forecast],
            projected_balance=[
                BalancePointDTO(
                    date=point.date.isoformat(),
                    balance=round_money(point.balance)
                )
                for point in projection.projected_balance
            ],
            risk_items=[ForecastItemDTO.from_item(item) for item in projection.risk.risk_items],
        )
