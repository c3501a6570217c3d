from dataclasses import dataclass
from datetime import date
from typing import Optional

from utils.dates import normalize_date

INCOME = "income"
EXPENSE = "expense"


@dataclass(frozen=True)
class Transaction:
    """A ledger entry. ``amount`` is never negative; ``type`` carries the sign."""
    date: Optional[date]
    amount: float
    type: str
    category: str = ""
    description: str = ""
    id: Optional[int] = None

    def __post_init__(self):
        # every construction path ends with a date or None
        object.__setattr__(self, "date", normalize_date(self.date))

    @classmethod
    def from_dict(cls, data: dict):
        """Build from a JSON-style mapping; ``date`` may be an ISO string.

        A missing ``type`` stays empty: such rows are neither income nor expense.
        """
        return cls(
            date=data.get("date"),
            amount=float(data.get("amount") or 0),
            type=data.get("type") or "",
            category=data.get("category") or "",
            description=data.get("description") or "",
            id=data.get("id"),
        )

    @classmethod
    def from_row(cls, row):
        # column order of transactions_repository.get_all_transactions
        return cls(
            id=row[0],
            date=row[1],
            description=row[2],
            amount=float(row[3]),
            type=row[4],
            category=row[5] or "",
        )
