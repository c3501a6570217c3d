import datetime
from dataclasses import asdict
from typing import Literal, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from services.transaction_service import (
    add_transaction,
    get_all_transactions,
    remove_transaction,
)

router = APIRouter()


class TransactionCreate(BaseModel):
    date: datetime.date
    description: str
    amount: float = Field(ge=0)
    type: Literal["income", "expense"]
    category: Optional[str] = None


# -------------------------
# LIST
# -------------------------
@router.get("/transactions")
def list_transactions(limit: Optional[int] = None):
    return [
        {**asdict(tx), "date": tx.date.isoformat() if tx.date else None}
        for tx in get_all_transactions(limit=limit)
    ]


# -------------------------
# CREATE
# -------------------------
@router.post("/transactions")
def create_transaction(txn: TransactionCreate):
    try:
        transaction_id = add_transaction(
            date=txn.date,
            description=txn.description,
            amount=txn.amount,
            type=txn.type,
            category=txn.category,
        )
    except ValueError as e:
        return {"success": False, "error": str(e)}

    return {"success": True, "id": transaction_id}


# -------------------------
# DELETE
# -------------------------
@router.delete("/transactions/{transaction_id}")
def delete_transaction(transaction_id: int):
    if not remove_transaction(transaction_id):
        return {"success": False, "error": "Transaction not found"}
    return {"success": True}
