import datetime
import logging
from dataclasses import asdict
from typing import List, Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from models.transaction import Transaction
from routes.transactions import TransactionCreate
from services.forecast_dto import ForecastResponseDTO
from services.forecast_service import DEFAULT_MONTHS
from services.projection_service import build_projection, calculate_cash_flow_projection

router = APIRouter()


class ForecastPreviewRequest(BaseModel):
    transactions: List[TransactionCreate] = []
    current_balance: float = 0.0
    months: int = Field(DEFAULT_MONTHS, ge=0, le=24)
    as_of_date: Optional[datetime.date] = None
    suppress_duplicates: bool = False


@router.get("/forecast")
def get_forecast(
    months: int = Query(DEFAULT_MONTHS, ge=0, le=24),
    as_of_date: Optional[str] = Query(None),
    suppress_duplicates: bool = Query(False),
):
    """
    Return a deterministic projection of the account balance.

    Query Parameters:
        months: Number of whole months to project recurring expenses over.
        as_of_date (optional): Reference date in ISO format (YYYY-MM-DD).
                              Defaults to today if not provided.
        suppress_duplicates: Drop predictions already covered by a confirmed
                             future transaction.

    Returns:
        ForecastResponseDTO: JSON with forecast items, balance points and risk.
    """
    # Parse optional as_of_date parameter
    if as_of_date:
        try:
            as_of = datetime.date.fromisoformat(as_of_date)
        except ValueError:
            return {"error": "Invalid date format. Use YYYY-MM-DD."}
    else:
        as_of = None

    try:
        projection = calculate_cash_flow_projection(
            months=months,
            as_of_date=as_of,
            suppress_duplicates=suppress_duplicates,
        )
    except Exception as e:
        logging.exception("Forecast failed")
        return {"error": str(e)}

    return asdict(ForecastResponseDTO.from_projection(projection))


@router.post("/forecast/preview")
def preview_forecast(request: ForecastPreviewRequest):
    """
    Run the forecast over a caller-supplied ledger without touching the store.
    """
    transactions = [Transaction.from_dict(tx.model_dump()) for tx in request.transactions]

    projection = build_projection(
        transactions,
        request.current_balance,
        months=request.months,
        today=request.as_of_date,
        suppress_duplicates=request.suppress_duplicates,
    )
    return asdict(ForecastResponseDTO.from_projection(projection))
