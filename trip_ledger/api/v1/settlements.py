"""Settlement endpoints"""
from fastapi import APIRouter

from trip_ledger.config import get_settings
from trip_ledger.schemas.settlement import SettlementRequest, SettlementResponse
from trip_ledger.services.balance_service import BalanceService

router = APIRouter(prefix="/settlements", tags=["Settlements"])


@router.post("", response_model=SettlementResponse)
async def calculate_settlements(body: SettlementRequest):
    """
    Compute net balances and suggested transfers for a trip's expenses.

    Args:
        body: Base currency and expenses with their shares

    Returns:
        Balances, settlement suggestions and expenses skipped for a missing FX rate

    Raises:
        400: If a currency code or FX rate is invalid
    """
    base_currency = body.base_currency or get_settings().default_currency

    summary = BalanceService.summarize(body.expenses, base_currency)

    return SettlementResponse(**summary.model_dump())
