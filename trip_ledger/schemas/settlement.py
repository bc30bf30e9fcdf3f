"""Settlement schemas"""
from typing import List, Optional

from pydantic import BaseModel, Field

from trip_ledger.models.ledger import LedgerExpense, LedgerSummary


class SettlementRequest(BaseModel):
    """Expenses of a trip to compute balances for"""
    base_currency: Optional[str] = Field(
        default=None, description="Trip base currency; defaults to DEFAULT_CURRENCY"
    )
    expenses: List[LedgerExpense]


class SettlementResponse(LedgerSummary):
    """Balances and suggested transfers"""
    pass
