"""Ledger value objects used for balances and settlements"""
import enum
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from trip_ledger.models.split import ShareAllocation


class ExpenseStatus(str, enum.Enum):
    """Enum for expense payment state"""
    PENDING = "pending"
    SETTLED = "settled"


class LedgerExpense(BaseModel):
    """An expense with its payer and already-calculated shares"""

    expense_id: str
    payer_id: str
    amount: int = Field(..., ge=0)
    currency: str = Field(..., min_length=3, max_length=3)
    fx_rate: Optional[Decimal] = None  # snapshot rate to the trip base currency
    status: ExpenseStatus = ExpenseStatus.PENDING
    shares: List[ShareAllocation] = []

    model_config = ConfigDict(frozen=True)


class ConversionResult(BaseModel):
    """Amount converted to the base currency"""

    amount: int
    currency: str
    needs_fx_rate: bool

    model_config = ConfigDict(frozen=True)


class UserBalance(BaseModel):
    """Net position of a user: positive is owed money, negative owes money"""

    user_id: str
    net_balance: int
    currency: str

    model_config = ConfigDict(frozen=True)


class SettlementSuggestion(BaseModel):
    """A single transfer that settles part of the outstanding balances"""

    from_user_id: str
    to_user_id: str
    amount: int
    currency: str

    model_config = ConfigDict(frozen=True)


class LedgerSummary(BaseModel):
    """Balances and suggested transfers for a set of expenses"""

    base_currency: str
    balances: List[UserBalance]
    settlements: List[SettlementSuggestion]
    skipped_expense_ids: List[str] = []  # foreign currency without an FX rate

    model_config = ConfigDict(frozen=True)
