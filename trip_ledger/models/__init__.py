"""Ledger value objects"""
from trip_ledger.models.split import (
    SplitType,
    SplitParticipant,
    SplitRequest,
    ShareAllocation,
    SplitResult,
)
from trip_ledger.models.ledger import (
    ExpenseStatus,
    LedgerExpense,
    ConversionResult,
    UserBalance,
    SettlementSuggestion,
    LedgerSummary,
)

__all__ = [
    "SplitType",
    "SplitParticipant",
    "SplitRequest",
    "ShareAllocation",
    "SplitResult",
    "ExpenseStatus",
    "LedgerExpense",
    "ConversionResult",
    "UserBalance",
    "SettlementSuggestion",
    "LedgerSummary",
]
