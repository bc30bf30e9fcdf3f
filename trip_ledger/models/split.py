"""Split request and result value objects"""
import enum
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator


def _to_decimal(v) -> Decimal:
    if isinstance(v, bool):
        raise ValueError("Boolean is not a valid amount")
    try:
        return Decimal(str(v))
    except InvalidOperation:
        raise ValueError(f"{v!r} is not a valid number")


class SplitType(str, enum.Enum):
    """Enum for split types"""
    EQUAL = "equal"
    AMOUNT = "amount"
    PERCENTAGE = "percentage"
    SHARES = "shares"


class SplitParticipant(BaseModel):
    """One participant of a split and their type-specific share value"""

    participant_id: str
    share_value: Optional[Decimal] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("share_value", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        """Convert numeric values to Decimal"""
        if v is None or isinstance(v, Decimal):
            return v
        return _to_decimal(v)


class SplitRequest(BaseModel):
    """
    Input of the split calculator.

    Range checks (whole, non-negative total; known split type) are left to
    the calculator so that every failure surfaces as a ledger ValidationError.
    """

    total_amount: Decimal
    split_type: Union[SplitType, str]
    participants: List[SplitParticipant]

    model_config = ConfigDict(frozen=True)

    @field_validator("total_amount", mode="before")
    @classmethod
    def convert_total_amount(cls, v):
        """Convert total_amount to Decimal"""
        if isinstance(v, Decimal):
            return v
        return _to_decimal(v)


class ShareAllocation(BaseModel):
    """Amount a single participant owes for an expense"""

    participant_id: str
    share_amount: int
    share_type: SplitType
    share_value: Optional[Decimal] = None

    model_config = ConfigDict(frozen=True)


class SplitResult(BaseModel):
    """Per-participant allocations, in input order, summing to total_amount"""

    total_amount: int
    split_type: SplitType
    shares: List[ShareAllocation]

    model_config = ConfigDict(frozen=True)

    @property
    def amounts(self) -> List[int]:
        """Share amounts in participant order"""
        return [share.share_amount for share in self.shares]
