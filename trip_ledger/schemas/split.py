"""Split preview schemas"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from trip_ledger.models.split import (
    ShareAllocation,
    SplitParticipant,
    SplitRequest,
    SplitResult,
    SplitType,
)
from trip_ledger.utils.money import format_currency


class SplitPreviewRequest(BaseModel):
    """Body of a split preview call from the expense form"""

    total_amount: Decimal = Field(..., description="Total in minor units")
    split_type: str = Field(..., examples=["equal", "amount", "percentage", "shares"])
    participants: List[SplitParticipant]
    currency: Optional[str] = Field(default=None, description="ISO 4217 code")

    def to_split_request(self) -> SplitRequest:
        return SplitRequest(
            total_amount=self.total_amount,
            split_type=self.split_type,
            participants=self.participants,
        )


class ShareResponse(ShareAllocation):
    """Allocation with an optional display string"""

    formatted_amount: Optional[str] = None


class SplitPreviewResponse(BaseModel):
    """Response schema for a split preview"""

    total_amount: int
    split_type: SplitType
    currency: Optional[str] = None
    formatted_total: Optional[str] = None
    shares: List[ShareResponse]

    @classmethod
    def from_result(cls, result: SplitResult, currency: Optional[str] = None):
        """Build response, adding formatted amounts when a currency is known"""

        def fmt(amount: int) -> Optional[str]:
            return format_currency(amount, currency) if currency else None

        return cls(
            total_amount=result.total_amount,
            split_type=result.split_type,
            currency=currency,
            formatted_total=fmt(result.total_amount),
            shares=[
                ShareResponse(**share.model_dump(), formatted_amount=fmt(share.share_amount))
                for share in result.shares
            ],
        )
