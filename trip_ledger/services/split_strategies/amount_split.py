"""Exact amount split strategy"""
from typing import List

from trip_ledger.core.exceptions import AmountMismatchError, InvalidShareValueError
from trip_ledger.models.split import ShareAllocation, SplitParticipant, SplitType
from trip_ledger.services.split_strategies.base import BaseSplitStrategy


class AmountSplitStrategy(BaseSplitStrategy):
    """Strategy for splits with exact per-participant amounts"""

    split_type = SplitType.AMOUNT

    def calculate_splits(
        self,
        total_amount: int,
        participants: List[SplitParticipant]
    ) -> List[ShareAllocation]:
        """
        Use the specified amounts for the split.

        Args:
            total_amount: Total expense amount in minor units
            participants: Participants with share_value in minor units

        Returns:
            List of ShareAllocation with the specified amounts

        Raises:
            MissingShareValueError: If a participant has no amount
            InvalidShareValueError: If an amount is fractional or negative
            AmountMismatchError: If amounts don't sum to total_amount
        """
        values = self.require_share_values(participants)

        amounts = []
        for participant, value in zip(participants, values):
            if value < 0 or value != value.to_integral_value():
                raise InvalidShareValueError(
                    participant.participant_id,
                    value,
                    "a non-negative whole number of minor units"
                )
            amounts.append(int(value))

        # No tolerance: amounts are already in minor units
        shares_sum = sum(amounts)
        if shares_sum != total_amount:
            raise AmountMismatchError(shares_sum, total_amount)

        return self.build_allocations(participants, amounts)
