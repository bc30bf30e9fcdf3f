"""Weighted shares split strategy"""

import math
from fractions import Fraction
from typing import List

from trip_ledger.core.exceptions import NonPositiveWeightError
from trip_ledger.models.split import ShareAllocation, SplitParticipant, SplitType
from trip_ledger.services.split_strategies.base import (BaseSplitStrategy,
                                                        distribute_remainder)


class SharesSplitStrategy(BaseSplitStrategy):
    """Strategy for splitting expense by relative weights"""

    split_type = SplitType.SHARES

    def calculate_splits(
        self, total_amount: int, participants: List[SplitParticipant]
    ) -> List[ShareAllocation]:
        """
        Calculate weighted split for participants.

        Entitlements are total * weight / sum(weights) in exact rational
        arithmetic, floored; leftover units go one at a time to participants
        in input order. Weights 1 and 2 over 100 give 34 and 66.

        Args:
            total_amount: Total expense amount in minor units
            participants: Participants with share_value as a positive weight

        Returns:
            List of ShareAllocation with calculated amounts

        Raises:
            MissingShareValueError: If a participant has no weight
            NonPositiveWeightError: If a weight is zero or negative
        """
        weights = self.require_share_values(participants)

        for participant, weight in zip(participants, weights):
            if weight <= 0:
                raise NonPositiveWeightError(participant.participant_id, weight)

        amounts = allocate_by_weights(total_amount, [Fraction(w) for w in weights])

        return self.build_allocations(participants, amounts)


def allocate_by_weights(total_amount: int, weights: List[Fraction]) -> List[int]:
    """
    Split an integer amount proportionally to positive weights.

    Args:
        total_amount: Amount in minor units
        weights: Positive weights, one per recipient

    Returns:
        Integer amounts summing exactly to total_amount
    """
    weight_sum = sum(weights, Fraction(0))
    amounts = [math.floor(total_amount * weight / weight_sum) for weight in weights]
    return distribute_remainder(amounts, total_amount - sum(amounts))
