"""Percentage split strategy"""

from decimal import Decimal
from fractions import Fraction
from typing import List

from trip_ledger.core.exceptions import InvalidShareValueError, PercentageSumError
from trip_ledger.models.split import ShareAllocation, SplitParticipant, SplitType
from trip_ledger.services.split_strategies.base import (BaseSplitStrategy,
                                                        distribute_remainder)
from trip_ledger.utils.money import round_half_up

DEFAULT_PERCENTAGE_TOLERANCE = Decimal("0.01")


class PercentageSplitStrategy(BaseSplitStrategy):
    """Strategy for splitting expense by percentage"""

    split_type = SplitType.PERCENTAGE

    def __init__(self, tolerance: Decimal = DEFAULT_PERCENTAGE_TOLERANCE):
        self.tolerance = tolerance

    def calculate_splits(
        self, total_amount: int, participants: List[SplitParticipant]
    ) -> List[ShareAllocation]:
        """
        Calculate percentage-based split for participants.

        Each share is total * percentage / 100 rounded half up. Rounding drift
        is then moved one unit at a time onto participants in input order,
        so 100 at 33.34/33.33/33.33 becomes 34/33/33.

        Args:
            total_amount: Total expense amount in minor units
            participants: Participants with share_value as a percentage

        Returns:
            List of ShareAllocation with calculated amounts

        Raises:
            MissingShareValueError: If a participant has no percentage
            InvalidShareValueError: If a percentage is outside 0-100
            PercentageSumError: If percentages don't sum to 100
        """
        percentages = self.require_share_values(participants)

        # Validate individual percentages
        for participant, percentage in zip(participants, percentages):
            if percentage < 0 or percentage > 100:
                raise InvalidShareValueError(
                    participant.participant_id, percentage, "a percentage between 0 and 100"
                )

        # Validate percentages sum to 100
        total_percentage = sum(percentages, Decimal("0"))
        if abs(total_percentage - Decimal("100")) > self.tolerance:
            raise PercentageSumError(total_percentage, self.tolerance)

        amounts = [
            round_half_up(Fraction(total_amount) * Fraction(percentage) / 100)
            for percentage in percentages
        ]

        # Handle rounding - positive drift adds units, negative drift removes them
        drift = total_amount - sum(amounts)
        if drift:
            amounts = distribute_remainder(amounts, drift)

        return self.build_allocations(participants, amounts)
