"""Base strategy interface"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List

from trip_ledger.core.exceptions import MissingShareValueError
from trip_ledger.models.split import ShareAllocation, SplitParticipant, SplitType


def distribute_remainder(amounts: List[int], remainder: int) -> List[int]:
    """
    Spread leftover minor units over participants one unit at a time.

    Walks the participants in input order starting from the first and
    wraps around until the remainder is used up. A positive remainder adds
    a unit to each visited participant; a negative remainder takes one
    away, skipping participants whose share is already zero.

    Whole passes are applied in bulk, so the cost depends on the number of
    participants and not on the size of the remainder.

    Args:
        amounts: Provisional share per participant, in input order
        remainder: Units to add (positive) or remove (negative)

    Returns:
        New list of adjusted amounts

    Raises:
        ValueError: If more units are to be removed than the amounts hold
    """
    adjusted = list(amounts)

    if remainder > 0:
        per_participant, extra = divmod(remainder, len(adjusted))
        return [
            amount + per_participant + (1 if index < extra else 0)
            for index, amount in enumerate(adjusted)
        ]

    left = -remainder
    while left:
        positive = [index for index, amount in enumerate(adjusted) if amount > 0]
        if not positive:
            raise ValueError(f"Cannot remove {-remainder} units from {sum(amounts)}")

        # Full passes until the smallest positive share reaches zero
        passes = min(left // len(positive), min(adjusted[index] for index in positive))
        if passes == 0:
            for index in positive[:left]:
                adjusted[index] -= 1
            break

        for index in positive:
            adjusted[index] -= passes
        left -= passes * len(positive)

    return adjusted


class BaseSplitStrategy(ABC):
    """Base class for split strategies"""

    split_type: SplitType

    @abstractmethod
    def calculate_splits(
        self, total_amount: int, participants: List[SplitParticipant]
    ) -> List[ShareAllocation]:
        """
        Calculate split amounts for participants.

        Args:
            total_amount: Total expense amount in minor units
            participants: Non-empty list of participants with unique ids

        Returns:
            List of ShareAllocation objects, one per participant, in input order
        """
        pass

    def require_share_values(self, participants: List[SplitParticipant]) -> List[Decimal]:
        """Share values of all participants, failing on the first missing one"""
        values = []
        for participant in participants:
            if participant.share_value is None:
                raise MissingShareValueError(
                    participant.participant_id, self.split_type.value
                )
            values.append(participant.share_value)
        return values

    def build_allocations(
        self, participants: List[SplitParticipant], amounts: List[int]
    ) -> List[ShareAllocation]:
        """Pair amounts with participants, keeping each caller's share value"""
        return [
            ShareAllocation(
                participant_id=participant.participant_id,
                share_amount=amount,
                share_type=self.split_type,
                share_value=participant.share_value,
            )
            for participant, amount in zip(participants, amounts)
        ]
