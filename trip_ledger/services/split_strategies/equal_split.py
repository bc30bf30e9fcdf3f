"""Equal split strategy"""

from typing import List

from trip_ledger.models.split import ShareAllocation, SplitParticipant, SplitType
from trip_ledger.services.split_strategies.base import (BaseSplitStrategy,
                                                        distribute_remainder)


class EqualSplitStrategy(BaseSplitStrategy):
    """Strategy for splitting expense equally among participants"""

    split_type = SplitType.EQUAL

    def calculate_splits(
        self, total_amount: int, participants: List[SplitParticipant]
    ) -> List[ShareAllocation]:
        """
        Calculate equal split for all participants.

        Share values are ignored. The remainder of the integer division goes
        one unit at a time to the first participants: 301 over two people is
        151 and 150.

        Args:
            total_amount: Total expense amount in minor units
            participants: Participants to split between

        Returns:
            List of ShareAllocation with equal amounts
        """
        base_amount, remainder = divmod(total_amount, len(participants))
        amounts = distribute_remainder([base_amount] * len(participants), remainder)

        # Equal splits carry no share value
        return [
            ShareAllocation(
                participant_id=participant.participant_id,
                share_amount=amount,
                share_type=self.split_type,
            )
            for participant, amount in zip(participants, amounts)
        ]
