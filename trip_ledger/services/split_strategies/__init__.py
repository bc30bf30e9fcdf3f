"""Split calculation strategies"""

from decimal import Decimal

from trip_ledger.core.exceptions import UnknownSplitTypeError
from trip_ledger.models.split import SplitType
from trip_ledger.services.split_strategies.amount_split import AmountSplitStrategy
from trip_ledger.services.split_strategies.base import (BaseSplitStrategy,
                                                        distribute_remainder)
from trip_ledger.services.split_strategies.equal_split import EqualSplitStrategy
from trip_ledger.services.split_strategies.percentage_split import (
    DEFAULT_PERCENTAGE_TOLERANCE, PercentageSplitStrategy)
from trip_ledger.services.split_strategies.shares_split import (
    SharesSplitStrategy, allocate_by_weights)


def get_split_strategy(
    split_type, percentage_tolerance: Decimal = DEFAULT_PERCENTAGE_TOLERANCE
) -> BaseSplitStrategy:
    """
    Get appropriate split strategy based on split type.

    Args:
        split_type: SplitType or its string value
        percentage_tolerance: Allowed deviation of percentages from 100

    Returns:
        Instance of appropriate strategy

    Raises:
        UnknownSplitTypeError: If split_type is not recognized
    """
    try:
        split_type = SplitType(split_type)
    except ValueError:
        raise UnknownSplitTypeError(split_type, [t.value for t in SplitType])

    strategies = {
        SplitType.EQUAL: EqualSplitStrategy,
        SplitType.AMOUNT: AmountSplitStrategy,
        SplitType.PERCENTAGE: lambda: PercentageSplitStrategy(percentage_tolerance),
        SplitType.SHARES: SharesSplitStrategy,
    }

    return strategies[split_type]()


__all__ = [
    "BaseSplitStrategy",
    "EqualSplitStrategy",
    "AmountSplitStrategy",
    "PercentageSplitStrategy",
    "SharesSplitStrategy",
    "DEFAULT_PERCENTAGE_TOLERANCE",
    "allocate_by_weights",
    "distribute_remainder",
    "get_split_strategy",
]
