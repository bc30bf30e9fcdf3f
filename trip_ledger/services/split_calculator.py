"""Expense split calculator"""
import logging
from collections import defaultdict
from decimal import Decimal
from typing import Optional

from trip_ledger.core.exceptions import (
    AppException,
    DuplicateParticipantError,
    EmptyParticipantsError,
    InvalidTotalAmountError,
)
from trip_ledger.models.split import SplitRequest, SplitResult
from trip_ledger.services.split_strategies import (
    DEFAULT_PERCENTAGE_TOLERANCE,
    get_split_strategy,
)

logger = logging.getLogger(__name__)


def validate_total_amount(total_amount: Decimal) -> int:
    """
    Validate the expense total and return it as integer minor units.

    Args:
        total_amount: Total as supplied by the caller

    Returns:
        Total in minor units

    Raises:
        InvalidTotalAmountError: If the total is not finite, fractional or negative
    """
    if not total_amount.is_finite():
        raise InvalidTotalAmountError(total_amount, "not a finite number")
    if total_amount != total_amount.to_integral_value():
        raise InvalidTotalAmountError(total_amount, "fractional minor units")
    if total_amount < 0:
        raise InvalidTotalAmountError(total_amount, "negative")
    return int(total_amount)


def validate_participants(participants: list) -> None:
    """
    Validate participant list is non-empty and ids are unique.

    Raises:
        EmptyParticipantsError: If there are no participants
        DuplicateParticipantError: If an id appears more than once
    """
    if not participants:
        raise EmptyParticipantsError()

    positions = defaultdict(list)
    for index, participant in enumerate(participants):
        positions[participant.participant_id].append(index)

    for participant_id, seen_at in positions.items():
        if len(seen_at) > 1:
            raise DuplicateParticipantError(participant_id, seen_at)


def calculate_shares(
    request: SplitRequest,
    percentage_tolerance: Optional[Decimal] = None
) -> SplitResult:
    """
    Split an expense total between participants.

    The result has one allocation per participant in input order and its
    amounts always add up to the total exactly. Identical requests give
    identical results.

    Args:
        request: Total, split type and participants
        percentage_tolerance: Allowed deviation of percentages from 100

    Returns:
        SplitResult with per-participant allocations

    Raises:
        ValidationError: A subclass naming the violated rule; no partial result
    """
    total_amount = validate_total_amount(request.total_amount)
    validate_participants(request.participants)

    if percentage_tolerance is None:
        percentage_tolerance = DEFAULT_PERCENTAGE_TOLERANCE
    strategy = get_split_strategy(request.split_type, percentage_tolerance)

    shares = strategy.calculate_splits(total_amount, request.participants)

    allocated = sum(share.share_amount for share in shares)
    if allocated != total_amount or len(shares) != len(request.participants):
        raise AppException(
            f"Split allocated {allocated} of {total_amount} across {len(shares)} participants",
            error_type="SplitAllocationError"
        )

    logger.debug(
        "Split %s of %d between %d participants: %s",
        strategy.split_type.value,
        total_amount,
        len(shares),
        [share.share_amount for share in shares],
    )

    return SplitResult(
        total_amount=total_amount,
        split_type=strategy.split_type,
        shares=shares,
    )
