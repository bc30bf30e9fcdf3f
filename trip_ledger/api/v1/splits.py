"""Split preview endpoints"""
from fastapi import APIRouter

from trip_ledger.config import get_settings
from trip_ledger.schemas.split import SplitPreviewRequest, SplitPreviewResponse
from trip_ledger.services.split_calculator import calculate_shares
from trip_ledger.utils.money import validate_currency_code

router = APIRouter(prefix="/splits", tags=["Splits"])


@router.post("/preview", response_model=SplitPreviewResponse)
async def preview_split(body: SplitPreviewRequest):
    """
    Calculate per-participant shares without storing anything.

    Used by the expense form to show running totals while the user edits
    amounts, percentages or weights.

    Args:
        body: Total, split type, participants and optional currency

    Returns:
        Shares in participant order, formatted when a currency is given

    Raises:
        400: If the split is invalid (the error kind names the rule)
    """
    settings = get_settings()
    currency = validate_currency_code(body.currency) if body.currency else None

    result = calculate_shares(
        body.to_split_request(),
        percentage_tolerance=settings.percentage_tolerance,
    )

    return SplitPreviewResponse.from_result(result, currency)
