"""Custom exception classes"""
import enum
from typing import Any, Optional


class AppException(Exception):
    """Base exception for application errors"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_type: str = "AppError",
        details: Optional[Any] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        self.details = details
        super().__init__(self.message)


class ValidationErrorKind(str, enum.Enum):
    """Closed set of validation failures raised by the ledger"""
    EMPTY_PARTICIPANTS = "empty_participants"
    DUPLICATE_PARTICIPANT = "duplicate_participant"
    INVALID_TOTAL_AMOUNT = "invalid_total_amount"
    MISSING_SHARE_VALUE = "missing_share_value"
    INVALID_SHARE_VALUE = "invalid_share_value"
    AMOUNT_MISMATCH = "amount_mismatch"
    PERCENTAGE_SUM_MISMATCH = "percentage_sum_mismatch"
    NON_POSITIVE_WEIGHT = "non_positive_weight"
    UNKNOWN_SPLIT_TYPE = "unknown_split_type"
    INVALID_CURRENCY = "invalid_currency"
    INVALID_FX_RATE = "invalid_fx_rate"


class ValidationError(AppException):
    """Validation error exception"""

    kind: Optional[ValidationErrorKind] = None

    def __init__(
        self,
        message: str,
        details: Optional[Any] = None,
        kind: Optional[ValidationErrorKind] = None
    ):
        if kind is not None:
            self.kind = kind
        super().__init__(
            message=message,
            status_code=400,
            error_type="ValidationError",
            details=details
        )


class EmptyParticipantsError(ValidationError):
    """No participants were supplied"""

    kind = ValidationErrorKind.EMPTY_PARTICIPANTS

    def __init__(self):
        super().__init__(
            "At least one participant is required",
            details={"participant_count": 0, "expected_min": 1}
        )


class DuplicateParticipantError(ValidationError):
    """The same participant id appears more than once"""

    kind = ValidationErrorKind.DUPLICATE_PARTICIPANT

    def __init__(self, participant_id: str, positions: list):
        super().__init__(
            f"Participant {participant_id} appears more than once "
            f"(positions {', '.join(str(p) for p in positions)})",
            details={"participant_id": participant_id, "positions": positions}
        )


class InvalidTotalAmountError(ValidationError):
    """Total amount is fractional or negative"""

    kind = ValidationErrorKind.INVALID_TOTAL_AMOUNT

    def __init__(self, total_amount: Any, reason: str):
        super().__init__(
            f"Total amount must be a non-negative whole number of minor units, "
            f"got {total_amount} ({reason})",
            details={"total_amount": str(total_amount), "reason": reason}
        )


class MissingShareValueError(ValidationError):
    """A split type that needs a share value got none"""

    kind = ValidationErrorKind.MISSING_SHARE_VALUE

    def __init__(self, participant_id: str, split_type: str):
        super().__init__(
            f"Participant {participant_id} needs a share value for a {split_type} split",
            details={"participant_id": participant_id, "split_type": split_type}
        )


class InvalidShareValueError(ValidationError):
    """A share value is outside its allowed domain"""

    kind = ValidationErrorKind.INVALID_SHARE_VALUE

    def __init__(self, participant_id: str, share_value: Any, expected: str):
        super().__init__(
            f"Share value {share_value} for participant {participant_id} is invalid: "
            f"expected {expected}",
            details={
                "participant_id": participant_id,
                "share_value": str(share_value),
                "expected": expected,
            }
        )


class AmountMismatchError(ValidationError):
    """Exact amount shares do not add up to the expense total"""

    kind = ValidationErrorKind.AMOUNT_MISMATCH

    def __init__(self, shares_sum: int, total_amount: int):
        super().__init__(
            f"Participant shares ({shares_sum}) do not sum to expense total ({total_amount})",
            details={"shares_sum": shares_sum, "total_amount": total_amount}
        )


class PercentageSumError(ValidationError):
    """Percentages do not add up to 100 within tolerance"""

    kind = ValidationErrorKind.PERCENTAGE_SUM_MISMATCH

    def __init__(self, percentage_sum: Any, tolerance: Any):
        super().__init__(
            f"Percentages must sum to 100% (tolerance {tolerance}), got {percentage_sum}%",
            details={
                "percentage_sum": str(percentage_sum),
                "expected": "100",
                "tolerance": str(tolerance),
            }
        )


class NonPositiveWeightError(ValidationError):
    """A weighted split got a zero or negative weight"""

    kind = ValidationErrorKind.NON_POSITIVE_WEIGHT

    def __init__(self, participant_id: str, weight: Any):
        super().__init__(
            f"Share weight for participant {participant_id} must be positive, got {weight}",
            details={"participant_id": participant_id, "weight": str(weight)}
        )


class UnknownSplitTypeError(ValidationError):
    """Split type is not one of the supported strategies"""

    kind = ValidationErrorKind.UNKNOWN_SPLIT_TYPE

    def __init__(self, split_type: Any, allowed: list):
        super().__init__(
            f"Unknown split type: {split_type}",
            details={"split_type": str(split_type), "allowed": allowed}
        )


class InvalidCurrencyError(ValidationError):
    """Currency code is not a three-letter ISO 4217 code"""

    kind = ValidationErrorKind.INVALID_CURRENCY

    def __init__(self, currency: Any):
        super().__init__(
            f"Currency must be a three-letter ISO 4217 code, got {currency!r}",
            details={"currency": str(currency)}
        )


class InvalidFxRateError(ValidationError):
    """FX rate cannot be used for conversion"""

    kind = ValidationErrorKind.INVALID_FX_RATE

    def __init__(self, rate: Any):
        super().__init__(
            f"FX rate must be positive, got {rate}",
            details={"fx_rate": str(rate)}
        )
