"""Test the split calculator contract"""

import random
from decimal import Decimal

import pytest

from trip_ledger.core.exceptions import (
    AmountMismatchError,
    DuplicateParticipantError,
    EmptyParticipantsError,
    InvalidTotalAmountError,
    NonPositiveWeightError,
    PercentageSumError,
    UnknownSplitTypeError,
    ValidationError,
    ValidationErrorKind,
)
from trip_ledger.models.split import SplitParticipant, SplitRequest, SplitType
from trip_ledger.services.split_calculator import calculate_shares, validate_total_amount


def random_request(rng: random.Random, split_type: SplitType) -> SplitRequest:
    """Random valid request of the given split type"""
    count = rng.randint(1, 12)
    total = rng.choice([0, 1, rng.randint(1, 99), rng.randint(100, 10_000_000)])

    if split_type == SplitType.EQUAL:
        values = [None] * count
    elif split_type == SplitType.AMOUNT:
        cuts = sorted(rng.randint(0, total) for _ in range(count - 1))
        bounds = [0] + cuts + [total]
        values = [Decimal(bounds[i + 1] - bounds[i]) for i in range(count)]
    elif split_type == SplitType.PERCENTAGE:
        # basis points summing to exactly 10000
        cuts = sorted(rng.randint(0, 10000) for _ in range(count - 1))
        bounds = [0] + cuts + [10000]
        values = [Decimal(bounds[i + 1] - bounds[i]) / 100 for i in range(count)]
    else:
        values = [Decimal(rng.randint(1, 20)) / rng.choice([1, 2, 4]) for _ in range(count)]

    return SplitRequest(
        total_amount=total,
        split_type=split_type,
        participants=[
            SplitParticipant(participant_id=f"user-{i}", share_value=value)
            for i, value in enumerate(values)
        ],
    )


class TestCalculateShares:
    """Test calculate_shares results"""

    def test_equal_split_with_remainder(self, make_request):
        """Test 301 over 2 participants"""
        result = calculate_shares(make_request(301, "equal", [None, None]))

        assert result.amounts == [151, 150]
        assert result.total_amount == 301
        assert result.split_type == SplitType.EQUAL

    def test_equal_split_even(self, make_request):
        """Test 300 over 2 participants"""
        result = calculate_shares(make_request(300, SplitType.EQUAL, [None, None]))

        assert result.amounts == [150, 150]

    def test_percentage_rounding_correction(self, make_request):
        """Test 33.34/33.33/33.33 of 100 sums to exactly 100"""
        result = calculate_shares(
            make_request(100, "percentage", ["33.34", "33.33", "33.33"])
        )

        assert result.amounts == [34, 33, 33]
        assert sum(result.amounts) == 100

    def test_percentage_large_total_drift(self, make_request):
        """Test a large total within tolerance whose rounding drift is 9 * 10**8 units"""
        result = calculate_shares(make_request(10**13, "percentage", ["50.005", "50.004"]))

        assert sum(result.amounts) == 10**13
        assert result.amounts == [5000050000000, 4999950000000]

    def test_percentage_float_share_values(self, make_request):
        """Test float percentages are read through their decimal repr"""
        result = calculate_shares(make_request(20000, "percentage", [50.0, 30.0, 20.0]))

        assert result.amounts == [10000, 6000, 4000]

    def test_shares_split_uneven_weights(self, make_request):
        """Test weights [1, 2] over 100"""
        result = calculate_shares(make_request(100, "shares", [1, 2]))

        assert result.amounts == [34, 66]

    def test_amount_split(self, make_request):
        """Test exact amounts are passed through"""
        result = calculate_shares(make_request(100, "amount", [60, 40]))

        assert result.amounts == [60, 40]
        assert [share.share_type for share in result.shares] == [SplitType.AMOUNT] * 2

    def test_integral_decimal_total_accepted(self, make_request):
        """Test a total like 100.00 is a whole number of minor units"""
        result = calculate_shares(make_request(Decimal("100.00"), "equal", [None, None]))

        assert result.total_amount == 100
        assert isinstance(result.total_amount, int)

    def test_zero_total(self, make_request):
        """Test zero total is allowed"""
        result = calculate_shares(make_request(0, "equal", [None, None, None]))

        assert result.amounts == [0, 0, 0]

    def test_order_preserved(self):
        """Test result follows input participant order"""
        ids = ["zoe", "adam", "mia", "bob"]
        request = SplitRequest(
            total_amount=1001,
            split_type="equal",
            participants=[SplitParticipant(participant_id=pid) for pid in ids],
        )

        result = calculate_shares(request)

        assert [share.participant_id for share in result.shares] == ids
        assert result.amounts == [251, 250, 250, 250]

    def test_idempotent(self, make_request):
        """Test same input twice gives identical output"""
        request = make_request(1000, "shares", [3, 5, 7])

        first = calculate_shares(request)
        second = calculate_shares(request)

        assert first == second
        assert first.model_dump() == second.model_dump()


class TestCalculateSharesValidation:
    """Test calculate_shares rejects invalid input"""

    def test_empty_participants(self, make_request):
        with pytest.raises(EmptyParticipantsError) as exc:
            calculate_shares(make_request(100, "equal", []))

        assert exc.value.kind == ValidationErrorKind.EMPTY_PARTICIPANTS

    def test_duplicate_participants(self):
        request = SplitRequest(
            total_amount=100,
            split_type="equal",
            participants=[
                {"participant_id": "a"},
                {"participant_id": "b"},
                {"participant_id": "a"},
            ],
        )

        with pytest.raises(DuplicateParticipantError, match="Participant a appears more than once") as exc:
            calculate_shares(request)

        assert exc.value.kind == ValidationErrorKind.DUPLICATE_PARTICIPANT
        assert exc.value.details == {"participant_id": "a", "positions": [0, 2]}

    def test_fractional_total(self, make_request):
        with pytest.raises(InvalidTotalAmountError, match="fractional") as exc:
            calculate_shares(make_request(Decimal("10.5"), "equal", [None]))

        assert exc.value.kind == ValidationErrorKind.INVALID_TOTAL_AMOUNT
        assert exc.value.details["total_amount"] == "10.5"

    def test_negative_total(self, make_request):
        with pytest.raises(InvalidTotalAmountError, match="negative"):
            calculate_shares(make_request(-100, "equal", [None]))

    def test_non_finite_total(self):
        with pytest.raises(InvalidTotalAmountError, match="not a finite number"):
            validate_total_amount(Decimal("Infinity"))

    def test_amount_mismatch(self, make_request):
        with pytest.raises(AmountMismatchError) as exc:
            calculate_shares(make_request(100, "amount", [40, 30]))

        assert "Participant shares (70) do not sum to expense total (100)" in str(exc.value)

    def test_percentage_out_of_tolerance(self, make_request):
        with pytest.raises(PercentageSumError):
            calculate_shares(make_request(100, "percentage", ["50", "49.98"]))

    def test_percentage_custom_tolerance(self, make_request):
        result = calculate_shares(
            make_request(100, "percentage", ["50", "49.98"]),
            percentage_tolerance=Decimal("0.05"),
        )

        assert sum(result.amounts) == 100

    def test_non_positive_weight(self, make_request):
        with pytest.raises(NonPositiveWeightError):
            calculate_shares(make_request(100, "shares", [1, 0]))

    def test_unknown_split_type(self, make_request):
        with pytest.raises(UnknownSplitTypeError) as exc:
            calculate_shares(make_request(100, "custom", [None]))

        assert exc.value.kind == ValidationErrorKind.UNKNOWN_SPLIT_TYPE

    def test_failures_are_distinct(self, make_request):
        """Test degenerate inputs each map to their own error kind"""
        requests = [
            make_request(100, "equal", []),
            SplitRequest(
                total_amount=100,
                split_type="equal",
                participants=[{"participant_id": "x"}, {"participant_id": "x"}],
            ),
            make_request(100, "shares", [-1]),
        ]

        kinds = set()
        for request in requests:
            with pytest.raises(ValidationError) as exc:
                calculate_shares(request)
            assert exc.value.status_code == 400
            kinds.add(exc.value.kind)

        assert len(kinds) == 3


class TestCalculateSharesProperties:
    """Randomised checks of the calculator invariants"""

    @pytest.mark.parametrize("split_type", list(SplitType))
    @pytest.mark.parametrize("seed", range(5))
    def test_sum_and_order_invariants(self, split_type, seed):
        rng = random.Random(f"{split_type.value}-{seed}")

        for _ in range(40):
            request = random_request(rng, split_type)
            result = calculate_shares(request)

            assert sum(result.amounts) == int(request.total_amount)
            assert [s.participant_id for s in result.shares] == [
                p.participant_id for p in request.participants
            ]
            assert all(amount >= 0 for amount in result.amounts)
            assert all(s.share_type == split_type for s in result.shares)
            assert calculate_shares(request) == result

    @pytest.mark.parametrize("seed", range(5))
    def test_equal_shares_differ_by_at_most_one(self, seed):
        rng = random.Random(seed)

        for _ in range(40):
            result = calculate_shares(random_request(rng, SplitType.EQUAL))

            assert max(result.amounts) - min(result.amounts) <= 1
            # larger shares come first
            assert result.amounts == sorted(result.amounts, reverse=True)

    @pytest.mark.parametrize("seed", range(5))
    def test_shares_stay_within_one_unit_of_entitlement(self, seed):
        rng = random.Random(seed)

        for _ in range(40):
            request = random_request(rng, SplitType.SHARES)
            result = calculate_shares(request)
            weights = [p.share_value for p in request.participants]
            weight_sum = sum(weights)

            for weight, amount in zip(weights, result.amounts):
                entitlement = request.total_amount * weight / weight_sum
                assert -1 < amount - entitlement <= 1
