"""Balance calculation and settlement optimization"""

import logging
from fractions import Fraction
from typing import Dict, List

from trip_ledger.core.exceptions import AmountMismatchError
from trip_ledger.models.ledger import (
    ExpenseStatus,
    LedgerExpense,
    LedgerSummary,
    SettlementSuggestion,
    UserBalance,
)
from trip_ledger.services.fx_service import convert_to_base_currency
from trip_ledger.services.split_strategies import allocate_by_weights
from trip_ledger.utils.money import validate_currency_code

logger = logging.getLogger(__name__)


class BalanceService:
    """Service for balance calculation operations"""

    @staticmethod
    def _convert_shares(expense: LedgerExpense, base_currency: str) -> List[int]:
        """
        Share amounts of an expense in base-currency minor units.

        The converted total of the shares is re-split in proportion to the
        original shares, so the converted shares add up to the converted
        total instead of drifting by per-share rounding.

        Args:
            expense: Expense with an FX rate (or already in base currency)
            base_currency: Trip base currency

        Returns:
            Converted share amounts in the order of expense.shares
        """
        amounts = [share.share_amount for share in expense.shares]
        if validate_currency_code(expense.currency) == base_currency:
            return amounts

        converted_total = convert_to_base_currency(
            sum(amounts), expense.currency, base_currency, expense.fx_rate
        ).amount

        positive = [index for index, amount in enumerate(amounts) if amount > 0]
        if not positive:
            return [0] * len(amounts)

        allocated = allocate_by_weights(
            converted_total, [Fraction(amounts[index]) for index in positive]
        )
        converted = [0] * len(amounts)
        for index, amount in zip(positive, allocated):
            converted[index] = amount
        return converted

    @staticmethod
    def calculate_user_balances(
        expenses: List[LedgerExpense], base_currency: str
    ) -> List[UserBalance]:
        """
        Calculate net balance for each user across expenses.

        Net balance = total paid - total owed, in base-currency minor units.
        Positive means the user is owed money, negative means they owe.

        Args:
            expenses: Expenses with payer and shares
            base_currency: Trip base currency

        Returns:
            User balances in first-seen order
        """
        return BalanceService.summarize(expenses, base_currency).balances

    @staticmethod
    def optimize_settlements(balances: List[UserBalance]) -> List[SettlementSuggestion]:
        """
        Suggest transfers that settle all balances with few transactions.

        Greedy: the largest debtor pays the largest creditor until one of
        them is settled, then moves on. Ties keep input order, so the
        output is deterministic. Produces at most n - 1 transfers.

        Args:
            balances: Net balances (assumed to sum to zero)

        Returns:
            List of settlement suggestions
        """
        debtors = sorted(
            ([b.user_id, -b.net_balance, b.currency] for b in balances if b.net_balance < 0),
            key=lambda entry: entry[1],
            reverse=True,
        )
        creditors = sorted(
            ([b.user_id, b.net_balance, b.currency] for b in balances if b.net_balance > 0),
            key=lambda entry: entry[1],
            reverse=True,
        )

        settlements = []
        debtor_index = 0
        creditor_index = 0

        while debtor_index < len(debtors) and creditor_index < len(creditors):
            debtor = debtors[debtor_index]
            creditor = creditors[creditor_index]

            amount = min(debtor[1], creditor[1])
            settlements.append(
                SettlementSuggestion(
                    from_user_id=debtor[0],
                    to_user_id=creditor[0],
                    amount=amount,
                    currency=debtor[2],
                )
            )

            debtor[1] -= amount
            creditor[1] -= amount

            if debtor[1] == 0:
                debtor_index += 1
            if creditor[1] == 0:
                creditor_index += 1

        return settlements

    @staticmethod
    def summarize(expenses: List[LedgerExpense], base_currency: str) -> LedgerSummary:
        """
        Compute balances and settlement suggestions for a trip.

        Settled expenses are ignored. Foreign-currency expenses without an
        FX rate are skipped and reported in skipped_expense_ids.
        Every expense must have shares adding up to its amount, so the
        balances net to zero.

        Args:
            expenses: Expenses with payer and shares
            base_currency: Trip base currency

        Returns:
            LedgerSummary with balances, settlements and skipped expense ids

        Raises:
            AmountMismatchError: If an expense's shares do not sum to its amount
        """
        base_currency = validate_currency_code(base_currency)
        balances: Dict[str, int] = {}
        skipped = []

        for expense in expenses:
            shares_sum = sum(share.share_amount for share in expense.shares)
            if shares_sum != expense.amount:
                raise AmountMismatchError(shares_sum, expense.amount)

            if expense.status == ExpenseStatus.SETTLED:
                continue

            conversion = convert_to_base_currency(
                expense.amount, expense.currency, base_currency, expense.fx_rate
            )
            if conversion.needs_fx_rate:
                logger.warning(
                    "Skipping expense %s: no FX rate for %s->%s",
                    expense.expense_id,
                    expense.currency,
                    base_currency,
                )
                skipped.append(expense.expense_id)
                continue

            # Credit the payer with the full amount
            balances[expense.payer_id] = balances.get(expense.payer_id, 0) + conversion.amount

            # Debit each participant with their share
            shares = BalanceService._convert_shares(expense, base_currency)
            for share, amount in zip(expense.shares, shares):
                balances[share.participant_id] = balances.get(share.participant_id, 0) - amount

        user_balances = [
            UserBalance(user_id=user_id, net_balance=net, currency=base_currency)
            for user_id, net in balances.items()
        ]

        return LedgerSummary(
            base_currency=base_currency,
            balances=user_balances,
            settlements=BalanceService.optimize_settlements(user_balances),
            skipped_expense_ids=skipped,
        )
