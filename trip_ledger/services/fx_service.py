"""Currency conversion with stored FX rate snapshots"""

from decimal import Decimal
from fractions import Fraction
from typing import Optional

from trip_ledger.core.exceptions import InvalidFxRateError
from trip_ledger.models.ledger import ConversionResult
from trip_ledger.utils.money import (
    currency_exponent,
    round_half_up,
    validate_currency_code,
)


def convert_to_base_currency(
    amount: int,
    currency: str,
    base_currency: str,
    fx_rate: Optional[Decimal] = None
) -> ConversionResult:
    """
    Convert an amount to the trip base currency.

    The rate is the snapshot stored on the expense when it was recorded,
    not a live rate.

    Args:
        amount: Amount in minor units of `currency`
        currency: ISO 4217 code the amount is recorded in
        base_currency: ISO 4217 code of the trip base currency
        fx_rate: Units of base currency per unit of `currency`

    Returns:
        ConversionResult; needs_fx_rate is set (and amount is 0) when the
        currencies differ and no rate is available
    """
    currency = validate_currency_code(currency)
    base_currency = validate_currency_code(base_currency)

    if currency == base_currency:
        return ConversionResult(amount=amount, currency=base_currency, needs_fx_rate=False)

    if fx_rate is None:
        return ConversionResult(amount=0, currency=base_currency, needs_fx_rate=True)

    if fx_rate <= 0:
        raise InvalidFxRateError(fx_rate)

    # Minor units differ between currencies like USD (cents) and JPY (yen)
    scale = Fraction(10) ** (currency_exponent(base_currency) - currency_exponent(currency))

    return ConversionResult(
        amount=round_half_up(Fraction(amount) * Fraction(fx_rate) * scale),
        currency=base_currency,
        needs_fx_rate=False,
    )


def calculate_inverse_rate(rate: Decimal) -> Decimal:
    """
    Rate for the reverse conversion (EUR->USD 1.25 gives USD->EUR 0.8).

    Raises:
        InvalidFxRateError: If the rate is zero or negative
    """
    if rate <= 0:
        raise InvalidFxRateError(rate)
    return Decimal(1) / rate
