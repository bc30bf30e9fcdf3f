"""Minor-unit money helpers"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from fractions import Fraction
from typing import Union

from trip_ledger.core.exceptions import InvalidCurrencyError, ValidationError

Number = Union[int, float, str, Decimal]

# ISO 4217 exponents that differ from the default of 2
CURRENCY_EXPONENTS = {
    "BIF": 0, "CLP": 0, "DJF": 0, "GNF": 0, "ISK": 0, "JPY": 0, "KMF": 0,
    "KRW": 0, "PYG": 0, "RWF": 0, "UGX": 0, "VND": 0, "VUV": 0, "XAF": 0,
    "XOF": 0, "XPF": 0,
    "BHD": 3, "IQD": 3, "JOD": 3, "KWD": 3, "LYD": 3, "OMR": 3, "TND": 3,
}
DEFAULT_EXPONENT = 2

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
    "KRW": "₩",
    "CNY": "CN¥",
    "AUD": "A$",
    "CAD": "CA$",
    "NZD": "NZ$",
    "MXN": "MX$",
    "BRL": "R$",
}

_CURRENCY_CODE = re.compile(r"[A-Z]{3}")


def validate_currency_code(currency: str) -> str:
    """
    Normalize and validate an ISO 4217 currency code.

    Args:
        currency: Currency code, any case

    Returns:
        Upper-cased three-letter code

    Raises:
        InvalidCurrencyError: If the code is not three letters
    """
    if not isinstance(currency, str):
        raise InvalidCurrencyError(currency)
    code = currency.strip().upper()
    if not _CURRENCY_CODE.fullmatch(code):
        raise InvalidCurrencyError(currency)
    return code


def currency_exponent(currency: str) -> int:
    """Number of minor-unit digits for a currency"""
    return CURRENCY_EXPONENTS.get(validate_currency_code(currency), DEFAULT_EXPONENT)


def round_half_up(value: Union[Fraction, Decimal, int]) -> int:
    """
    Round an exact number to the nearest integer, halves away from zero.

    Args:
        value: Fraction, Decimal or int

    Returns:
        Rounded integer
    """
    value = Fraction(value)
    rounded = math.floor(abs(value) + Fraction(1, 2))
    return rounded if value >= 0 else -rounded


def to_minor_units(amount: Number, currency: str = "USD") -> int:
    """
    Convert a major-unit amount to integer minor units.

    Floats are read through their shortest repr so that 0.1 becomes 10 cents.

    Args:
        amount: Amount in major units (e.g. 10.50)
        currency: ISO 4217 currency code

    Returns:
        Amount in minor units, rounded half up (e.g. 1050)
    """
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        raise ValidationError(f"Amount {amount!r} is not a number")
    if not value.is_finite():
        raise ValidationError(f"Amount {amount!r} is not a finite number")

    exponent = currency_exponent(currency)
    scaled = value.scaleb(exponent)
    return int(scaled.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def from_minor_units(minor_units: int, currency: str = "USD") -> Decimal:
    """
    Convert integer minor units to a major-unit Decimal.

    Args:
        minor_units: Amount in minor units (e.g. 1050)
        currency: ISO 4217 currency code

    Returns:
        Decimal amount with the currency's number of places (e.g. 10.50)
    """
    exponent = currency_exponent(currency)
    quantum = Decimal(1).scaleb(-exponent)
    return Decimal(minor_units).scaleb(-exponent).quantize(quantum)


def format_currency(minor_units: int, currency: str) -> str:
    """
    Render minor units for display.

    Known currencies use their symbol, unknown ones are prefixed with
    the code itself: 1050 USD -> "$10.50", -5000 USD -> "-$50.00",
    10000 XYZ -> "XYZ100.00".

    Args:
        minor_units: Amount in minor units
        currency: ISO 4217 currency code

    Returns:
        Formatted string
    """
    code = validate_currency_code(currency)
    exponent = currency_exponent(code)
    amount = from_minor_units(abs(minor_units), code)
    symbol = CURRENCY_SYMBOLS.get(code, code)
    sign = "-" if minor_units < 0 else ""
    return f"{sign}{symbol}{amount:,.{exponent}f}"
