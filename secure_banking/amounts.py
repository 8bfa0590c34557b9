"""
Amount Handling Module

Coerces user supplied amounts to Decimal and renders them for notification
messages. NEVER uses float arithmetic for balances.
"""

from decimal import Decimal, InvalidOperation
from typing import Union
import re

from .errors import InvalidAmountFormat

AmountLike = Union[Decimal, int, float, str]

# Amounts stay within 10**-18 .. 10**19 so balance arithmetic cannot overflow
MAX_AMOUNT_EXPONENT = 18

# Outside this range amounts render in E notation, like Double.toString
SCIENTIFIC_UPPER = Decimal('1E+7')
SCIENTIFIC_LOWER = Decimal('1E-3')


def to_decimal(value: AmountLike) -> Decimal:
    """
    Convert an amount to Decimal

    Floats go through str() so 0.1 stays 0.1. Strings may carry a currency
    symbol, surrounding whitespace or thousands separators.

    Raises:
        InvalidAmountFormat: If the value is not a finite number, or its
            magnitude is outside 10**-18 .. 10**19
    """
    if isinstance(value, bool):
        raise InvalidAmountFormat(f"Cannot convert {value!r} to Decimal")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        result = _decimal_from_string(value)
    else:
        raise InvalidAmountFormat(f"Cannot convert {type(value).__name__} to Decimal")

    if not result.is_finite():
        raise InvalidAmountFormat(f"Amount must be finite, got {value!r}")
    if result and abs(result.adjusted()) > MAX_AMOUNT_EXPONENT:
        raise InvalidAmountFormat(f"Amount {value!r} is out of range")
    return result


def _decimal_from_string(value: str) -> Decimal:
    # Remove currency symbols and thousands separators
    clean_value = re.sub(r'[$£€,]', '', value).strip()
    if not clean_value:
        raise InvalidAmountFormat("Amount must be a non-empty string")

    try:
        return Decimal(clean_value)
    except InvalidOperation:
        raise InvalidAmountFormat(f"Cannot convert '{value}' to Decimal")


def format_amount(amount: Decimal) -> str:
    """
    Render an amount for display

    Whole amounts keep one fractional digit (50 -> "50.0"), everything else
    shows its significant digits (50.250 -> "50.25"). Magnitudes from 10**7
    up or below 10**-3 use E notation (12500000 -> "1.25E7").
    """
    normalized = amount.normalize()
    magnitude = abs(normalized)
    if magnitude and (magnitude >= SCIENTIFIC_UPPER or magnitude < SCIENTIFIC_LOWER):
        return _scientific(normalized)
    if normalized == normalized.to_integral_value():
        return f"{normalized:.1f}"
    return format(normalized, 'f')


def _scientific(normalized: Decimal) -> str:
    sign, digits, _ = normalized.as_tuple()
    mantissa = "".join(str(digit) for digit in digits)
    fraction = mantissa[1:] or "0"
    return f"{'-' if sign else ''}{mantissa[0]}.{fraction}E{normalized.adjusted()}"
