"""
Numeric Formatting

Renders conversion results as display strings. Very large and very small
magnitudes use scientific notation; everything else is shown in plain
decimal form with a fixed number of significant digits.

Rounding is done on the exact binary value with ties rounded away from
zero, so halfway cases such as 123456789.25 round up.
"""

import math
from decimal import Context, Decimal, ROUND_HALF_UP

from ...config.format_settings import FormatSettings, DEFAULT_FORMAT_SETTINGS


def _round_significant(number: float, digits: int) -> Decimal:
    """Round the exact value of a float to ``digits`` significant digits"""
    return Context(prec=digits, rounding=ROUND_HALF_UP).plus(Decimal(number))


def format_scientific(number: float, mantissa_digits: int = 6) -> str:
    """
    Scientific notation with an unpadded, signed exponent

    Example: 1.2345e10 -> '1.234500e+10', 5e-05 -> '5.000000e-5'
    """
    rounded = _round_significant(number, mantissa_digits + 1)
    exponent = rounded.adjusted()
    mantissa = rounded.scaleb(-exponent)
    return f"{mantissa:.{mantissa_digits}f}e{exponent:+d}"


def format_decimal(number: float, significant_digits: int = 10) -> str:
    """
    Plain decimal with at most ``significant_digits`` significant digits

    Trailing zeros and a trailing decimal point are dropped.
    """
    text = f"{_round_significant(number, significant_digits):f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def format_number(number: float, settings: FormatSettings = DEFAULT_FORMAT_SETTINGS) -> str:
    """
    Format a conversion result for display

    Args:
        number: Finite value to render
        settings: Thresholds and precision to apply

    Returns:
        Display string, e.g. '3', '0.3333333333', '1.234500e+10'
    """
    if math.isnan(number):
        return 'NaN'
    if math.isinf(number):
        return 'Infinity' if number > 0 else '-Infinity'

    if number == 0:
        return '0'

    magnitude = abs(number)
    if magnitude >= settings.scientific_upper or magnitude < settings.scientific_lower:
        return format_scientific(number, settings.mantissa_digits)

    return format_decimal(number, settings.significant_digits)
