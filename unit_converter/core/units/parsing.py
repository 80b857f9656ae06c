"""Parsing of raw numeric input text"""

import math
import re
from typing import Optional

# Longest decimal prefix: sign, ASCII digits with optional fraction (or a
# bare fraction), optional exponent. Anything after the prefix is ignored.
_DECIMAL_PREFIX = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')


def parse_input(text) -> Optional[float]:
    """
    Parse user input as a floating-point number

    Parsing is locale-agnostic ('.' is the only decimal separator) and
    lenient about trailing characters, so '12abc' parses as 12.0 while
    partially typed input such as '-' or '.' does not parse at all.

    Args:
        text: Raw input text

    Returns:
        Parsed finite value, or None when there is nothing to convert
    """
    if text is None:
        return None

    match = _DECIMAL_PREFIX.match(str(text).lstrip())
    if not match:
        return None

    value = float(match.group(0))
    if not math.isfinite(value):
        return None

    return value
