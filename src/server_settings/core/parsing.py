"""
Conversion of raw setting strings into typed values.
"""

import re
from typing import Optional

INT_TYPE_NAME = "integer"
BOOL_TYPE_NAME = "boolean"

# Signed 32-bit range
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1

_INT_PATTERN = re.compile(r'^[+-]?[0-9]+$')


def parse_int(raw: str) -> Optional[int]:
    """
    Parse a decimal integer.

    Surrounding whitespace and a leading sign are accepted. Returns None if
    the text isn't a plain decimal number or falls outside the signed 32-bit
    range.
    """
    text = raw.strip()
    if not _INT_PATTERN.match(text):
        return None

    value = int(text)
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


def parse_bool(raw: str) -> Optional[bool]:
    """Parse 'true' or 'false', ignoring case and surrounding whitespace."""
    text = raw.strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    return None
