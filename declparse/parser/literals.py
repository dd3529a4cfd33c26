"""
Literal classification.

The right-hand side of a declarator is either a whole number, which becomes
a NumericLiteral holding an int, or anything else, which becomes a
StringLiteral holding the trimmed text verbatim. There is no float
fallback: '45.123' is a string literal, and quotes around strings are kept.
"""

import re
from typing import Optional

from .ast_nodes import Literal, LiteralKind

# Optional sign, ASCII digits only
INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')

LITERAL_PADDING = " "


def parse_integer(text: str, bits: Optional[int] = 64) -> Optional[int]:
    """
    Strictly parse a signed whole number.

    Returns None when text is not an optionally signed run of ASCII digits,
    or when the value does not fit in a signed integer of the given width.
    """
    if not INTEGER_PATTERN.fullmatch(text):
        return None

    value = int(text)
    if bits is not None:
        limit = 1 << (bits - 1)
        if not -limit <= value < limit:
            return None

    return value


def classify_literal(raw: str, integer_bits: Optional[int] = 64) -> Literal:
    """Classify raw right-hand side text as a numeric or string literal."""
    trimmed = raw.strip(LITERAL_PADDING)

    value = parse_integer(trimmed, integer_bits)
    if value is not None:
        return Literal(LiteralKind.NUMERIC, value, raw)

    return Literal(LiteralKind.STRING, trimmed, raw)
