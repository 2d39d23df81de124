import decimal
import logging
import re
from typing import NamedTuple

from ..types import Format, Scale
from . import decimals
from .exceptions import EmptyString, ParsingFailed
from .suffixes import NO_SUFFIX, lookup_suffix, match_suffix

logger = logging.getLogger(__name__)

# Signed float literal, the sign in front of it is consumed separately
FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+(?:[.]\d*)?|[.]\d+)(?:[eE][+-]?\d+)?|infinity|inf|nan)",
    re.IGNORECASE | re.ASCII,
)


class QuantityParts(NamedTuple):
    value: decimal.Decimal
    format: Format
    scale: Scale


def _fail(text: str, position: int) -> ParsingFailed:
    logger.debug("Invalid quantity %r, unexpected input at position %d", text, position)
    return ParsingFailed(text[position:], position)


def parse_quantity_parts(text: str) -> QuantityParts:
    """Split a quantity string into its decimal value, format and scale.

    The accepted grammar is `[sign] [mantissa] [suffix]`, where every part is optional:
    a missing mantissa is zero (`"-Ki"` is zero kibi) and a missing suffix is a plain
    decimal number. The whole input must be consumed.
    """
    if not text:
        raise EmptyString()

    pos = 0
    negative = False
    if text[0] in "+-":
        negative = text[0] == "-"
        pos = 1

    match = FLOAT_PATTERN.match(text, pos)
    if match:
        literal = match.group()
        pos = match.end()
        # a second decimal point can't start a suffix
        if text.startswith(".", pos):
            raise _fail(text, pos)
    else:
        literal = "0"

    if pos == len(text):
        fmt, scale = NO_SUFFIX
    else:
        token = match_suffix(text[pos:])
        if token is None:
            raise _fail(text, pos)
        fmt, scale = lookup_suffix(token)
        pos += len(token)
        if pos != len(text):
            raise _fail(text, pos)

    value = decimals.from_literal(literal)
    if negative:
        value = decimals.context.minus(value)
    return QuantityParts(value, fmt, scale)
