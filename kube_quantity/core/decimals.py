import decimal
import math
import struct
from typing import Optional

from ..config import QuantityConfig
from .exceptions import DecimalParsingFailed

context = QuantityConfig.from_env().to_context()


def configure(config: QuantityConfig) -> None:
    """Use the settings of `config` for all the following quantity operations.

    **Parameters**

    * **config**: The configuration to apply, e.g. `QuantityConfig.from_file("quantity.yaml")`.
    """
    global context
    context = config.to_context()


ZERO = decimal.Decimal(0)

# Smallest and largest value of fixed width integer targets
INTEGER_BOUNDS = {
    "i8": (-2**7, 2**7 - 1),
    "i16": (-2**15, 2**15 - 1),
    "i32": (-2**31, 2**31 - 1),
    "i64": (-2**63, 2**63 - 1),
    "i128": (-2**127, 2**127 - 1),
    "isize": (-2**63, 2**63 - 1),
    "u8": (0, 2**8 - 1),
    "u16": (0, 2**16 - 1),
    "u32": (0, 2**32 - 1),
    "u64": (0, 2**64 - 1),
    "u128": (0, 2**128 - 1),
    "usize": (0, 2**64 - 1),
}


def from_literal(literal: str) -> decimal.Decimal:
    """Convert a float literal into a finite decimal or raise `DecimalParsingFailed`. Literals with
    more significant digits than the context precision are rejected instead of rounded."""
    exact = context.copy()
    exact.traps[decimal.Inexact] = True
    try:
        value = exact.create_decimal(literal)
    except ArithmeticError as e:
        raise DecimalParsingFailed(literal) from e
    if not value.is_finite():
        raise DecimalParsingFailed(literal)
    return value


def power(base, exponent: int) -> decimal.Decimal:
    """`base ** exponent`, exact for negative exponents of 1000 and 1024."""
    return context.power(decimal.Decimal(base), exponent)


def normalize(value: decimal.Decimal) -> decimal.Decimal:
    """Strip trailing zeros and turn -0 into 0."""
    if not value:
        return ZERO
    return value.normalize(context)


def round_half_away(value: decimal.Decimal, precision: int) -> decimal.Decimal:
    """Round to `precision` fractional digits, halfway values go away from zero: 6.5 -> 7, -6.5 -> -7."""
    if value.as_tuple().exponent >= -precision:
        return value
    return value.quantize(decimal.Decimal(1).scaleb(-precision, context=context), rounding=decimal.ROUND_HALF_UP, context=context)


def render(value: decimal.Decimal) -> str:
    """Plain (never scientific) representation without trailing zeros."""
    return format(normalize(value), 'f')


def to_int(value: decimal.Decimal, kind: str) -> Optional[int]:
    lower, upper = INTEGER_BOUNDS[kind]
    if value != value.to_integral_value(context=context):
        return None
    as_int = int(value)
    if not lower <= as_int <= upper:
        return None
    return as_int


def to_float(value: decimal.Decimal, kind: str) -> Optional[float]:
    as_float = float(value)
    if kind == "f32":
        # depending on the interpreter, out of range values are packed as inf or raise
        try:
            as_float, = struct.unpack('f', struct.pack('f', as_float))
        except OverflowError:
            return None
    if math.isinf(as_float):
        return None
    return as_float
