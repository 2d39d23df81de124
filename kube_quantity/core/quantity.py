import decimal
from typing import Optional, Tuple, Union

from ..types import Format, Scale
from . import decimals
from .parser import parse_quantity_parts
from .suffixes import render_suffix

Number = Union[int, decimal.Decimal]


def _to_decimal(value) -> decimal.Decimal:
    if isinstance(value, decimal.Decimal):
        return value
    if isinstance(value, float):
        # shortest representation, 0.1 -> Decimal('0.1')
        return decimals.from_literal(repr(value))
    if isinstance(value, (int, str)):
        return decimals.from_literal(str(value))
    raise TypeError(f"Unsupported value type: {value.__class__.__name__}")


class ParsedQuantity:
    """A Kubernetes quantity, represented as `value * base ** scale` where `base` is 1024 for
    binary suffixes (`Ki`, `Mi`, ...) and 1000 for decimal suffixes (`m`, `k`, `M`, ...).

    ```python
    >>> q = ParsedQuantity.parse("1k") + ParsedQuantity.parse("1Ki")
    >>> q.to_string_with_precision(3)
    '2.024k'
    >>> ParsedQuantity.parse("1Ki") == ParsedQuantity.parse("1024")
    True
    ```

    Binary operators bring the right operand to the format of the left one, and both operands
    to the smaller of the two scales. The result of `a + b` is therefore always rendered in the
    format of `a`.

    **Parameters**

    * **value** `Decimal` - The numeric value. `int`, `str` and `float` are converted.
    * **scale** `Scale` - *(optional)* Magnitude tier. Default `Scale.ONE`.
    * **format** `Format` - *(optional)* Suffix convention. Default `Format.BINARY_SI`.
    """
    value: decimal.Decimal
    scale: Scale
    format: Format

    def __init__(self, value=0, scale: Scale = None, format: Format = None):
        self.value = _to_decimal(value)
        self.scale = Scale.default() if scale is None else Scale(scale)
        self.format = Format.default() if format is None else Format(format)

    @classmethod
    def parse(cls, quantity: str) -> 'ParsedQuantity':
        """Parse a quantity string such as `"1.5Gi"` or `"500m"`.

        Raise `EmptyString`, `ParsingFailed` or `DecimalParsingFailed`, all subclasses of
        `ParseQuantityError` (itself a `ValueError`).
        """
        if not isinstance(quantity, str):
            raise TypeError(f"quantity must be a string, not {quantity.__class__.__name__}")
        value, fmt, scale = parse_quantity_parts(quantity)
        return cls(value, scale, fmt)

    from_quantity = parse

    def to_quantity(self) -> str:
        """Returns the quantity as a string that can be stored in a Kubernetes object."""
        return self.to_string()

    def copy(self) -> 'ParsedQuantity':
        return ParsedQuantity(self.value, self.scale, self.format)

    @property
    def magnitude(self) -> decimal.Decimal:
        """The quantity as a bare decimal, i.e. `1Ki` is `1024`."""
        return decimals.context.multiply(self.value, decimals.power(self.format.base, self.scale.exponent))

    # - rendering -

    def _suffixed_value(self) -> Tuple[decimal.Decimal, str]:
        if self.format is Format.BINARY_SI and self.scale is Scale.MILLI:
            # there is no binary milli suffix, use the equivalent decimal milli value
            _, converted = normalize_formats(ParsedQuantity(0, Scale.MILLI, Format.DECIMAL_SI), self)
            return converted.value, render_suffix(Format.DECIMAL_SI, Scale.MILLI)
        return self.value, render_suffix(self.format, self.scale)

    def to_string(self) -> str:
        value, suffix = self._suffixed_value()
        return f"{decimals.render(value)}{suffix}"

    def to_string_with_precision(self, precision: int) -> str:
        """Returns the quantity as a string with at most `precision` fractional digits. Trailing zeros
        are stripped and -0 is rendered as 0.

        When a number is halfway between two others, it is rounded away from zero,
        e.g. 6.4 -> 6, 6.5 -> 7, -6.5 -> -7.

        ```python
        >>> q = ParsedQuantity.parse("1k") + ParsedQuantity.parse("1Ki")
        >>> q.to_string_with_precision(2)
        '2.02k'
        >>> q.to_string_with_precision(0)
        '2k'
        ```
        """
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise ValueError(f"precision must be a non-negative integer, got {precision!r}")
        value, suffix = self._suffixed_value()
        return f"{decimals.render(decimals.round_half_away(value, precision))}{suffix}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"ParsedQuantity(value={self.value!r}, scale=Scale.{self.scale.name}, format=Format.{self.format.name})"

    # - arithmetic -

    def __add__(self, other: 'ParsedQuantity') -> 'ParsedQuantity':
        if not isinstance(other, ParsedQuantity):
            return NotImplemented
        lhs, rhs = normalize(self, other)
        value = decimals.normalize(decimals.context.add(lhs.value, rhs.value))
        return ParsedQuantity(value, lhs.scale, lhs.format)

    def __sub__(self, other: 'ParsedQuantity') -> 'ParsedQuantity':
        if not isinstance(other, ParsedQuantity):
            return NotImplemented
        lhs, rhs = normalize(self, other)
        value = decimals.normalize(decimals.context.subtract(lhs.value, rhs.value))
        return ParsedQuantity(value, lhs.scale, lhs.format)

    def __neg__(self) -> 'ParsedQuantity':
        return ParsedQuantity(self.value.copy_negate(), self.scale, self.format)

    def __iadd__(self, other: 'ParsedQuantity') -> 'ParsedQuantity':
        if not isinstance(other, ParsedQuantity):
            return NotImplemented
        lhs, rhs = normalize(self, other)
        self.value = decimals.context.add(lhs.value, rhs.value)
        self.scale = lhs.scale
        return self

    def __isub__(self, other: 'ParsedQuantity') -> 'ParsedQuantity':
        if not isinstance(other, ParsedQuantity):
            return NotImplemented
        lhs, rhs = normalize(self, other)
        self.value = decimals.context.subtract(lhs.value, rhs.value)
        self.scale = lhs.scale
        return self

    def __mul__(self, other: Number) -> 'ParsedQuantity':
        if isinstance(other, bool) or not isinstance(other, (int, decimal.Decimal)):
            return NotImplemented
        return ParsedQuantity(decimals.context.multiply(self.value, other), self.scale, self.format)

    __rmul__ = __mul__

    def __truediv__(self, other: Number) -> 'ParsedQuantity':
        """Divide the value by a scalar. Raise `decimal.DivisionByZero` when `other` is zero."""
        if isinstance(other, bool) or not isinstance(other, (int, decimal.Decimal)):
            return NotImplemented
        return ParsedQuantity(decimals.context.divide(self.value, other), self.scale, self.format)

    # - comparison -

    def _compare(self, other: 'ParsedQuantity') -> int:
        lhs, rhs = normalize(self, other)
        return int(decimals.context.compare(lhs.value, rhs.value))

    def __eq__(self, other) -> bool:
        if not isinstance(other, ParsedQuantity):
            return NotImplemented
        return self._compare(other) == 0

    def __lt__(self, other) -> bool:
        if not isinstance(other, ParsedQuantity):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, ParsedQuantity):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, ParsedQuantity):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, ParsedQuantity):
            return NotImplemented
        return self._compare(other) >= 0

    def __hash__(self) -> int:
        return hash(self.magnitude)

    # - conversion to bytes -

    def _to_bytes(self, kind: str):
        if kind in ("i8", "u8") and self.scale is not Scale.ONE:
            return None
        try:
            magnitude = self.magnitude
        except ArithmeticError:
            # magnitude beyond the decimal context limits
            return None
        if kind in ("f32", "f64"):
            return decimals.to_float(magnitude, kind)
        return decimals.to_int(magnitude, kind)

    def to_bytes_f64(self) -> Optional[float]:
        """Returns the value of the quantity as a float.

        ```python
        >>> ParsedQuantity.parse("1Ki").to_bytes_f64()
        1024.0
        ```
        """
        return self._to_bytes("f64")

    def to_bytes_f32(self) -> Optional[float]:
        """Returns the value of the quantity rounded to single precision."""
        return self._to_bytes("f32")

    def to_bytes_i128(self) -> Optional[int]:
        return self._to_bytes("i128")

    def to_bytes_i64(self) -> Optional[int]:
        """Returns the value of the quantity as an integer in the signed 64 bit range.
        `None` is returned when the value overflows or has a fractional part."""
        return self._to_bytes("i64")

    def to_bytes_i32(self) -> Optional[int]:
        return self._to_bytes("i32")

    def to_bytes_i16(self) -> Optional[int]:
        return self._to_bytes("i16")

    def to_bytes_i8(self) -> Optional[int]:
        """Returns the value of the quantity as an 8 bit integer. This only works for quantities
        without suffix."""
        return self._to_bytes("i8")

    def to_bytes_isize(self) -> Optional[int]:
        return self._to_bytes("isize")

    def to_bytes_u128(self) -> Optional[int]:
        return self._to_bytes("u128")

    def to_bytes_u64(self) -> Optional[int]:
        return self._to_bytes("u64")

    def to_bytes_u32(self) -> Optional[int]:
        return self._to_bytes("u32")

    def to_bytes_u16(self) -> Optional[int]:
        return self._to_bytes("u16")

    def to_bytes_u8(self) -> Optional[int]:
        """Returns the value of the quantity as an unsigned 8 bit integer. This only works for
        quantities without suffix."""
        return self._to_bytes("u8")

    def to_bytes_usize(self) -> Optional[int]:
        return self._to_bytes("usize")


def normalize_formats(lhs: ParsedQuantity, rhs: ParsedQuantity) -> Tuple[ParsedQuantity, ParsedQuantity]:
    """Returns copies of both quantities where `rhs` uses the format of `lhs`. `lhs` is never changed."""
    if lhs.format is rhs.format:
        return lhs.copy(), rhs.copy()
    exponent = rhs.scale.exponent
    factor = decimals.context.divide(
        decimals.power(rhs.format.base, exponent), decimals.power(lhs.format.base, exponent)
    )
    value = decimals.context.multiply(rhs.value, factor)
    return lhs.copy(), ParsedQuantity(value, rhs.scale, lhs.format)


def _rescale(quantity: ParsedQuantity, scale: Scale) -> ParsedQuantity:
    multiplier = decimals.power(quantity.format.base, quantity.scale.exponent - scale.exponent)
    return ParsedQuantity(decimals.context.multiply(quantity.value, multiplier), scale, quantity.format)


def normalize_scales(lhs: ParsedQuantity, rhs: ParsedQuantity) -> Tuple[ParsedQuantity, ParsedQuantity]:
    """Returns copies of both quantities using the smaller of the two scales."""
    if lhs.scale > rhs.scale:
        return _rescale(lhs, rhs.scale), rhs.copy()
    if lhs.scale < rhs.scale:
        return lhs.copy(), _rescale(rhs, lhs.scale)
    return lhs.copy(), rhs.copy()


def normalize(lhs: ParsedQuantity, rhs: ParsedQuantity) -> Tuple[ParsedQuantity, ParsedQuantity]:
    """Bring `rhs` to the format of `lhs`, then both to a common scale. Not symmetric."""
    return normalize_scales(*normalize_formats(lhs, rhs))


def parse_quantity_string(quantity: str) -> ParsedQuantity:
    """Parse a quantity string, see `ParsedQuantity.parse`."""
    return ParsedQuantity.parse(quantity)
