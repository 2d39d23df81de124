from typing import Optional, Tuple

from ..types import Format, Scale

# Tokens are tried in this order and the first match wins. Two characters binary
# tokens must come before any single character token they start with.
SUFFIXES = (
    ("Ki", Format.BINARY_SI, Scale.KILO),
    ("Mi", Format.BINARY_SI, Scale.MEGA),
    ("Gi", Format.BINARY_SI, Scale.GIGA),
    ("Ti", Format.BINARY_SI, Scale.TERA),
    ("Pi", Format.BINARY_SI, Scale.PETA),
    ("Ei", Format.BINARY_SI, Scale.EXA),
    ("m", Format.DECIMAL_SI, Scale.MILLI),
    ("k", Format.DECIMAL_SI, Scale.KILO),
    ("M", Format.DECIMAL_SI, Scale.MEGA),
    ("G", Format.DECIMAL_SI, Scale.GIGA),
    ("T", Format.DECIMAL_SI, Scale.TERA),
    ("P", Format.DECIMAL_SI, Scale.PETA),
    ("E", Format.DECIMAL_SI, Scale.EXA),
)

NO_SUFFIX = (Format.DECIMAL_SI, Scale.ONE)

_BY_TOKEN = {token: (fmt, scale) for token, fmt, scale in SUFFIXES}
_BY_TOKEN[""] = NO_SUFFIX

_BY_FORMAT_SCALE = {(fmt, scale): token for token, (fmt, scale) in _BY_TOKEN.items()}
_BY_FORMAT_SCALE[(Format.BINARY_SI, Scale.ONE)] = ""


def match_suffix(text: str) -> Optional[str]:
    """Returns the suffix token found at the start of `text`, if any."""
    for token, _, _ in SUFFIXES:
        if text.startswith(token):
            return token
    return None


def lookup_suffix(token: str) -> Tuple[Format, Scale]:
    """Returns the `(Format, Scale)` pair represented by a suffix token. The empty
    token is a plain decimal number. Raise `KeyError` for unknown tokens."""
    return _BY_TOKEN[token]


def render_suffix(fmt: Format, scale: Scale) -> str:
    """Returns the suffix token for a format and scale. `(BINARY_SI, MILLI)` has no
    token and raise `KeyError`."""
    return _BY_FORMAT_SCALE[(fmt, scale)]
