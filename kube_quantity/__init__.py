from .types import Scale, Format
from .core.quantity import ParsedQuantity, parse_quantity_string, normalize, normalize_formats, normalize_scales
from .core.exceptions import ParseQuantityError, EmptyString, ParsingFailed, DecimalParsingFailed, ConfigError
from .config import QuantityConfig
from .core.decimals import configure

__all__ = [
    "Scale",
    "Format",
    "ParsedQuantity",
    "parse_quantity_string",
    "normalize",
    "normalize_formats",
    "normalize_scales",
    "ParseQuantityError",
    "EmptyString",
    "ParsingFailed",
    "DecimalParsingFailed",
    "ConfigError",
    "QuantityConfig",
    "configure",
]
