import decimal
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Union

import yaml

from .core.exceptions import ConfigError

PRECISION_ENV = "KUBE_QUANTITY_PRECISION"
DEFAULT_PRECISION = 64

TRAPS = [decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow]


@dataclass(frozen=True)
class QuantityConfig:
    """Settings of the decimal arithmetic used for quantities.

    **Parameters**

    * **precision**: Number of significant digits kept by every operation. The default is large enough
      to convert values between binary and decimal suffixes up to `Ei` without rounding.
    """
    precision: int = DEFAULT_PRECISION

    def __post_init__(self):
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ConfigError(f"precision must be an integer, got {self.precision!r}")
        if self.precision <= 0:
            raise ConfigError(f"precision must be positive, got {self.precision}")

    @classmethod
    def from_dict(cls, conf: Dict) -> 'QuantityConfig':
        """Creates a configuration from a dictionary. Missing keys keep their default value.

        **Parameters**

        * **conf**: Configuration structure, currently only `precision` is recognized.
        """
        unknown = set(conf) - {'precision'}
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        return cls(**conf)

    @classmethod
    def from_env(cls) -> 'QuantityConfig':
        """Creates a configuration reading the environment variable `KUBE_QUANTITY_PRECISION`.
        Defaults are used when the variable is not set.
        """
        value = os.environ.get(PRECISION_ENV)
        if value is None:
            return cls()
        try:
            precision = int(value)
        except ValueError:
            raise ConfigError(f"{PRECISION_ENV} must be an integer, got '{value}'") from None
        return cls(precision=precision)

    @classmethod
    def from_file(cls, fname: Union[Path, str]) -> 'QuantityConfig':
        """Creates a configuration from a YAML file.

        **Parameters**

        * **fname**: Path of the file to load.
        """
        filepath = Path(fname).expanduser()
        if not filepath.is_file():
            raise ConfigError(f"Configuration file {fname} not found")
        with filepath.open() as f:
            conf = yaml.safe_load(f.read())
        if conf is None:
            return cls()
        if not isinstance(conf, dict):
            raise ConfigError(f"Configuration file {fname} must contain a mapping")
        return cls.from_dict(conf)

    def to_context(self) -> decimal.Context:
        """Returns the `decimal.Context` used for quantity arithmetic."""
        return decimal.Context(prec=self.precision, rounding=decimal.ROUND_HALF_EVEN, traps=TRAPS)
