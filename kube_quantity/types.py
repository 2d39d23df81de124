import enum


class Scale(enum.IntEnum):
    """Base-10 magnitude tier of a quantity. The member value is the exponent
    applied to the base of the quantity `Format` (1000 or 1024)."""
    MILLI = -1
    ONE = 0
    KILO = 1
    MEGA = 2
    GIGA = 3
    TERA = 4
    PETA = 5
    EXA = 6

    @property
    def exponent(self) -> int:
        return int(self)

    @classmethod
    def from_exponent(cls, exponent: int) -> 'Scale':
        try:
            return cls(exponent)
        except ValueError:
            raise ValueError(f"No scale for exponent {exponent}") from None

    @classmethod
    def default(cls) -> 'Scale':
        return cls.ONE


class Format(enum.Enum):
    BINARY_SI = 1024    # e.g. 12Mi = 12 * 1024^2
    DECIMAL_SI = 1000   # e.g. 12M = 12 * 1000^2

    @property
    def base(self) -> int:
        return self.value

    @classmethod
    def default(cls) -> 'Format':
        return cls.BINARY_SI
