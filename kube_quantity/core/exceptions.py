"""
Exceptions.
"""


class ConfigError(Exception):
    """
    Configuration specific errors.
    """

    pass


class ParseQuantityError(ValueError):
    """
    A string could not be parsed as a quantity.
    """


class EmptyString(ParseQuantityError):
    """
    The quantity string is empty.
    """

    def __str__(self) -> str:
        return "empty string"


class ParsingFailed(ParseQuantityError):
    """
    The quantity string does not follow the quantity grammar.
    """

    def __init__(self, remainder: str, position: int) -> None:
        super().__init__(remainder, position)
        self.remainder = remainder
        self.position = position

    def __str__(self) -> str:
        return f"quantity parsing failed at position {self.position}: '{self.remainder}'"


class DecimalParsingFailed(ParseQuantityError):
    """
    The numeric part of the quantity is not a finite decimal number.
    """

    def __init__(self, literal: str) -> None:
        super().__init__(literal)
        self.literal = literal

    def __str__(self) -> str:
        return f"decimal parsing failed: '{self.literal}'"
