import decimal
import logging

import pytest

from kube_quantity import (
    ParsedQuantity, Scale, Format, ParseQuantityError, EmptyString, ParsingFailed, DecimalParsingFailed,
    parse_quantity_string,
)
from kube_quantity.core.parser import parse_quantity_parts


def test_binary_si():
    quantity = parse_quantity_string("1.25Ki")
    assert quantity.value == decimal.Decimal("1.25")
    assert quantity.scale is Scale.KILO
    assert quantity.format is Format.BINARY_SI
    assert str(quantity) == "1.25Ki"


def test_scientific_notation():
    quantity = parse_quantity_string("1.25e3")
    assert quantity.value == decimal.Decimal(1250)
    assert quantity.scale is Scale.ONE
    # the exponent is part of the number, the quantity is rendered in plain decimal notation
    assert quantity.format is Format.DECIMAL_SI
    assert str(quantity) == "1250"


def test_decimal_notation():
    quantity = parse_quantity_string("1250000")
    assert quantity.value == decimal.Decimal(1250000)
    assert quantity.scale is Scale.ONE
    assert quantity.format is Format.DECIMAL_SI
    assert str(quantity) == "1250000"


def test_zero():
    quantity = parse_quantity_string("0")
    assert quantity.value == 0
    assert quantity.scale is Scale.ONE
    assert quantity.format is Format.DECIMAL_SI
    assert str(quantity) == "0"


def test_milli():
    quantity = parse_quantity_string("100m")
    assert quantity.value == decimal.Decimal(100)
    assert quantity.scale is Scale.MILLI
    assert quantity.format is Format.DECIMAL_SI
    assert str(quantity) == "100m"


def test_exa_suffix_is_not_an_exponent():
    quantity = parse_quantity_string("1E")
    assert quantity.value == 1
    assert quantity.scale is Scale.EXA
    assert quantity.format is Format.DECIMAL_SI

    quantity = parse_quantity_string("1Ei")
    assert quantity.scale is Scale.EXA
    assert quantity.format is Format.BINARY_SI

    quantity = parse_quantity_string("1E3")
    assert quantity.value == 1000
    assert quantity.scale is Scale.ONE


def test_sign():
    assert parse_quantity_string("+1.5Mi").value == decimal.Decimal("1.5")
    assert parse_quantity_string("-1.5").value == decimal.Decimal("-1.5")
    assert str(parse_quantity_string("-2.5k")) == "-2.5k"
    assert parse_quantity_string(".5k").value == decimal.Decimal("0.5")
    # the number itself can carry a sign as well
    assert parse_quantity_string("-+2").value == -2
    assert parse_quantity_string("--2").value == 2


def test_missing_number_is_zero():
    quantity = parse_quantity_string("-Ki")
    assert quantity.value == 0
    assert quantity.scale is Scale.KILO
    assert quantity.format is Format.BINARY_SI
    assert str(quantity) == "0Ki"

    assert str(parse_quantity_string("M")) == "0M"
    assert str(parse_quantity_string("-")) == "0"


def test_parts():
    parts = parse_quantity_parts("3.5Gi")
    assert parts.value == decimal.Decimal("3.5")
    assert parts.format is Format.BINARY_SI
    assert parts.scale is Scale.GIGA


@pytest.mark.parametrize("quantity", [
    "1.25Ki", "100m", "0", "1250000", "3Mi", "1.5G", "-2.5k", "7E", "7Ei", "12T", "0.5P", "0.001",
])
def test_round_trip(quantity):
    assert str(ParsedQuantity.parse(quantity)) == quantity


def test_empty_string():
    with pytest.raises(EmptyString):
        parse_quantity_string("")


@pytest.mark.parametrize("quantity,remainder,position", [
    ("1.5.0", ".0", 3),
    ("1.25.123K", ".123K", 4),
    ("1kb", "b", 2),
    ("1GGi", "Gi", 2),
    ("1Zi", "Zi", 1),
    ("1 Gi", " Gi", 1),
    (" 1", " 1", 0),
    ("1 ", " ", 1),
    ("abc", "abc", 0),
    ("e3", "e3", 0),
])
def test_parsing_failed(quantity, remainder, position):
    with pytest.raises(ParsingFailed) as exc_info:
        parse_quantity_string(quantity)
    assert exc_info.value.remainder == remainder
    assert exc_info.value.position == position


@pytest.mark.parametrize("quantity", ["nan", "NaN", "inf", "-Infinity", "nanKi", "9e9999999"])
def test_decimal_parsing_failed(quantity):
    with pytest.raises(DecimalParsingFailed):
        parse_quantity_string(quantity)


def test_errors_are_value_errors():
    for quantity in ("", "1.2.3", "nan"):
        with pytest.raises(ParseQuantityError):
            parse_quantity_string(quantity)
        with pytest.raises(ValueError):
            parse_quantity_string(quantity)


def test_error_messages():
    assert str(EmptyString()) == "empty string"
    assert str(ParsingFailed("b", 2)) == "quantity parsing failed at position 2: 'b'"
    assert str(DecimalParsingFailed("nan")) == "decimal parsing failed: 'nan'"


def test_not_a_string():
    with pytest.raises(TypeError):
        ParsedQuantity.parse(None)
    with pytest.raises(TypeError):
        ParsedQuantity.parse(10)


def test_failure_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="kube_quantity.core.parser"):
        with pytest.raises(ParsingFailed):
            parse_quantity_string("1kb")
    assert "Invalid quantity '1kb'" in caplog.text


@pytest.mark.parametrize("quantity", ["１Ki", "١٢M", "१m", "1０"])
def test_non_ascii_digits(quantity):
    with pytest.raises(ParsingFailed):
        parse_quantity_string(quantity)


def test_too_many_digits():
    # more significant digits than the decimal context keeps
    with pytest.raises(DecimalParsingFailed):
        parse_quantity_string("1." + "0" * 68 + "1")
    with pytest.raises(DecimalParsingFailed):
        parse_quantity_string("1" * 70 + "Ki")

    quantity = parse_quantity_string("1." + "0" * 62 + "1")
    assert str(quantity) == "1." + "0" * 62 + "1"
