"""Unit string parser: text -> Length, Area or Volume."""

from __future__ import annotations

from typing import Union

from sketchunits.core.locale.probe import decimal_separator
from sketchunits.core.parser.tokenizer import ParsedUnit, tokenize
from sketchunits.core.quantity.area import Area
from sketchunits.core.quantity.volume import Volume
from sketchunits.errors import InvalidUnitFormat, UnknownUnitSymbol
from sketchunits.host import Length, get_host
from sketchunits.logging import get_logger
from sketchunits.utils.units import UnitSymbol

logger = get_logger(__name__)

Quantity = Union[Length, Area, Volume]

UNIT_TOKENS = {
    "mm": UnitSymbol.MILLIMETER,
    "cm": UnitSymbol.CENTIMETER,
    "m": UnitSymbol.METER,
    "km": UnitSymbol.KILOMETER,
    '"': UnitSymbol.INCH,
    "in": UnitSymbol.INCH,
    "inch": UnitSymbol.INCH,
    "'": UnitSymbol.FOOT,
    "ft": UnitSymbol.FOOT,
    "feet": UnitSymbol.FOOT,
    "yd": UnitSymbol.YARD,
    "yard": UnitSymbol.YARD,
    "mi": UnitSymbol.MILE,
    "mile": UnitSymbol.MILE,
}


def parse_unit_string(text: str) -> Quantity:
    """Convert a string into a Length, Area or Volume.

    Model units set to centimeters with precision 0.000::

        parse_unit_string("123.345cm")      # Length, shown as 123,345cm
        parse_unit_string("123.345cm2")     # Area, 123,345 cm²
        parse_unit_string("123.345cm³")     # Volume, 123,345 cm ³
        parse_unit_string("123 456.345cm3") # Volume, 123456,345 cm ³

    A trailing 2 or 3 on the unit makes an Area or a Volume; without it the
    string is handed to the host's Length parser.
    """
    parsed = tokenize(text)
    logger.debug("unit_string_parsed", input=text, unit=parsed.unit, dimension=parsed.dimension)

    if parsed.dimension == 0:
        return _parse_length(parsed)
    if parsed.dimension == 2:
        return Area.from_unit(parsed.value, _unit_symbol(parsed))
    if parsed.dimension == 3:
        return Volume.from_unit(parsed.value, _unit_symbol(parsed))
    raise InvalidUnitFormat(f"{parsed.unit}{parsed.dimension}")


def _parse_length(parsed: ParsedUnit) -> Length:
    separator = decimal_separator()
    localized = parsed.text.replace(".", separator).replace(",", separator)
    return get_host().parse_length(localized)


def _unit_symbol(parsed: ParsedUnit) -> UnitSymbol:
    token = parsed.unit.lower()
    if token not in UNIT_TOKENS:
        raise UnknownUnitSymbol(parsed.unit)
    return UNIT_TOKENS[token]
