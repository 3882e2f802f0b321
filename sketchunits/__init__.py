"""Area and volume quantities with locale-aware parsing and formatting."""

from sketchunits.core.locale import decimal_separator, format_float, list_separator
from sketchunits.core.parser import parse_unit_string
from sketchunits.core.quantity import Area, Volume
from sketchunits.errors import (
    DivisionByZero,
    ExternalParseFailure,
    InvalidOperand,
    InvalidUnitFormat,
    SketchUnitsError,
    UnknownUnitSymbol,
    UnparsableUnitString,
)
from sketchunits.host import Length, get_host, set_host
from sketchunits.utils.units import UnitSymbol

__version__ = "0.1.0"

__all__ = [
    "Area",
    "DivisionByZero",
    "ExternalParseFailure",
    "InvalidOperand",
    "InvalidUnitFormat",
    "Length",
    "SketchUnitsError",
    "UnitSymbol",
    "UnknownUnitSymbol",
    "UnparsableUnitString",
    "Volume",
    "decimal_separator",
    "format_float",
    "get_host",
    "list_separator",
    "parse_unit_string",
    "set_host",
]
