"""Unit ratio utilities. Internal representation is always inches, squared or cubed."""

from __future__ import annotations

from enum import Enum

from sketchunits.errors import UnknownUnitSymbol
from sketchunits.host.length import Length


class UnitSymbol(str, Enum):
    MILLIMETER = "mm"
    CENTIMETER = "cm"
    METER = "m"
    KILOMETER = "km"
    INCH = "inch"
    FOOT = "feet"
    YARD = "yard"
    MILE = "mile"


VALID_UNITS = {s.value for s in UnitSymbol}

VALID_EXPONENTS = (1, 2, 3)


def unit_symbol(unit: str | UnitSymbol) -> UnitSymbol:
    """Resolve a symbol or its string value to a UnitSymbol."""
    try:
        return UnitSymbol(unit)
    except ValueError:
        raise UnknownUnitSymbol(str(unit)) from None


def ratio(unit: str | UnitSymbol, exponent: int) -> float:
    """One ``unit`` raised to ``exponent``, expressed in base units."""
    if exponent not in VALID_EXPONENTS:
        raise ValueError(f"Exponent must be one of {VALID_EXPONENTS}, got {exponent}")
    return Length.unit_ratio(unit_symbol(unit).value) ** exponent


def to_base(value: float, unit: str | UnitSymbol, exponent: int) -> float:
    """Convert a value from the given unit to base units."""
    return value * ratio(unit, exponent)


def from_base(value: float, unit: str | UnitSymbol, exponent: int) -> float:
    """Convert a value from base units to the given unit."""
    return value / ratio(unit, exponent)
