"""Volume quantity, its dimensional arithmetic and display formatting."""

from __future__ import annotations

import math
import numbers
import re
from dataclasses import dataclass
from functools import singledispatch

from sketchunits.core.locale.formatter import format_float
from sketchunits.core.quantity.area import Area
from sketchunits.errors import DivisionByZero, InvalidOperand
from sketchunits.host import Length, LengthFormat, LengthUnit, get_host
from sketchunits.logging import get_logger
from sketchunits.utils.units import UnitSymbol, from_base, to_base

logger = get_logger(__name__)

EXPONENT = 3

CUBIC_MARKER = "³"

# Before SketchUp 2014 format_area(0) gave "0 Millimeters ²", since then "0 mm²".
_AREA_UNIT_RE = re.compile(r"^0 (\S+?)\s*²")


@dataclass(frozen=True, order=True, repr=False)
class Volume:
    """A volume stored in cubic inches.

    Model units set to meters with precision 0.0::

        Volume.from_m3(3) + Volume.from_cm3(2_000_000)   # 5 m³
        Volume.from_m3(27).cube_root()                   # Length of 3 m
        Volume.from_m3(27) / Area.from_m2(9)             # Length of 3 m
        Volume.from_m3(27) / Length.from_unit(9, "m")    # Area of 3 m²
    """

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, numbers.Real):
            raise InvalidOperand("Volume()", self.value)
        object.__setattr__(self, "value", float(self.value))

    # ── Unit constructors ──

    @classmethod
    def from_unit(cls, value: float, unit: str | UnitSymbol) -> Volume:
        return cls(to_base(value, unit, EXPONENT))

    @classmethod
    def from_mm3(cls, value: float) -> Volume:
        return cls.from_unit(value, UnitSymbol.MILLIMETER)

    @classmethod
    def from_cm3(cls, value: float) -> Volume:
        return cls.from_unit(value, UnitSymbol.CENTIMETER)

    @classmethod
    def from_m3(cls, value: float) -> Volume:
        return cls.from_unit(value, UnitSymbol.METER)

    @classmethod
    def from_km3(cls, value: float) -> Volume:
        return cls.from_unit(value, UnitSymbol.KILOMETER)

    @classmethod
    def from_inch3(cls, value: float) -> Volume:
        return cls.from_unit(value, UnitSymbol.INCH)

    @classmethod
    def from_feet3(cls, value: float) -> Volume:
        return cls.from_unit(value, UnitSymbol.FOOT)

    @classmethod
    def from_yard3(cls, value: float) -> Volume:
        return cls.from_unit(value, UnitSymbol.YARD)

    @classmethod
    def from_mile3(cls, value: float) -> Volume:
        return cls.from_unit(value, UnitSymbol.MILE)

    # ── Unit accessors ──

    def to_unit(self, unit: str | UnitSymbol) -> float:
        return from_base(self.value, unit, EXPONENT)

    def to_mm3(self) -> float:
        return self.to_unit(UnitSymbol.MILLIMETER)

    def to_cm3(self) -> float:
        return self.to_unit(UnitSymbol.CENTIMETER)

    def to_m3(self) -> float:
        return self.to_unit(UnitSymbol.METER)

    def to_km3(self) -> float:
        return self.to_unit(UnitSymbol.KILOMETER)

    def to_inch3(self) -> float:
        return self.to_unit(UnitSymbol.INCH)

    def to_feet3(self) -> float:
        return self.to_unit(UnitSymbol.FOOT)

    def to_yard3(self) -> float:
        return self.to_unit(UnitSymbol.YARD)

    def to_mile3(self) -> float:
        return self.to_unit(UnitSymbol.MILE)

    # ── Arithmetic ──

    def __add__(self, other: Volume) -> Volume:
        return _add(other, self)

    def __radd__(self, other: int) -> Volume:
        # sum() starts from the integer 0.
        if type(other) is int and other == 0:
            return self
        return _add(other, self)

    def __sub__(self, other: Volume) -> Volume:
        return _add(other, self, sign=-1.0)

    def __neg__(self) -> Volume:
        return Volume(-self.value)

    def __mul__(self, other: float) -> Volume:
        return _multiply(other, self)

    __rmul__ = __mul__

    def __truediv__(self, other):
        """Volume / number is a Volume, / Length an Area, / Area a Length."""
        return _divide(other, self)

    def cube_root(self) -> Length:
        """The side of a cube with this volume. Negative volumes give negative lengths."""
        return Length(math.copysign(abs(self.value) ** (1.0 / 3.0), self.value))

    # ── Conversions ──

    def __float__(self) -> float:
        return self.value

    def __int__(self) -> int:
        return int(self.value)

    def __repr__(self) -> str:
        return str(self)

    def __str__(self) -> str:
        """Format the volume the way the host formats areas.

        The host has no volume formatter and ignores the length display
        format for areas, so the unit is picked from the model's units
        options and the unit name is taken from the host's own area output.
        """
        options = get_host().display_options()
        fmt = options.length_format

        if fmt == LengthFormat.DECIMAL:
            unit = options.length_unit
        elif fmt == LengthFormat.ARCHITECTURAL:
            # Less than a cubic foot is shown in inches.
            unit = LengthUnit.FEET if self.to_feet3() >= 1.0 else LengthUnit.INCHES
        elif fmt == LengthFormat.ENGINEERING:
            unit = LengthUnit.FEET
        else:
            unit = LengthUnit.INCHES

        value = self.to_unit(unit.symbol)
        number = format_float(value, trim=True, precision=options.length_precision)
        return f"{number} {_area_unit_name(unit)} {CUBIC_MARKER}"


def _area_unit_name(fallback: LengthUnit) -> str:
    """Unit name as the host writes it for areas, which may be translated."""
    sample = get_host().format_area(0)
    m = _AREA_UNIT_RE.match(sample)
    if not m:
        logger.warning("area_unit_not_found", sample=sample, fallback=fallback.plural)
        return fallback.plural
    return m.group(1)


# Operand dispatch, keyed on the type of the right-hand operand.

@singledispatch
def _add(other, volume: Volume, sign: float = 1.0) -> Volume:
    raise InvalidOperand("Volume + / -", other)


@_add.register(Volume)
def _add_volume(other: Volume, volume: Volume, sign: float = 1.0) -> Volume:
    return Volume(volume.value + sign * other.value)


@singledispatch
def _multiply(other, volume: Volume) -> Volume:
    raise InvalidOperand("Volume *", other)


@_multiply.register(numbers.Real)
def _multiply_number(other: float, volume: Volume) -> Volume:
    return Volume(volume.value * other)


@_multiply.register(Length)
def _multiply_length(other: Length, volume: Volume) -> Volume:
    raise InvalidOperand("Volume *", other)


@singledispatch
def _divide(other, volume: Volume):
    raise InvalidOperand("Volume /", other)


@_divide.register(numbers.Real)
def _divide_number(other: float, volume: Volume) -> Volume:
    if other == 0:
        raise DivisionByZero(volume)
    return Volume(volume.value / other)


@_divide.register(Length)
def _divide_length(other: Length, volume: Volume) -> Area:
    if other == 0:
        raise DivisionByZero(volume)
    return Area(volume.value / float(other))


@_divide.register(Area)
def _divide_area(other: Area, volume: Volume) -> Length:
    if other.value == 0:
        raise DivisionByZero(volume)
    return Length(volume.value / other.value)
