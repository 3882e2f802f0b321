"""Area quantity and its dimensional arithmetic."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from functools import singledispatch

from sketchunits.errors import DivisionByZero, InvalidOperand
from sketchunits.host import Length, get_host
from sketchunits.utils.units import UnitSymbol, from_base, to_base

EXPONENT = 2


@dataclass(frozen=True, order=True, repr=False)
class Area:
    """An area stored in square inches.

    Model units set to meters with precision 0.0::

        Area.from_m2(30) + Area.from_cm2(2000)   # 30.2 m²
        Area.from_m2(9).square_root()            # Length of 3 m
        Area.from_m2(9) * Length.from_unit(3, "m")   # Volume of 27 m³
        Area.from_m2(9) / Length.from_unit(2, "m")   # Length of 4.5 m
    """

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, numbers.Real):
            raise InvalidOperand("Area()", self.value)
        object.__setattr__(self, "value", float(self.value))

    # ── Unit constructors ──

    @classmethod
    def from_unit(cls, value: float, unit: str | UnitSymbol) -> Area:
        return cls(to_base(value, unit, EXPONENT))

    @classmethod
    def from_mm2(cls, value: float) -> Area:
        return cls.from_unit(value, UnitSymbol.MILLIMETER)

    @classmethod
    def from_cm2(cls, value: float) -> Area:
        return cls.from_unit(value, UnitSymbol.CENTIMETER)

    @classmethod
    def from_m2(cls, value: float) -> Area:
        return cls.from_unit(value, UnitSymbol.METER)

    @classmethod
    def from_km2(cls, value: float) -> Area:
        return cls.from_unit(value, UnitSymbol.KILOMETER)

    @classmethod
    def from_inch2(cls, value: float) -> Area:
        return cls.from_unit(value, UnitSymbol.INCH)

    @classmethod
    def from_feet2(cls, value: float) -> Area:
        return cls.from_unit(value, UnitSymbol.FOOT)

    @classmethod
    def from_yard2(cls, value: float) -> Area:
        return cls.from_unit(value, UnitSymbol.YARD)

    @classmethod
    def from_mile2(cls, value: float) -> Area:
        return cls.from_unit(value, UnitSymbol.MILE)

    # ── Unit accessors ──

    def to_unit(self, unit: str | UnitSymbol) -> float:
        return from_base(self.value, unit, EXPONENT)

    def to_mm2(self) -> float:
        return self.to_unit(UnitSymbol.MILLIMETER)

    def to_cm2(self) -> float:
        return self.to_unit(UnitSymbol.CENTIMETER)

    def to_m2(self) -> float:
        return self.to_unit(UnitSymbol.METER)

    def to_km2(self) -> float:
        return self.to_unit(UnitSymbol.KILOMETER)

    def to_inch2(self) -> float:
        return self.to_unit(UnitSymbol.INCH)

    def to_feet2(self) -> float:
        return self.to_unit(UnitSymbol.FOOT)

    def to_yard2(self) -> float:
        return self.to_unit(UnitSymbol.YARD)

    def to_mile2(self) -> float:
        return self.to_unit(UnitSymbol.MILE)

    # ── Arithmetic ──

    def __add__(self, other: Area) -> Area:
        return _add(other, self)

    def __radd__(self, other: int) -> Area:
        # sum() starts from the integer 0.
        if type(other) is int and other == 0:
            return self
        return _add(other, self)

    def __sub__(self, other: Area) -> Area:
        return _add(other, self, sign=-1.0)

    def __neg__(self) -> Area:
        return Area(-self.value)

    def __mul__(self, other):
        """Area * number is an Area; Area * Length is a Volume."""
        return _multiply(other, self)

    __rmul__ = __mul__

    def __truediv__(self, other):
        """Area / number is an Area; Area / Length is a Length."""
        return _divide(other, self)

    def square_root(self) -> Length:
        """The side of a square with this area."""
        if self.value < 0:
            raise ValueError(f"Cannot take the square root of a negative area ({self.value} in²)")
        return Length(math.sqrt(self.value))

    # ── Conversions ──

    def __float__(self) -> float:
        return self.value

    def __int__(self) -> int:
        return int(self.value)

    def __repr__(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return get_host().format_area(self.value)


# Operand dispatch, keyed on the type of the right-hand operand.

@singledispatch
def _add(other, area: Area, sign: float = 1.0) -> Area:
    raise InvalidOperand("Area + / -", other)


@_add.register(Area)
def _add_area(other: Area, area: Area, sign: float = 1.0) -> Area:
    return Area(area.value + sign * other.value)


@singledispatch
def _multiply(other, area: Area):
    raise InvalidOperand("Area *", other)


@_multiply.register(numbers.Real)
def _multiply_number(other: float, area: Area) -> Area:
    return Area(area.value * other)


@_multiply.register(Length)
def _multiply_length(other: Length, area: Area):
    from sketchunits.core.quantity.volume import Volume

    return Volume(area.value * float(other))


@singledispatch
def _divide(other, area: Area):
    raise InvalidOperand("Area /", other)


@_divide.register(numbers.Real)
def _divide_number(other: float, area: Area) -> Area:
    if other == 0:
        raise DivisionByZero(area)
    return Area(area.value / other)


@_divide.register(Length)
def _divide_length(other: Length, area: Area) -> Length:
    if other == 0:
        raise DivisionByZero(area)
    return Length(area.value / float(other))
