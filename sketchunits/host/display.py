"""Model display settings as reported by the host."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class LengthFormat(IntEnum):
    DECIMAL = 0
    ARCHITECTURAL = 1
    ENGINEERING = 2
    FRACTIONAL = 3


class LengthUnit(IntEnum):
    INCHES = 0
    FEET = 1
    MILLIMETER = 2
    CENTIMETER = 3
    METER = 4

    @property
    def symbol(self) -> str:
        """Key of this unit in the length ratio table."""
        return _UNIT_SYMBOLS[self]

    @property
    def plural(self) -> str:
        """English plural name, as shown in the host's unit options."""
        return _UNIT_PLURALS[self]


_UNIT_SYMBOLS = {
    LengthUnit.INCHES: "inch",
    LengthUnit.FEET: "feet",
    LengthUnit.MILLIMETER: "mm",
    LengthUnit.CENTIMETER: "cm",
    LengthUnit.METER: "m",
}

_UNIT_PLURALS = {
    LengthUnit.INCHES: "Inches",
    LengthUnit.FEET: "Feet",
    LengthUnit.MILLIMETER: "Millimeters",
    LengthUnit.CENTIMETER: "Centimeters",
    LengthUnit.METER: "Meters",
}


class DisplayConfiguration(BaseModel):
    """Read-only snapshot of the model's length display options."""

    model_config = ConfigDict(frozen=True)

    length_format: LengthFormat = LengthFormat.DECIMAL
    length_unit: LengthUnit = LengthUnit.METER
    length_precision: int = Field(default=1, ge=0)
