"""Length primitive. Internal representation is always inches."""

from __future__ import annotations

INCHES_PER_UNIT = {
    "mm": 1 / 25.4,
    "cm": 1 / 2.54,
    "m": 1 / 0.0254,
    "km": 1 / 0.0000254,
    "inch": 1.0,
    "feet": 12.0,
    "yard": 36.0,
    "mile": 63360.0,
}

VALID_UNITS = set(INCHES_PER_UNIT.keys())


class Length(float):
    """A distance in inches.

    Like the host's own Length this is a plain float underneath, so arithmetic
    between lengths and numbers yields floats in (square) inches.
    """

    @staticmethod
    def unit_ratio(unit: str) -> float:
        """One ``unit`` expressed in inches."""
        if unit not in INCHES_PER_UNIT:
            raise ValueError(f"Unknown unit '{unit}'. Valid: {sorted(VALID_UNITS)}")
        return INCHES_PER_UNIT[unit]

    @classmethod
    def from_unit(cls, value: float, unit: str) -> "Length":
        return cls(value * cls.unit_ratio(unit))

    def to_unit(self, unit: str) -> float:
        return float(self) / self.unit_ratio(unit)

    def __repr__(self) -> str:
        return f"Length({float(self)!r})"

    def __str__(self) -> str:
        """Format in the model's display units, e.g. ``3,0m``."""
        from sketchunits.host import get_host

        return get_host().format_length(self)
