"""Reference host: a small stand-in for the modelling application.

It mimics the pieces of SketchUp the quantity layer talks to: the locale
dependent Length parser, length and area formatting, and the model's units
options. Real integrations install their own host with ``set_host``.
"""

from __future__ import annotations

import re
from typing import Literal

from sketchunits.config import Settings
from sketchunits.errors import ExternalParseFailure
from sketchunits.host.display import DisplayConfiguration, LengthFormat, LengthUnit
from sketchunits.host.length import Length

# Unit tokens understood by parse_length
LENGTH_TOKENS = {
    "mm": "mm",
    "cm": "cm",
    "m": "m",
    "km": "km",
    '"': "inch",
    "in": "inch",
    "inch": "inch",
    "'": "feet",
    "ft": "feet",
    "feet": "feet",
    "yd": "yard",
    "yard": "yard",
    "mi": "mile",
    "mile": "mile",
}

_LENGTH_SUFFIX = {
    LengthUnit.INCHES: '"',
    LengthUnit.FEET: "'",
    LengthUnit.MILLIMETER: "mm",
    LengthUnit.CENTIMETER: "cm",
    LengthUnit.METER: "m",
}

_AREA_ABBREVIATION = {
    LengthUnit.INCHES: "in",
    LengthUnit.FEET: "ft",
    LengthUnit.MILLIMETER: "mm",
    LengthUnit.CENTIMETER: "cm",
    LengthUnit.METER: "m",
}


class ReferenceHost:
    """Host implementation driven by a decimal separator and display options."""

    def __init__(
        self,
        decimal_separator: str = ".",
        display: DisplayConfiguration | None = None,
        area_labels: Literal["abbreviated", "legacy"] = "abbreviated",
    ):
        if decimal_separator not in (".", ","):
            raise ValueError(f"Unsupported decimal separator {decimal_separator!r}")
        self.decimal_separator = decimal_separator
        self.display = display or DisplayConfiguration()
        self.area_labels = area_labels
        self._length_re = re.compile(
            rf"^([-+]?[0-9]+(?:{re.escape(decimal_separator)}[0-9]*)?)\s*([a-z'\"]*)$",
            re.IGNORECASE,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "ReferenceHost":
        display = DisplayConfiguration(
            length_format=LengthFormat(settings.length_format),
            length_unit=LengthUnit(settings.length_unit),
            length_precision=settings.length_precision,
        )
        return cls(
            decimal_separator=settings.decimal_separator,
            display=display,
            area_labels=settings.area_labels,
        )

    def display_options(self) -> DisplayConfiguration:
        return self.display

    def parse_length(self, text: str) -> Length:
        """Parse ``text`` the way the host's String#to_l does.

        Only the host's own decimal separator is accepted. A bare number is
        read in the model's display unit.
        """
        m = self._length_re.match(text.strip())
        if not m:
            raise ExternalParseFailure(text)
        number, token = m.group(1), m.group(2).lower()
        if token:
            if token not in LENGTH_TOKENS:
                raise ExternalParseFailure(text, f"unknown unit '{token}'")
            unit = LENGTH_TOKENS[token]
        else:
            unit = self.display.length_unit.symbol
        value = float(number.replace(self.decimal_separator, "."))
        return Length.from_unit(value, unit)

    def format_length(self, length: float) -> str:
        unit = self.display.length_unit
        value = Length(length).to_unit(unit.symbol)
        number = self._format_number(value, trim=False)
        return f"{number}{_LENGTH_SUFFIX[unit]}"

    def format_area(self, value: float) -> str:
        """Render square inches in the model's area unit, e.g. ``12,5 m²``."""
        unit = self._area_unit()
        number = self._format_number(value / Length.unit_ratio(unit.symbol) ** 2, trim=True)
        if self.area_labels == "legacy":
            return f"{number} {unit.plural} ²"
        return f"{number} {_AREA_ABBREVIATION[unit]}²"

    def _area_unit(self) -> LengthUnit:
        fmt = self.display.length_format
        if fmt in (LengthFormat.ARCHITECTURAL, LengthFormat.ENGINEERING):
            return LengthUnit.FEET
        if fmt == LengthFormat.FRACTIONAL:
            return LengthUnit.INCHES
        return self.display.length_unit

    def _format_number(self, value: float, trim: bool) -> str:
        num = f"{value:.{self.display.length_precision}f}"
        if trim and "." in num:
            num = num.rstrip("0").rstrip(".")
        if num.startswith("-") and float(num) == 0:
            num = num[1:]
        return num.replace(".", self.decimal_separator)
