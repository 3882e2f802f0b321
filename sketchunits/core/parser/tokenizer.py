"""Tokenizer for unit strings such as ``123.5cm``, ``4 m²`` or ``12'``."""

from __future__ import annotations

import re
from dataclasses import dataclass

from sketchunits.errors import UnparsableUnitString

# Superscripts are folded into plain dimension digits before matching.
_SUPERSCRIPTS = str.maketrans({"²": "2", "³": "3"})

_WHITESPACE_RE = re.compile(r"\s+")

# number, then an optional unit token with an optional dimension digit
_UNIT_STRING_RE = re.compile(
    r"""^(?P<number>[-+]?[0-9]+(?:[.,][0-9]*)?)
        (?:(?P<unit>[a-z'"]+)(?P<dimension>[0-9]?))?$""",
    re.IGNORECASE | re.VERBOSE,
)


@dataclass(frozen=True)
class ParsedUnit:
    text: str           # normalised input, as matched
    number: str         # 123.5 or 123,5
    unit: str | None    # cm, m, ', " ...
    dimension: int      # 0 for lengths, 2 for areas, 3 for volumes

    @property
    def value(self) -> float:
        """The number read with either separator."""
        return float(self.number.replace(",", "."))


def normalize(text: str) -> str:
    return _WHITESPACE_RE.sub("", text.translate(_SUPERSCRIPTS))


def tokenize(text: str) -> ParsedUnit:
    """Split a unit string into number, unit token and dimension."""
    data = normalize(text)
    m = _UNIT_STRING_RE.match(data)
    if not m:
        raise UnparsableUnitString(text)
    dimension = m.group("dimension")
    return ParsedUnit(
        text=m.group(0),
        number=m.group("number"),
        unit=m.group("unit"),
        dimension=int(dimension) if dimension else 0,
    )
