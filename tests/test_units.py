"""Tests for the unit ratio table."""

import pytest

from sketchunits.errors import UnknownUnitSymbol
from sketchunits.host import Length
from sketchunits.utils.units import UnitSymbol, from_base, ratio, to_base


class TestRatio:
    def test_inch_is_base_unit(self):
        assert ratio(UnitSymbol.INCH, 1) == 1.0
        assert ratio(UnitSymbol.INCH, 2) == 1.0
        assert ratio(UnitSymbol.INCH, 3) == 1.0

    def test_feet_squared_and_cubed(self):
        assert ratio(UnitSymbol.FOOT, 2) == 144.0
        assert ratio(UnitSymbol.FOOT, 3) == 1728.0

    def test_meter(self):
        assert ratio("m", 1) == pytest.approx(39.37007874)
        assert ratio("m", 2) == pytest.approx(1550.0031)

    def test_ratio_is_length_ratio_raised(self):
        for symbol in UnitSymbol:
            base = Length.unit_ratio(symbol.value)
            assert ratio(symbol, 2) == pytest.approx(base * base)
            assert ratio(symbol, 3) == pytest.approx(base * base * base)

    def test_string_and_enum_agree(self):
        assert ratio("cm", 2) == ratio(UnitSymbol.CENTIMETER, 2)

    def test_unknown_symbol(self):
        with pytest.raises(UnknownUnitSymbol):
            ratio("furlong", 2)

    def test_invalid_exponent(self):
        with pytest.raises(ValueError):
            ratio("m", 4)


class TestConversions:
    @pytest.mark.parametrize("symbol", list(UnitSymbol))
    @pytest.mark.parametrize("exponent", [2, 3])
    def test_round_trip(self, symbol, exponent):
        assert from_base(to_base(12.5, symbol, exponent), symbol, exponent) == pytest.approx(12.5)

    def test_mm2_to_base(self):
        # 1 in² = 645.16 mm²
        assert to_base(645.16, "mm", 2) == pytest.approx(1.0)

    def test_yard3_from_base(self):
        assert from_base(46656.0, UnitSymbol.YARD, 3) == pytest.approx(1.0)
