"""Tests for the Volume quantity and its display formatting."""

import pytest
from structlog.testing import capture_logs

from sketchunits.core.quantity import Area, Volume
from sketchunits.errors import DivisionByZero, InvalidOperand
from sketchunits.host import DisplayConfiguration, Length, LengthFormat, LengthUnit, set_host


def meters(value):
    return Length.from_unit(value, "m")


class TestVolumeConstruction:
    def test_raw_value_is_cubic_inches(self):
        assert Volume(10_000_000).to_m3() == pytest.approx(163.870640)

    def test_unit_constructors(self):
        assert Volume.from_inch3(1).value == 1.0
        assert Volume.from_feet3(1).value == 1728.0
        assert Volume.from_yard3(1).value == 46656.0
        assert Volume.from_mm3(16387.064).value == pytest.approx(1.0)
        assert Volume.from_cm3(2_000_000).to_m3() == pytest.approx(2)
        assert Volume.from_km3(1).to_m3() == pytest.approx(1e9)
        assert Volume.from_mile3(1).to_km3() == pytest.approx(4.16818183)

    def test_accessors(self):
        volume = Volume.from_m3(1)
        assert volume.to_cm3() == pytest.approx(1_000_000)
        assert volume.to_mm3() == pytest.approx(1e9)
        assert volume.to_feet3() == pytest.approx(35.3146667)
        assert volume.to_yard3() == pytest.approx(1.30795062)
        assert volume.to_inch3() == pytest.approx(61023.7441)

    def test_non_numeric_rejected(self):
        with pytest.raises(InvalidOperand):
            Volume([1])


class TestVolumeArithmetic:
    def test_add(self):
        total = Volume.from_m3(3) + Volume.from_cm3(2_000_000)
        assert total.to_m3() == pytest.approx(5)

    def test_subtract(self):
        assert (Volume.from_m3(3) - Volume.from_m3(1)).to_m3() == pytest.approx(2)

    def test_add_area_rejected(self):
        with pytest.raises(InvalidOperand):
            Volume.from_m3(1) + Area.from_m2(1)

    def test_multiply_by_number(self):
        assert (Volume.from_m3(30) * 2).to_m3() == pytest.approx(60)
        assert (0.5 * Volume.from_m3(30)).to_m3() == pytest.approx(15)

    def test_multiply_by_length_rejected(self):
        with pytest.raises(InvalidOperand):
            Volume.from_m3(1) * meters(1)

    def test_divide_by_number(self):
        assert (Volume.from_m3(30) / 2).to_m3() == pytest.approx(15)

    def test_divide_by_length_is_area(self):
        area = Volume.from_m3(27) / meters(9)
        assert isinstance(area, Area)
        assert area.to_m2() == pytest.approx(3)

    def test_divide_by_area_is_length(self):
        length = Volume.from_m3(27) / Area.from_m2(9)
        assert isinstance(length, Length)
        assert length.to_unit("m") == pytest.approx(3)

    def test_divide_by_zero(self):
        with pytest.raises(DivisionByZero):
            Volume.from_m3(1) / 0
        with pytest.raises(DivisionByZero):
            Volume.from_m3(1) / Length(0.0)
        with pytest.raises(DivisionByZero):
            Volume.from_m3(1) / Area(0)

    def test_divide_by_volume_rejected(self):
        with pytest.raises(InvalidOperand):
            Volume.from_m3(1) / Volume.from_m3(1)

    def test_cube_root(self):
        side = Volume.from_m3(27).cube_root()
        assert isinstance(side, Length)
        assert side.to_unit("m") == pytest.approx(3)

    def test_cube_root_of_negative_volume(self):
        assert Volume.from_m3(-27).cube_root().to_unit("m") == pytest.approx(-3)

    def test_cube_root_of_zero(self):
        assert Volume(0).cube_root() == 0.0

    def test_ordering(self):
        assert Volume.from_feet3(1) > Volume.from_inch3(1000)
        assert Volume.from_inch3(1728) == Volume.from_feet3(1)

    def test_sum(self):
        total = sum([Volume.from_m3(1), Volume.from_m3(2), Volume.from_cm3(500_000)])
        assert total.to_m3() == pytest.approx(3.5)

    def test_number_plus_volume_rejected(self):
        with pytest.raises(InvalidOperand):
            2 + Volume.from_m3(1)


class TestVolumeDisplay:
    def test_decimal_meters(self, period_host):
        assert str(Volume.from_m3(27)) == "27 m ³"

    def test_sum_display(self, period_host):
        assert str(Volume.from_m3(3) + Volume.from_cm3(2_000_000)) == "5 m ³"

    def test_decimal_centimeters_comma_locale(self, install_host):
        install_host(",", unit=LengthUnit.CENTIMETER, precision=3)
        assert str(Volume.from_cm3(123.345)) == "123,345 cm ³"

    def test_decimal_keeps_configured_precision(self, install_host):
        install_host(".", unit=LengthUnit.MILLIMETER, precision=2)
        assert str(Volume.from_mm3(1.23456)) == "1.23 mm ³"

    def test_decimal_feet(self, install_host):
        install_host(".", unit=LengthUnit.FEET, precision=1)
        assert str(Volume.from_feet3(2.5)) == "2.5 ft ³"

    def test_legacy_unit_names(self, install_host):
        install_host(".", unit=LengthUnit.METER, precision=1, area_labels="legacy")
        assert str(Volume.from_m3(27)) == "27 Meters ³"

    def test_engineering_uses_feet(self, install_host):
        install_host(".", fmt=LengthFormat.ENGINEERING, unit=LengthUnit.FEET)
        assert str(Volume.from_feet3(2)) == "2 ft ³"

    def test_fractional_uses_inches(self, install_host):
        install_host(".", fmt=LengthFormat.FRACTIONAL, unit=LengthUnit.INCHES)
        assert str(Volume.from_inch3(5)) == "5 in ³"

    def test_repr_matches_display(self, period_host):
        assert repr(Volume.from_m3(27)) == "27 m ³"

    def test_large_volume_in_millimeters(self, install_host):
        install_host(".", unit=LengthUnit.MILLIMETER, precision=6)
        text = str(Volume.from_km3(1_000_000))
        number, _, label = text.partition(" ")
        assert label == "mm ³"
        assert float(number) == pytest.approx(1e24)

    def test_cube_root_displays_as_length(self, comma_host):
        assert str(Volume.from_m3(27).cube_root()) == "3,0m"

    def test_architectural_large_volume_in_feet(self, install_host):
        install_host(".", fmt=LengthFormat.ARCHITECTURAL, unit=LengthUnit.INCHES)
        assert str(Volume.from_feet3(3)) == "3 ft ³"

    def test_architectural_small_volume_in_inches(self, install_host):
        install_host(".", fmt=LengthFormat.ARCHITECTURAL, unit=LengthUnit.INCHES)
        # The number switches to inches; the unit name still comes from the host.
        assert str(Volume.from_inch3(100)).startswith("100 ")

    def test_unit_name_fallback(self, comma_host):
        class UntranslatedHost:
            def parse_length(self, text):
                return comma_host.parse_length(text)

            def format_length(self, length):
                return comma_host.format_length(length)

            def format_area(self, value):
                return "area: 0"

            def display_options(self):
                return DisplayConfiguration(length_unit=LengthUnit.METER, length_precision=1)

        set_host(UntranslatedHost())
        with capture_logs() as logs:
            assert str(Volume.from_m3(1.5)) == "1,5 Meters ³"
        assert any(entry["event"] == "area_unit_not_found" for entry in logs)
