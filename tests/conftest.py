import pytest

from sketchunits.config import reset_settings
from sketchunits.core.locale.probe import reset_separators
from sketchunits.host import (
    DisplayConfiguration,
    LengthFormat,
    LengthUnit,
    ReferenceHost,
    reset_host,
    set_host,
)


@pytest.fixture(autouse=True)
def _fresh_state():
    reset_settings()
    reset_host()
    reset_separators()
    yield
    reset_settings()
    reset_host()
    reset_separators()


@pytest.fixture
def install_host():
    """Install a ReferenceHost with the given locale and units options."""

    def _install(
        separator: str = ".",
        fmt: LengthFormat = LengthFormat.DECIMAL,
        unit: LengthUnit = LengthUnit.METER,
        precision: int = 1,
        area_labels: str = "abbreviated",
    ) -> ReferenceHost:
        display = DisplayConfiguration(length_format=fmt, length_unit=unit, length_precision=precision)
        host = ReferenceHost(separator, display, area_labels)
        set_host(host)
        return host

    return _install


@pytest.fixture
def period_host(install_host):
    return install_host(".")


@pytest.fixture
def comma_host(install_host):
    return install_host(",")
