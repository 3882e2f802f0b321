"""Detection of the host locale's decimal and list separators.

The host exposes no locale API, so the decimal separator is guessed by asking
its Length parser to read ``"1.0"``: period locales accept it, comma locales
reject it. Only ``.`` and ``,`` are recognised.

The result is computed once per process and never refreshed, so a locale
change while running is not picked up.
"""

from __future__ import annotations

import math
import threading
from typing import Optional

from sketchunits.errors import ExternalParseFailure
from sketchunits.host import get_host
from sketchunits.logging import get_logger

logger = get_logger(__name__)

_lock = threading.Lock()
_decimal_separator: Optional[str] = None


def _probe() -> str:
    try:
        length = get_host().parse_length("1.0")
    except ExternalParseFailure:
        return ","
    if not math.isfinite(length) or length <= 0:
        logger.warning("decimal_separator_probe_unexpected", length=float(length))
        return ","
    return "."


def decimal_separator() -> str:
    """The decimal separator of the host locale, ``.`` or ``,``."""
    global _decimal_separator
    if _decimal_separator is None:
        with _lock:
            if _decimal_separator is None:
                _decimal_separator = _probe()
                logger.debug("decimal_separator_detected", separator=_decimal_separator)
    return _decimal_separator


def list_separator() -> str:
    """The list separator of the host locale, ``;`` where commas mark decimals."""
    return ";" if decimal_separator() == "," else ","


def reset_separators() -> None:
    """Forget the detected separators (for testing)."""
    global _decimal_separator
    with _lock:
        _decimal_separator = None
