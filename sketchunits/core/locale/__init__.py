from sketchunits.core.locale.formatter import format_float
from sketchunits.core.locale.probe import decimal_separator, list_separator, reset_separators

__all__ = ["decimal_separator", "format_float", "list_separator", "reset_separators"]
