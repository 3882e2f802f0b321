"""Exception hierarchy for sketchunits.

Every error also derives from the builtin exception callers would expect
(``TypeError``, ``ValueError``, ``ZeroDivisionError``) so generic handlers
keep working.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class SketchUnitsError(Exception):
    """Base exception for all sketchunits errors."""

    error_type: str = "SketchUnitsError"
    default_suggestion: str = "Check the value and try again."

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.suggestion = suggestion or self.default_suggestion

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for reporting."""
        result: Dict[str, Any] = {
            "type": self.error_type,
            "message": self.message,
            "suggestion": self.suggestion,
        }
        if self.context:
            result["context"] = self.context
        return result


class InvalidOperand(SketchUnitsError, TypeError):
    """Raised when a quantity is built from, or combined with, an unsupported value."""

    error_type = "InvalidOperand"
    default_suggestion = "Use a real number, a Length, or a quantity of the matching dimension."

    def __init__(self, operation: str, operand: Any, **kwargs: Any):
        super().__init__(
            f"Unsupported operand for {operation}: {operand!r} ({type(operand).__name__})",
            context={"operation": operation, "operand_type": type(operand).__name__},
            **kwargs,
        )


class DivisionByZero(SketchUnitsError, ZeroDivisionError):
    """Raised when a quantity is divided by zero."""

    error_type = "DivisionByZero"
    default_suggestion = "Divide by a non-zero number, length or area."

    def __init__(self, dividend: Any, **kwargs: Any):
        super().__init__(
            f"Cannot divide {dividend!r} by zero",
            context={"dividend_type": type(dividend).__name__},
            **kwargs,
        )


class UnparsableUnitString(SketchUnitsError, ValueError):
    """Raised when a string does not look like a number with an optional unit."""

    error_type = "UnparsableUnitString"
    default_suggestion = "Write a number followed by a unit, e.g. '12.5cm', '3m2' or '4'3'."

    def __init__(self, text: str, **kwargs: Any):
        super().__init__(
            f"Cannot convert {text!r} to unit",
            context={"input": text},
            **kwargs,
        )


class UnknownUnitSymbol(SketchUnitsError, ValueError):
    """Raised when a unit token has the right shape but names no known unit."""

    error_type = "UnknownUnitSymbol"
    default_suggestion = "Use one of: mm, cm, m, km, inch, feet, yard, mile."

    def __init__(self, symbol: str, **kwargs: Any):
        super().__init__(
            f"Unknown unit symbol {symbol!r}",
            context={"symbol": symbol},
            **kwargs,
        )


class InvalidUnitFormat(SketchUnitsError, ValueError):
    """Raised when a unit carries a dimension marker other than 2 or 3."""

    error_type = "InvalidUnitFormat"
    default_suggestion = "Append 2 for areas, 3 for volumes, or nothing for lengths."

    def __init__(self, unit: str, **kwargs: Any):
        super().__init__(
            f"Invalid unit format {unit!r}",
            context={"unit": unit},
            **kwargs,
        )


class ExternalParseFailure(SketchUnitsError, ValueError):
    """Raised by the host when it cannot parse a length string."""

    error_type = "ExternalParseFailure"
    default_suggestion = "Use the decimal separator of the current locale."

    def __init__(self, text: str, reason: str = "", **kwargs: Any):
        message = f"Cannot convert {text!r} to Length"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, context={"input": text}, **kwargs)
