"""Exceptions raised by the balancing pipeline.

Every user-facing failure carries a machine-readable ``code``, a human
``message`` and an optional ``suggestion``. CLI and UI layers render that
triple and nothing else.
"""

from __future__ import annotations

from typing import Dict, Optional


class EquationError(ValueError):
    """Base class for errors surfaced to callers of the chemistry core."""

    default_code = "INVALID_EQUATION"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.suggestion = suggestion

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"code": self.code, "message": self.message, "suggestion": self.suggestion}


class MalformedFormula(EquationError):
    default_code = "MALFORMED_FORMULA"


class MalformedEquation(EquationError):
    default_code = "MALFORMED_EQUATION"


class UnknownElement(EquationError):
    default_code = "UNKNOWN_ELEMENT"

    def __init__(self, symbol: str, suggestion: Optional[str] = None) -> None:
        super().__init__(f'Unknown element: "{symbol}"', suggestion=suggestion)
        self.symbol = symbol


class UnbalanceableEquation(EquationError):
    """The atom matrix admits no strictly positive integer solution."""

    default_code = "NO_SOLUTION"
