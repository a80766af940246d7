"""Type definitions, state records and result dataclasses for the calculator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CalculatorState:
    """Immutable snapshot of one calculator session.

    ``display`` is the text currently shown, ``operator`` and ``operand`` are the
    pending binary operator and the left-hand operand captured when it was set,
    and ``reset`` marks that the next digit starts a new number.
    """

    display: str = "0"
    operator: str | None = None
    operand: str | None = None
    reset: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "display": self.display,
            "operator": self.operator,
            "operand": self.operand,
            "reset": self.reset,
        }


@dataclass(frozen=True)
class CalculationRecord:
    """One completed calculation: the expression text and its raw result."""

    expression: str
    result: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"expression": self.expression, "result": self.result}

    def __repr__(self) -> str:
        return f"CalculationRecord(expression={self.expression!r}, result={self.result!r})"


@dataclass(frozen=True)
class Transition:
    """New state produced by a state-machine step, plus any record it emitted."""

    state: CalculatorState
    record: CalculationRecord | None = None


@dataclass
class StepResult:
    """Result of running a command or a key sequence against an engine."""

    ok: bool
    display: str | None = None
    error: str | None = None
    code: str | None = None
    history: list[dict[str, Any]] | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.display is not None:
            result_dict["display"] = self.display
        if self.error is not None:
            result_dict["error"] = self.error
        if self.code is not None:
            result_dict["code"] = self.code
        if self.history is not None:
            result_dict["history"] = self.history
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"StepResult(ok=False, display={self.display!r}, error={self.error!r}, code={self.code!r})"
        parts = [f"ok={self.ok}", f"display={self.display!r}"]
        if self.history is not None:
            parts.append(f"history={self.history!r}")
        return f"StepResult({', '.join(parts)})"


class CalculatorError(Exception):
    """Base class for errors raised by calculator operations."""

    def __init__(self, message: str, code: str = "CALCULATOR_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class DivideByZeroError(CalculatorError):
    """Raised when a pending division is applied to a zero divisor."""

    def __init__(self, message: str = "Cannot divide by zero!"):
        super().__init__(message, code="DIVIDE_BY_ZERO")


class NegativeSquareRootError(CalculatorError):
    """Raised when taking the square root of a negative display value."""

    def __init__(
        self, message: str = "Cannot calculate square root of negative number!"
    ):
        super().__init__(message, code="NEGATIVE_SQUARE_ROOT")


class ValidationError(Exception):
    """Raised when key or command input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
