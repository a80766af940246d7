"""Stateful calculator engine driven by key presses.

``CalculatorEngine`` owns one session: the current ``CalculatorState``, the
history of completed calculations and a bounded undo stack. Each public
method runs the matching pure transition from ``machine`` and commits the
result only when it succeeds.
"""

from __future__ import annotations

from collections import deque

from . import machine
from .config import MAX_UNDO_DEPTH
from .formatting import format_result
from .logging_config import get_logger
from .types import (
    CalculationRecord,
    CalculatorError,
    CalculatorState,
)

logger = get_logger("engine")


class CalculatorEngine:
    """Single-session calculator: digit entry, one pending operator, history.

    Not safe for concurrent mutation; one engine belongs to one session.

    Example:
        >>> engine = CalculatorEngine()
        >>> engine.append_digit("2")
        '2'
        >>> engine.set_operator("+")
        >>> engine.append_digit("3")
        '3'
        >>> engine.calculate()
        '5'
        >>> engine.get_history()
        (CalculationRecord(expression='2 + 3', result=5.0),)
    """

    def __init__(self, max_undo: int = MAX_UNDO_DEPTH) -> None:
        self._state = machine.INITIAL_STATE
        self._history: list[CalculationRecord] = []
        self._undo: deque[tuple[CalculatorState, CalculationRecord | None]] = deque(
            maxlen=max_undo
        )

    @property
    def state(self) -> CalculatorState:
        return self._state

    def _run(self, command: str, argument: str | None = None) -> str:
        try:
            transition = machine.apply(self._state, command, argument)
        except CalculatorError as e:
            logger.info("%s failed on %r: %s", command, self._state.display, e)
            raise

        if transition.state != self._state or transition.record is not None:
            self._undo.append((self._state, transition.record))
        self._state = transition.state

        if transition.record is not None:
            self._history.append(transition.record)
            logger.info(
                "Calculated %s = %r", transition.record.expression, transition.record.result
            )
        logger.debug("%s(%r) -> %r", command, argument, self._state)
        return self._state.display

    def append_digit(self, value: str) -> str:
        """Append a digit or "." to the display and return the display."""
        return self._run("append_digit", value)

    def set_operator(self, op: str) -> None:
        """Select the pending operator, evaluating any operator already pending.

        Raises:
            DivideByZeroError: the implicit evaluation divides by zero
        """
        self._run("set_operator", op)

    def calculate(self) -> str:
        """Apply the pending operator and return the formatted display.

        Raises:
            DivideByZeroError: division with a zero divisor; state is unchanged
        """
        return self._run("calculate")

    def format_result(self, result: float) -> str:
        return format_result(result)

    def clear(self) -> str:
        """Reset the display and pending operation; history is kept."""
        return self._run("clear")

    def delete_last(self) -> str:
        return self._run("delete_last")

    def percentage(self) -> str:
        return self._run("percentage")

    def toggle_sign(self) -> str:
        return self._run("toggle_sign")

    def square_root(self) -> str:
        """Replace the display with its square root.

        Raises:
            NegativeSquareRootError: the display is negative; state is unchanged
        """
        return self._run("square_root")

    def square(self) -> str:
        return self._run("square")

    def undo(self) -> str:
        """Revert the most recent state change and the record it emitted."""
        if not self._undo:
            return self._state.display
        previous, record = self._undo.pop()
        self._state = previous
        if record is not None and self._history and self._history[-1] is record:
            self._history.pop()
        logger.debug("undo -> %r", self._state)
        return self._state.display

    def get_current_input(self) -> str:
        return self._state.display

    def get_history(self) -> tuple[CalculationRecord, ...]:
        """Return a read-only snapshot of completed calculations, oldest first."""
        return tuple(self._history)

    def clear_history(self) -> None:
        self._history.clear()

    def execute(self, command: str, argument: str | None = None) -> str:
        """Run a command by name, as produced by the key tokenizer.

        Raises:
            ValidationError: unknown command
            CalculatorError: propagated from the command
        """
        if command == "undo":
            return self.undo()
        return self._run(command, argument)

    def __repr__(self) -> str:
        return f"CalculatorEngine(state={self._state!r}, history={len(self._history)})"
