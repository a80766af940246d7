"""Pure state-transition functions for the calculator.

Every function takes a ``CalculatorState`` and returns a ``Transition`` holding
the new state and, for completed calculations, the emitted
``CalculationRecord``. Input states are never modified; failures raise a
``CalculatorError`` subclass and therefore produce no new state at all.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Callable

from .config import OPERATORS
from .formatting import format_result, number_to_string, parse_operand
from .types import (
    CalculationRecord,
    CalculatorState,
    DivideByZeroError,
    NegativeSquareRootError,
    Transition,
    ValidationError,
)

INITIAL_STATE = CalculatorState()


def append_digit(state: CalculatorState, value: str) -> Transition:
    """Append a digit or decimal point to the display."""
    display = state.display
    if state.reset:
        display = ""

    if value == "." and "." in display:
        return Transition(replace(state, display=display, reset=False))

    if display == "0" and value != ".":
        display = value
    else:
        display += value
    return Transition(replace(state, display=display, reset=False))


def _apply_operator(operator: str, left: float, right: float) -> float:
    """Apply one of OPERATORS; anything past "+", "-" and "*" divides."""
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if right == 0:
        raise DivideByZeroError()
    return left / right


def calculate(state: CalculatorState) -> Transition:
    """Apply the pending operator to the stored operand and the display.

    Without a pending operator (or with one outside + - * /) the state is
    returned unchanged.

    Raises:
        DivideByZeroError: pending operator is "/" and the display is zero
    """
    if state.operand is None or state.operator not in OPERATORS:
        return Transition(state)

    left = parse_operand(state.operand)
    right = parse_operand(state.display)
    result = _apply_operator(state.operator, left, right)

    record = CalculationRecord(
        expression=f"{state.operand} {state.operator} {state.display}",
        result=result,
    )
    new_state = CalculatorState(display=format_result(result), reset=True)
    return Transition(new_state, record)


def set_operator(state: CalculatorState, op: str) -> Transition:
    """Select a binary operator, folding any pending one first (left to right).

    Raises:
        DivideByZeroError: the folded pending division has a zero divisor
    """
    record = None
    if state.operator and state.operand is not None:
        folded = calculate(state)
        state, record = folded.state, folded.record

    new_state = CalculatorState(
        display=state.display, operator=op, operand=state.display, reset=True
    )
    return Transition(new_state, record)


def clear(state: CalculatorState) -> Transition:
    return Transition(INITIAL_STATE)


def delete_last(state: CalculatorState) -> Transition:
    if len(state.display) > 1:
        return Transition(replace(state, display=state.display[:-1]))
    return Transition(replace(state, display="0"))


def percentage(state: CalculatorState) -> Transition:
    value = parse_operand(state.display)
    return Transition(
        replace(state, display=number_to_string(value / 100), reset=True)
    )


def toggle_sign(state: CalculatorState) -> Transition:
    display = state.display
    if display == "0":
        return Transition(state)
    display = display[1:] if display.startswith("-") else "-" + display
    return Transition(replace(state, display=display))


def square_root(state: CalculatorState) -> Transition:
    """Replace the display with its square root.

    Raises:
        NegativeSquareRootError: the display value is negative
    """
    value = parse_operand(state.display)
    if value < 0:
        raise NegativeSquareRootError()
    return Transition(
        replace(state, display=number_to_string(math.sqrt(value)), reset=True)
    )


def square(state: CalculatorState) -> Transition:
    value = parse_operand(state.display)
    return Transition(
        replace(state, display=number_to_string(value * value), reset=True)
    )


# Command name -> (transition, takes an argument)
COMMANDS: dict[str, tuple[Callable[..., Transition], bool]] = {
    "append_digit": (append_digit, True),
    "set_operator": (set_operator, True),
    "calculate": (calculate, False),
    "clear": (clear, False),
    "delete_last": (delete_last, False),
    "percentage": (percentage, False),
    "toggle_sign": (toggle_sign, False),
    "square_root": (square_root, False),
    "square": (square, False),
}


def apply(
    state: CalculatorState, command: str, argument: str | None = None
) -> Transition:
    """Dispatch a named command against a state.

    Args:
        state: Current state
        command: One of the names in COMMANDS
        argument: Digit or operator for commands that take one

    Returns:
        Transition produced by the command

    Raises:
        ValidationError: unknown command or missing argument
        CalculatorError: propagated from the command itself
    """
    try:
        func, takes_argument = COMMANDS[command]
    except KeyError:
        raise ValidationError(
            f"Unknown command: {command}", code="UNKNOWN_COMMAND"
        ) from None

    if takes_argument:
        if argument is None:
            raise ValidationError(
                f"Command '{command}' requires an argument", code="MISSING_ARGUMENT"
            )
        return func(state, argument)
    return func(state)
