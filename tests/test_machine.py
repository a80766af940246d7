"""Tests for the pure state-transition functions."""

import pytest

from calcengine_pkg import machine
from calcengine_pkg.types import (
    CalculationRecord,
    CalculatorState,
    DivideByZeroError,
    NegativeSquareRootError,
    Transition,
    ValidationError,
)


def run(state, *steps):
    """Apply (command, argument) steps in order, collecting emitted records."""
    records = []
    for step in steps:
        command, argument = step if isinstance(step, tuple) else (step, None)
        transition = machine.apply(state, command, argument)
        state = transition.state
        if transition.record is not None:
            records.append(transition.record)
    return state, records


class TestTransitions:
    def test_initial_state(self):
        assert machine.INITIAL_STATE == CalculatorState("0", None, None, False)

    def test_returns_transition(self):
        transition = machine.append_digit(machine.INITIAL_STATE, "4")
        assert isinstance(transition, Transition)
        assert transition.state.display == "4"
        assert transition.record is None

    def test_input_state_is_not_modified(self):
        state = CalculatorState(display="5", operator="+", operand="2", reset=False)
        snapshot = CalculatorState(**state.to_dict())
        for func in (
            machine.calculate,
            machine.clear,
            machine.delete_last,
            machine.percentage,
            machine.toggle_sign,
            machine.square_root,
            machine.square,
        ):
            func(state)
        machine.append_digit(state, "1")
        machine.set_operator(state, "*")
        assert state == snapshot

    def test_state_is_frozen(self):
        with pytest.raises(AttributeError):
            machine.INITIAL_STATE.display = "1"

    def test_reset_flag_starts_new_entry(self):
        state = CalculatorState(display="12", reset=True)
        transition = machine.append_digit(state, "3")
        assert transition.state == CalculatorState(display="3", reset=False)

    def test_reset_then_decimal_point(self):
        state = CalculatorState(display="1.5", reset=True)
        assert machine.append_digit(state, ".").state.display == "."

    def test_calculate_emits_record(self):
        state = CalculatorState(display="3", operator="+", operand="2", reset=False)
        transition = machine.calculate(state)
        assert transition.record == CalculationRecord("2 + 3", 5.0)
        assert transition.state == CalculatorState(display="5", reset=True)

    def test_set_operator_emits_folded_record(self):
        state = CalculatorState(display="3", operator="+", operand="2", reset=False)
        transition = machine.set_operator(state, "*")
        assert transition.record == CalculationRecord("2 + 3", 5.0)
        assert transition.state == CalculatorState(
            display="5", operator="*", operand="5", reset=True
        )

    def test_set_operator_without_pending(self):
        transition = machine.set_operator(CalculatorState(display="9"), "-")
        assert transition.record is None
        assert transition.state.operand == "9"

    def test_calculate_without_operand_is_noop(self):
        state = CalculatorState(display="3", operator="+", operand=None)
        assert machine.calculate(state).state is state

    def test_unknown_operator_is_noop(self):
        state = CalculatorState(display="0", operator="^", operand="2", reset=False)
        transition = machine.calculate(state)
        assert transition.state is state
        assert transition.record is None

    def test_infinite_operands_are_read_back(self):
        state = CalculatorState(display="1", operator="+", operand="Infinity")
        assert machine.calculate(state).state.display == "Infinity"
        assert machine.square_root(CalculatorState(display="Infinity")).state.display == "Infinity"
        with pytest.raises(NegativeSquareRootError):
            machine.square_root(CalculatorState(display="-Infinity"))

    def test_divide_by_zero(self):
        state = CalculatorState(display="0", operator="/", operand="5", reset=False)
        with pytest.raises(DivideByZeroError):
            machine.calculate(state)

    def test_zero_divided_by_number(self):
        state = CalculatorState(display="5", operator="/", operand="0", reset=False)
        assert machine.calculate(state).state.display == "0"

    def test_negative_square_root(self):
        with pytest.raises(NegativeSquareRootError):
            machine.square_root(CalculatorState(display="-0.5"))

    def test_square_root_of_negative_zero(self):
        transition = machine.square_root(CalculatorState(display="-0"))
        assert transition.state.display == "0"

    def test_clear_returns_initial_state(self):
        state = CalculatorState(display="8", operator="*", operand="2", reset=True)
        assert machine.clear(state).state == machine.INITIAL_STATE


class TestApply:
    def test_chaining_two_plus_three_times_four(self):
        state, records = run(
            machine.INITIAL_STATE,
            ("append_digit", "2"),
            ("set_operator", "+"),
            ("append_digit", "3"),
            ("set_operator", "*"),
            ("append_digit", "4"),
            "calculate",
        )
        assert state.display == "20"
        assert [r.result for r in records] == [5.0, 20.0]

    def test_unknown_command(self):
        with pytest.raises(ValidationError) as exc_info:
            machine.apply(machine.INITIAL_STATE, "explode")
        assert exc_info.value.code == "UNKNOWN_COMMAND"

    def test_missing_argument(self):
        with pytest.raises(ValidationError) as exc_info:
            machine.apply(machine.INITIAL_STATE, "append_digit")
        assert exc_info.value.code == "MISSING_ARGUMENT"

    def test_argumentless_command_ignores_argument(self):
        transition = machine.apply(CalculatorState(display="4"), "square", "x")
        assert transition.state.display == "16"

    def test_every_command_is_dispatchable(self):
        for name, (func, takes_argument) in machine.COMMANDS.items():
            argument = "1" if takes_argument else None
            transition = machine.apply(CalculatorState(display="4"), name, argument)
            assert isinstance(transition, Transition), name
