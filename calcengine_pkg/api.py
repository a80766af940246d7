"""Public API for calcengine - returns structured objects instead of raising."""

from __future__ import annotations

from .engine import CalculatorEngine
from .keymap import tokenize
from .logging_config import get_logger
from .types import CalculatorError, StepResult, ValidationError

logger = get_logger("api")


def _history_dicts(engine: CalculatorEngine) -> list[dict]:
    return [record.to_dict() for record in engine.get_history()]


def execute(
    engine: CalculatorEngine, command: str, argument: str | None = None
) -> StepResult:
    """Run one engine command and report the outcome as a StepResult.

    Args:
        engine: Engine to drive
        command: Command name (e.g. "append_digit", "calculate", "undo")
        argument: Digit or operator for commands that take one

    Returns:
        StepResult with the display after the command, or the error and the
        unchanged display on failure

    Example:
        >>> from calcengine_pkg.engine import CalculatorEngine
        >>> engine = CalculatorEngine()
        >>> execute(engine, "append_digit", "9").display
        '9'
        >>> execute(engine, "set_operator", "/").ok
        True
        >>> execute(engine, "append_digit", "0").display
        '0'
        >>> execute(engine, "calculate").code
        'DIVIDE_BY_ZERO'
    """
    try:
        display = engine.execute(command, argument)
    except (CalculatorError, ValidationError) as e:
        return StepResult(
            ok=False, display=engine.get_current_input(), error=e.message, code=e.code
        )
    return StepResult(ok=True, display=display)


def evaluate_keys(keys: str, engine: CalculatorEngine | None = None) -> StepResult:
    """Run a whole key sequence, stopping at the first error.

    Args:
        keys: Key sequence (e.g. "2+3*4=")
        engine: Engine to drive; a fresh one is used when omitted

    Returns:
        StepResult with the final display and the engine history

    Example:
        >>> result = evaluate_keys("2+3*4=")
        >>> result.display
        '20'
        >>> result.history
        [{'expression': '2 + 3', 'result': 5.0}, {'expression': '5 * 4', 'result': 20.0}]
    """
    if engine is None:
        engine = CalculatorEngine()

    try:
        commands = tokenize(keys)
    except ValidationError as e:
        return StepResult(
            ok=False, display=engine.get_current_input(), error=e.message, code=e.code
        )

    for command, argument in commands:
        step = execute(engine, command, argument)
        if not step.ok:
            logger.debug("Key sequence %r stopped at %s: %s", keys, command, step.error)
            step.history = _history_dicts(engine)
            return step

    return StepResult(
        ok=True, display=engine.get_current_input(), history=_history_dicts(engine)
    )


def validate_keys(keys: str) -> tuple[bool, str | None]:
    """Check a key sequence without running it.

    Args:
        keys: Key sequence to validate

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> validate_keys("1+1=")
        (True, None)
        >>> validate_keys("1^2")
        (False, "Unknown key '^' at position 1")
    """
    try:
        tokenize(keys)
        return True, None
    except ValidationError as e:
        return False, str(e)
