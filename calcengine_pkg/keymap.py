"""Translate key sequences such as "2+3*4=" into engine commands."""

from __future__ import annotations

from typing import Optional

from .config import DIGIT_KEYS, KEY_BINDINGS, MAX_KEYS_LENGTH
from .types import ValidationError

Command = tuple[str, Optional[str]]


def tokenize(keys: str) -> list[Command]:
    """Split a key sequence into (command, argument) pairs.

    Digits and "." become append_digit, operators become set_operator with the
    operator as argument, and every other bound key maps to its argumentless
    command. Whitespace is ignored.

    Args:
        keys: Key sequence (e.g. "12.5*2=", "16r", "9~")

    Returns:
        List of (command, argument) tuples in key order

    Raises:
        ValidationError: empty, too long, or containing an unbound key
    """
    if len(keys) > MAX_KEYS_LENGTH:
        raise ValidationError(
            f"Input too long ({len(keys)} > {MAX_KEYS_LENGTH} characters)",
            code="TOO_LONG",
        )
    if not keys.strip():
        raise ValidationError("Empty input", code="EMPTY_INPUT")

    commands: list[Command] = []
    for position, key in enumerate(keys):
        if key.isspace():
            continue
        if key in DIGIT_KEYS:
            commands.append(("append_digit", key))
            continue
        command = KEY_BINDINGS.get(key)
        if command is None:
            raise ValidationError(
                f"Unknown key {key!r} at position {position}", code="UNKNOWN_KEY"
            )
        commands.append((command, key if command == "set_operator" else None))
    return commands
