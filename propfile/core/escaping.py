# propfile/core/escaping.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Escape vocabulary shared by the parser and the serializer.

Decoding and encoding tables are derived from the same mapping so the two
directions stay symmetric.
"""

from typing import Dict, Optional

from propfile.core.types import (
    CARRIAGE_RETURN,
    COMMENT,
    ESCAPE,
    HORIZONTAL_WHITESPACE,
    NEWLINE,
    SEPARATOR,
    EscapePolicy,
)

_STRICT_TARGETS: Dict[str, str] = {ESCAPE: ESCAPE, SEPARATOR: SEPARATOR}
_CONTROL_TARGETS: Dict[str, str] = {"n": "\n", "r": "\r", "t": "\t"}

_DECODE_TABLES: Dict[EscapePolicy, Dict[str, str]] = {
    EscapePolicy.STRICT: dict(_STRICT_TARGETS),
    EscapePolicy.EXTENDED: {**_STRICT_TARGETS, **_CONTROL_TARGETS},
}


def decode(character: str, policy: EscapePolicy) -> Optional[str]:
    """
    Resolve the character following a backslash.

    :param character: The character right after the backslash.
    :param policy: Active escape policy.
    :return: The literal character, or None if the target is not recognized.
    """
    return _DECODE_TABLES[policy].get(character)


def _encode_table(policy: EscapePolicy, in_key: bool) -> Dict[str, str]:
    table = {ESCAPE: ESCAPE + ESCAPE}
    if in_key:
        table[SEPARATOR] = ESCAPE + SEPARATOR
    if policy is EscapePolicy.EXTENDED:
        for target, literal in _CONTROL_TARGETS.items():
            table[literal] = ESCAPE + target
    else:
        # No newline escape under STRICT: emit a continuation
        table[NEWLINE] = ESCAPE + NEWLINE
    return table


_ENCODE_TABLES = {
    (policy, in_key): str.maketrans(_encode_table(policy, in_key))
    for policy in EscapePolicy
    for in_key in (True, False)
}


def escape_key(key: str, policy: EscapePolicy) -> str:
    """Escape a key for output. Separators are escaped in keys only."""
    return key.translate(_ENCODE_TABLES[(policy, True)])


def escape_value(value: str, policy: EscapePolicy) -> str:
    """Escape a value for output."""
    return value.translate(_ENCODE_TABLES[(policy, False)])


def is_reloadable(key: str, value: str, policy: EscapePolicy) -> bool:
    """
    Tell whether an entry survives being stored and loaded back unchanged.

    Leading and trailing spaces are dropped by the parser, and a key starting with
    '#' reads back as a comment. STRICT has no escape for control characters:
    a newline becomes a continuation, and a CR ending the value is read back
    as part of a CRLF line ending.
    """
    if not key or key.startswith(COMMENT):
        return False
    unescaped_blanks = HORIZONTAL_WHITESPACE if policy is EscapePolicy.STRICT else " "
    for text in (key, value):
        if text and (text[0] in unescaped_blanks or text[-1] in unescaped_blanks):
            return False
    if policy is EscapePolicy.STRICT and (NEWLINE in key + value or value.endswith(CARRIAGE_RETURN)):
        return False
    return True
