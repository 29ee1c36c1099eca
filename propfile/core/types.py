# propfile/core/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Type definitions and enums shared by the parser and the serializer.

Kept free of runtime dependencies on other modules so that escaping,
parser and serializer can all import it without cycles.
"""

from enum import Enum, auto


class ScanState(Enum):
    """Position of the parser within the current logical line."""

    KEY = auto()  # Accumulating the key
    KEY_ESCAPE = auto()  # Backslash seen while in the key
    VALUE = auto()  # Accumulating the value
    VALUE_ESCAPE = auto()  # Backslash seen while in the value
    COMMENT = auto()  # Discarding the rest of a comment line

    @property
    def escaped(self) -> "ScanState":
        """The escape state matching this member state."""
        return _ESCAPED[self]

    @property
    def unescaped(self) -> "ScanState":
        """The member state an escape state returns to."""
        return _UNESCAPED[self]

    def is_escape(self) -> bool:
        return self in _UNESCAPED


_ESCAPED = {ScanState.KEY: ScanState.KEY_ESCAPE, ScanState.VALUE: ScanState.VALUE_ESCAPE}
_UNESCAPED = {escaped: plain for plain, escaped in _ESCAPED.items()}


class EscapePolicy(Enum):
    """Set of characters accepted after a backslash.

    STRICT only knows the backslash and the separator. EXTENDED also maps
    n, r and t to the matching control characters.
    """

    STRICT = auto()
    EXTENDED = auto()


SEPARATOR = "="
ESCAPE = "\\"
COMMENT = "#"
NEWLINE = "\n"
CARRIAGE_RETURN = "\r"
HORIZONTAL_WHITESPACE = " \t"
