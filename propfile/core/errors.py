# propfile/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Dict, Optional


class PropertiesError(Exception):
    """
    Base exception class for errors raised by the properties library.

    :param message: Human readable description of the failure.
    :param details: Optional mapping of extra diagnostic data.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ParseError(PropertiesError):
    """
    Raised when the text being loaded does not follow the properties format.
    Carries the (1-based) physical line number where parsing stopped.
    """

    def __init__(self, message: str, line_number: int, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(f"line {line_number}: {message}", details)
        self.line_number = line_number


class IllegalEscapeError(ParseError):
    """
    Raised when a backslash is followed by a character that is not a
    recognized escape target.
    """

    def __init__(self, line_number: int, character: str) -> None:
        sequence = "\\" + character
        super().__init__(f"illegal escape sequence {sequence!r}", line_number, {"character": character})
        self.character = character


class MissingSeparatorError(ParseError):
    """
    Raised when a logical line has content but no unescaped '=' separator.
    """

    def __init__(self, line_number: int) -> None:
        super().__init__("invalid property definition: no separator", line_number)


class EmptyKeyError(ParseError):
    """
    Raised when a separator is met before any key content.
    """

    def __init__(self, line_number: int) -> None:
        super().__init__("invalid property definition: empty key", line_number)


class UnterminatedContinuationError(ParseError):
    """
    Raised when the stream ends right after a line-continuation backslash.
    """

    def __init__(self, line_number: int) -> None:
        super().__init__("invalid property definition: no continuation line", line_number)
