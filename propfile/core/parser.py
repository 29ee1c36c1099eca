# propfile/core/parser.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Streaming parser for the properties text format.

The parser is a character-at-a-time state machine driven by ScanState. It
never looks further ahead than the character after a backslash, so input of
any size is handled with memory bounded by the longest key or value.
"""

from __future__ import annotations

import codecs
import logging
from typing import IO, Callable, List, Optional

from propfile.core import escaping
from propfile.core.errors import (
    EmptyKeyError,
    IllegalEscapeError,
    MissingSeparatorError,
    ParseError,
    UnterminatedContinuationError,
)
from propfile.core.types import (
    CARRIAGE_RETURN,
    COMMENT,
    ESCAPE,
    HORIZONTAL_WHITESPACE,
    NEWLINE,
    SEPARATOR,
    EscapePolicy,
    ScanState,
)

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 4096

PropertySink = Callable[[str, str], None]


class Parser:
    """
    Incremental parser. Text is pushed with feed() and the end of input is
    signalled with close(). Each completed definition is handed to the sink.

    Physical lines end with '\\n' or '\\r\\n'. A lone '\\r' is ordinary content, and
    a '\\r' at the very end of input is dropped.
    """

    def __init__(self, sink: PropertySink, policy: EscapePolicy = EscapePolicy.EXTENDED) -> None:
        """
        :param sink: Called with (key, value) for every committed definition.
        :param policy: Escape targets accepted after a backslash.
        """
        self._sink = sink
        self._policy = policy
        self._state = ScanState.KEY
        self._buffer: List[str] = []
        self._key = ""
        self._line_number = 1
        # Content placed in the member on the current physical line
        self._started = False
        # Current logical line spans more than one physical line
        self._continued = False
        # Buffer prefix ending with the last escaped character; never trimmed
        self._protected = 0
        # Input ended right after a continuation: the next physical line is missing
        self._awaiting_line = False
        # A CR held back until the next character shows whether it ends a CRLF
        self._pending_cr = False
        self.committed = 0

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def line_number(self) -> int:
        """Physical line the parser is currently on, starting at 1."""
        return self._line_number

    def feed(self, text: str) -> None:
        """
        Scan a piece of input.

        :raises ParseError: On the first malformed definition.
        """
        for character in text:
            if self._pending_cr:
                self._pending_cr = False
                if character != NEWLINE:
                    self._step(CARRIAGE_RETURN)
            if character == CARRIAGE_RETURN:
                self._pending_cr = True
                continue
            self._step(character)

    def close(self) -> None:
        """
        Signal the end of input. A final definition without a trailing newline
        is committed as if the newline were present.

        :raises UnterminatedContinuationError: If input ends after a backslash.
        :raises ParseError: If the final definition is malformed.
        """
        if self._pending_cr:
            # A final CR ends the last line like a CRLF would
            self._pending_cr = False
            self._awaiting_line = False
        if self._state.is_escape():
            raise self._fail(UnterminatedContinuationError(self._line_number))
        if self._awaiting_line:
            raise self._fail(UnterminatedContinuationError(self._line_number - 1))
        if self._state is ScanState.COMMENT:
            self._state = ScanState.KEY
            return
        self._end_line()

    def _step(self, character: str) -> None:
        state = self._state
        self._awaiting_line = False

        if state is ScanState.COMMENT:
            if character == NEWLINE:
                self._state = ScanState.KEY
                self._line_number += 1
            return

        if state.is_escape():
            self._state = state.unescaped
            if character == NEWLINE:
                # Continuation: same logical line, leading blanks skipped again
                self._line_number += 1
                self._started = False
                self._continued = True
                self._awaiting_line = True
                return
            literal = escaping.decode(character, self._policy)
            if literal is None:
                raise self._fail(IllegalEscapeError(self._line_number, character))
            self._buffer.append(literal)
            self._protected = len(self._buffer)
            return

        if character == ESCAPE:
            self._state = state.escaped
            self._started = True
            return

        if character == NEWLINE:
            self._end_line()
            self._line_number += 1
            return

        if state is ScanState.KEY:
            if character == SEPARATOR:
                self._finish_key()
                return
            if character == COMMENT and self._at_line_start():
                self._state = ScanState.COMMENT
                return

        if self._started or character not in HORIZONTAL_WHITESPACE:
            self._buffer.append(character)
            self._started = True

    def _at_line_start(self) -> bool:
        return not (self._started or self._continued)

    def _finish_key(self) -> None:
        key = self._take_member()
        if not key:
            raise self._fail(EmptyKeyError(self._line_number))
        self._key = key
        self._state = ScanState.VALUE
        self._started = False

    def _end_line(self) -> None:
        if self._state is ScanState.KEY:
            if self._at_line_start():
                return
            raise self._fail(MissingSeparatorError(self._line_number))
        self._sink(self._key, self._take_member())
        self.committed += 1
        self._state = ScanState.KEY
        self._key = ""
        self._started = False
        self._continued = False

    def _take_member(self) -> str:
        """Return the buffered member without its trailing blanks and clear the buffer."""
        buffer = self._buffer
        while len(buffer) > self._protected and buffer[-1] in HORIZONTAL_WHITESPACE:
            buffer.pop()
        member = "".join(buffer)
        self._buffer = []
        self._protected = 0
        return member

    def _fail(self, error: ParseError) -> ParseError:
        logger.debug("Parse failed in state %s after %d definitions: %s", self._state.name, self.committed, error)
        return error


def parse_stream(
    stream: IO,
    sink: PropertySink,
    policy: EscapePolicy = EscapePolicy.EXTENDED,
    encoding: str = "utf-8",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """
    Read a stream to its end and feed every definition to the sink.

    The stream may yield str or bytes; bytes are decoded incrementally with
    the given encoding. Line endings are handled by Parser.
    The stream is not closed.

    :return: Number of definitions committed.
    :raises ParseError: On the first malformed definition.
    :raises OSError: Read failures propagate unchanged.
    """
    parser = Parser(sink, policy)
    decoder: Optional[codecs.IncrementalDecoder] = None

    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        if isinstance(chunk, (bytes, bytearray)):
            if decoder is None:
                decoder = codecs.getincrementaldecoder(encoding)()
            chunk = decoder.decode(chunk)
        parser.feed(chunk)

    if decoder is not None:
        parser.feed(decoder.decode(b"", final=True))
    parser.close()

    logger.debug("Loaded %d definitions over %d lines", parser.committed, parser.line_number)
    return parser.committed
