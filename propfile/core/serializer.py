# propfile/core/serializer.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Writer for the properties text format.

Each entry becomes one 'key=value' line. Keys and values go through the
escaping module so that the parser reads them back unchanged.
"""

from __future__ import annotations

import io
import logging
from typing import IO, Iterable, Tuple

from propfile.core import escaping
from propfile.core.types import NEWLINE, SEPARATOR, EscapePolicy

logger = logging.getLogger(__name__)


def format_entry(key: str, value: str, policy: EscapePolicy = EscapePolicy.EXTENDED) -> str:
    """Render a single definition, newline included."""
    return escaping.escape_key(key, policy) + SEPARATOR + escaping.escape_value(value, policy) + NEWLINE


def is_text_stream(stream: IO) -> bool:
    """
    Guess whether a writable stream takes str rather than bytes.
    Objects that do not tell are treated as byte sinks.
    """
    if isinstance(stream, io.TextIOBase):
        return True
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return False
    mode = getattr(stream, "mode", None)
    return isinstance(mode, str) and "b" not in mode


def write_entries(
    stream: IO,
    entries: Iterable[Tuple[str, str]],
    policy: EscapePolicy = EscapePolicy.EXTENDED,
    encoding: str = "utf-8",
) -> int:
    """
    Write every entry to the stream, one write per line.

    The first write failure propagates and stops the remaining writes; lines
    already written stay written. The stream is neither flushed nor closed.

    :return: Number of lines written.
    """
    text = is_text_stream(stream)
    written = 0
    for key, value in entries:
        if not escaping.is_reloadable(key, value, policy):
            logger.warning("Property %r cannot be loaded back verbatim under %s escaping", key, policy.name)
        line = format_entry(key, value, policy)
        stream.write(line if text else line.encode(encoding))
        written += 1
    logger.debug("Stored %d definitions", written)
    return written
