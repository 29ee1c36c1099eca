# propfile/core/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from propfile.core.errors import (
    EmptyKeyError,
    IllegalEscapeError,
    MissingSeparatorError,
    ParseError,
    PropertiesError,
    UnterminatedContinuationError,
)
from propfile.core.parser import Parser, parse_stream
from propfile.core.properties import Properties, dumps, loads
from propfile.core.serializer import format_entry, write_entries
from propfile.core.types import EscapePolicy, ScanState

__all__ = [
    "EmptyKeyError",
    "EscapePolicy",
    "IllegalEscapeError",
    "MissingSeparatorError",
    "ParseError",
    "Parser",
    "Properties",
    "PropertiesError",
    "ScanState",
    "UnterminatedContinuationError",
    "dumps",
    "format_entry",
    "loads",
    "parse_stream",
    "write_entries",
]
