"""propfile: reader and writer for line-oriented key=value property files

This package loads and stores ".properties" style text: one key=value
definition per logical line, backslash escapes, trailing-backslash line
continuation and full-line '#' comments.

Responsibilities:
    - Property table holding string values under non-empty string keys
    - Streaming parser with line-numbered error reporting
    - Serializer whose output loads back into an equal table

Interactions:
    - Client code through Properties, loads() and dumps()
    - Caller-owned text or byte streams (never closed here)
    - Logging system for diagnostics

Cross-cutting Concerns:
    Thread Safety:
        - No internal locking; one owner per Properties instance

    Error Handling:
        - ParseError hierarchy carrying the offending line number
        - Stream I/O errors propagate unchanged

    Logging:
        - Module-level loggers under the "propfile" namespace
        - No handlers installed by the library
"""

from propfile.core import (
    EmptyKeyError,
    EscapePolicy,
    IllegalEscapeError,
    MissingSeparatorError,
    ParseError,
    Properties,
    PropertiesError,
    UnterminatedContinuationError,
    dumps,
    loads,
)

__version__ = "0.1.0"

__all__ = [
    "EmptyKeyError",
    "EscapePolicy",
    "IllegalEscapeError",
    "MissingSeparatorError",
    "ParseError",
    "Properties",
    "PropertiesError",
    "UnterminatedContinuationError",
    "dumps",
    "loads",
]
