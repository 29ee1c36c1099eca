# propfile/core/properties.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import io
from typing import IO, Any, Dict, ItemsView, Iterator, KeysView, Tuple, Union

from propfile.core.parser import DEFAULT_CHUNK_SIZE, parse_stream
from propfile.core.serializer import write_entries
from propfile.core.types import EscapePolicy


class Properties:
    """
    A table of string properties keyed by non-empty strings, used to
    centralize the configuration data of an application.

    Each instance is independent and owned by its caller. There is no
    internal locking; share an instance across threads only under external
    synchronization.
    """

    def __init__(
        self,
        escape_policy: EscapePolicy = EscapePolicy.EXTENDED,
        encoding: str = "utf-8",
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        """
        Create an empty table.

        :param escape_policy: Escape targets accepted by load() and produced by store().
        :param encoding: Encoding used with byte streams in both directions.
        :param chunk_size: Number of characters or bytes requested per read.
        :raises ValueError: If chunk_size is not positive.
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._values: Dict[str, str] = {}
        self.escape_policy = escape_policy
        self.encoding = encoding
        self.chunk_size = chunk_size

    def set(self, key: str, value: str) -> None:
        """
        Assign the value to the property with the given key. An existing
        value is replaced and discarded.
        """
        self._values[key] = value

    def get(self, key: str) -> Tuple[str, bool]:
        """
        Retrieve the value of the property with the given key.

        :return: (value, present). When there is no such property, present is
            False and value is "", so an empty value stays distinguishable.
        """
        if key in self._values:
            return self._values[key], True
        return "", False

    def load(self, stream: IO) -> int:
        """
        Parse definitions from a text or byte stream into this table. Later
        definitions of a key overwrite earlier ones, including those already
        in the table.

        On error, definitions read before the faulty line remain in the table.

        :param stream: Object with a read(size) method; it is not closed.
        :return: Number of definitions read.
        :raises ParseError: If the input is not in the properties format.
        """
        return parse_stream(
            stream,
            self.set,
            policy=self.escape_policy,
            encoding=self.encoding,
            chunk_size=self.chunk_size,
        )

    def store(self, stream: IO) -> int:
        """
        Write every property to the stream as a 'key=value' line, in no
        particular order.

        :param stream: Text or byte sink; it is neither flushed nor closed.
        :return: Number of lines written.
        """
        return write_entries(stream, self._values.items(), policy=self.escape_policy, encoding=self.encoding)

    def keys(self) -> KeysView[str]:
        return self._values.keys()

    def items(self) -> ItemsView[str, str]:
        return self._values.items()

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Properties):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"


def loads(data: Union[str, bytes], **options: Any) -> Properties:
    """
    Parse a string (or bytes) into a new Properties table.

    :param options: Keyword arguments for the Properties constructor.
    """
    properties = Properties(**options)
    stream = io.BytesIO(data) if isinstance(data, (bytes, bytearray)) else io.StringIO(data, newline="")
    properties.load(stream)
    return properties


def dumps(properties: Properties) -> str:
    """Serialize a Properties table to a string."""
    stream = io.StringIO(newline="")
    properties.store(stream)
    return stream.getvalue()
