# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import io

import pytest

from propfile import EscapePolicy, Properties


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


@pytest.fixture
def properties() -> Properties:
    """An empty table using the default (extended) escapes."""
    return Properties()


@pytest.fixture
def strict_properties() -> Properties:
    """An empty table accepting only the backslash and separator escapes."""
    return Properties(escape_policy=EscapePolicy.STRICT)


@pytest.fixture
def load_text():
    """Load a string into a table and return the table."""

    def _load(props: Properties, text: str) -> Properties:
        props.load(io.StringIO(text))
        return props

    return _load


@pytest.fixture
def store_text():
    """Store a table and return the produced text."""

    def _store(props: Properties) -> str:
        stream = io.StringIO()
        props.store(stream)
        return stream.getvalue()

    return _store
