# tests/unit/test_escaping.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from propfile.core import escaping
from propfile.core.types import EscapePolicy

STRICT = EscapePolicy.STRICT
EXTENDED = EscapePolicy.EXTENDED

# -----------------------------------------------------------------------------
# DECODING
# -----------------------------------------------------------------------------


@pytest.mark.parametrize("policy", [STRICT, EXTENDED])
def test_decode_common_targets(policy):
    assert escaping.decode("\\", policy) == "\\"
    assert escaping.decode("=", policy) == "="


def test_decode_control_targets_extended():
    assert escaping.decode("n", EXTENDED) == "\n"
    assert escaping.decode("r", EXTENDED) == "\r"
    assert escaping.decode("t", EXTENDED) == "\t"


@pytest.mark.parametrize("target", ["n", "r", "t"])
def test_decode_control_targets_rejected_when_strict(target):
    assert escaping.decode(target, STRICT) is None


@pytest.mark.parametrize("policy", [STRICT, EXTENDED])
@pytest.mark.parametrize("target", ["X", "u", "#", " ", ":"])
def test_decode_unknown_targets(policy, target):
    assert escaping.decode(target, policy) is None


# -----------------------------------------------------------------------------
# ENCODING
# -----------------------------------------------------------------------------


def test_escape_key_escapes_separator_and_backslash():
    assert escaping.escape_key("a=b", EXTENDED) == "a\\=b"
    assert escaping.escape_key("a\\b", EXTENDED) == "a\\\\b"


def test_escape_value_keeps_separator():
    assert escaping.escape_value("a=b=c", EXTENDED) == "a=b=c"
    assert escaping.escape_value("C:\\dir", EXTENDED) == "C:\\\\dir"


def test_escape_control_characters_extended():
    assert escaping.escape_value("a\nb\tc\rd", EXTENDED) == "a\\nb\\tc\\rd"


def test_escape_newline_strict_uses_continuation():
    assert escaping.escape_value("a\nb", STRICT) == "a\\\nb"
    assert escaping.escape_value("a\tb", STRICT) == "a\tb"


# -----------------------------------------------------------------------------
# RELOADABILITY
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    "key,value",
    [("key", "value"), ("a=b", "c=d"), ("path", "C:\\dir"), ("key", ""), ("k", "a # b")],
)
def test_reloadable_entries(key, value):
    assert escaping.is_reloadable(key, value, STRICT)
    assert escaping.is_reloadable(key, value, EXTENDED)


@pytest.mark.parametrize(
    "key,value",
    [("", "value"), ("#key", "value"), (" key", "value"), ("key", "value "), ("key", " value")],
)
def test_unreloadable_entries(key, value):
    assert not escaping.is_reloadable(key, value, EXTENDED)


def test_control_characters_reloadable_only_when_extended():
    assert escaping.is_reloadable("key", "a\nb", EXTENDED)
    assert escaping.is_reloadable("key", "\tindented\t", EXTENDED)
    assert not escaping.is_reloadable("key", "a\nb", STRICT)
    assert not escaping.is_reloadable("key", "\tindented", STRICT)


def test_carriage_return_reloadable_unless_it_ends_strict_value():
    assert escaping.is_reloadable("key", "a\rb", STRICT)
    assert escaping.is_reloadable("key\r", "\ra", STRICT)
    assert not escaping.is_reloadable("key", "a\r", STRICT)
    assert escaping.is_reloadable("key", "a\r", EXTENDED)
