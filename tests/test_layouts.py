"""Tests for lconvert.layouts — layout enumeration and name parsing."""

from __future__ import annotations

import pytest

from lconvert.errors import UnknownLayoutError
from lconvert.layouts import HUB, PERIPHERALS, Layout, parse_layout, supported_names


def test_hub_is_qwerty():
    assert HUB is Layout.QWERTY
    assert HUB not in PERIPHERALS
    assert set(PERIPHERALS) | {HUB} == set(Layout)


def test_supported_names_in_declaration_order():
    assert supported_names() == ['qwerty', 'dvorak', 'colemak', 'russian']


@pytest.mark.parametrize("name, expected", [
    ('qwerty', Layout.QWERTY),
    ('Dvorak', Layout.DVORAK),
    ('COLEMAK', Layout.COLEMAK),
    ('rUsSiAn', Layout.RUSSIAN),
    ('  dvorak\n', Layout.DVORAK),
    ('us', Layout.QWERTY),
    ('EN', Layout.QWERTY),
    ('ru', Layout.RUSSIAN),
])
def test_parse_layout(name, expected):
    assert parse_layout(name) is expected


def test_parse_layout_passes_layout_through():
    assert parse_layout(Layout.COLEMAK) is Layout.COLEMAK


@pytest.mark.parametrize("name", ['azerty', '', 'qwerty2', 'dvo rak'])
def test_unknown_layout_carries_name(name):
    with pytest.raises(UnknownLayoutError) as exc_info:
        parse_layout(name)
    assert exc_info.value.name == name


def test_unknown_layout_non_string():
    with pytest.raises(UnknownLayoutError) as exc_info:
        parse_layout(None)
    assert exc_info.value.name is None


def test_unknown_layout_is_value_error():
    with pytest.raises(ValueError):
        parse_layout('azerty')


def test_str_is_canonical_name():
    assert str(Layout.RUSSIAN) == 'russian'
