# tests/test_equivalences.py
from __future__ import annotations

import pytest

from xhtmlchardet.equivalences import (
    bom_encoding_name,
    endianify,
    normalize_encoding_name,
)
from xhtmlchardet.pipeline import (
    ASCII_8BIT,
    ASCII_16BIT_BE,
    ASCII_16BIT_LE,
    ASCII_32BIT_2143,
    ASCII_32BIT_3412,
    ASCII_32BIT_BE,
    ASCII_32BIT_LE,
    EBCDIC,
    UCS_4_2143,
    UCS_4_3412,
    UCS_4_BE,
    UCS_4_LE,
    UTF_8,
    UTF_16_BE,
    UTF_16_LE,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("ISO-8859-1", "iso-8859-1"),
        ("US-ASCII", "ascii"),
        ("UTF8", "utf-8"),
        ("utf-8", "utf-8"),
        ("Shift-JIS", "shift_jis"),
        ("shift_jis", "shift_jis"),
        ("Windows-1252", "windows-1252"),
    ],
)
def test_normalize_encoding_name(name, expected):
    assert normalize_encoding_name(name) == expected


def test_normalize_replaces_substrings():
    assert normalize_encoding_name("x-us-ascii") == "x-ascii"
    assert normalize_encoding_name("x-sjis") == "x-sjis"


def test_normalize_is_idempotent():
    for name in ("US-ASCII", "UTF8", "Shift-JIS", "EUC-KR"):
        once = normalize_encoding_name(name)
        assert normalize_encoding_name(once) == once


def test_endianify_little_endian():
    assert endianify("utf-16", UTF_16_LE) == "utf-16le"
    assert endianify("utf-16", ASCII_16BIT_LE) == "utf-16le"


def test_endianify_big_endian():
    assert endianify("utf-16", UTF_16_BE) == "utf-16be"
    assert endianify("utf-16", ASCII_16BIT_BE) == "utf-16be"


def test_endianify_uses_byte_order_regardless_of_width():
    assert endianify("utf-16", UCS_4_LE) == "utf-16le"
    assert endianify("utf-16", ASCII_32BIT_BE) == "utf-16be"


def test_endianify_leaves_other_orders_alone():
    assert endianify("utf-16", UCS_4_2143) == "utf-16"
    assert endianify("utf-16", UCS_4_3412) == "utf-16"
    assert endianify("utf-16", UTF_8) == "utf-16"
    assert endianify("utf-16", None) == "utf-16"


def test_endianify_leaves_other_names_alone():
    assert endianify("utf-16le", UTF_16_BE) == "utf-16le"
    assert endianify("utf-32", UCS_4_LE) == "utf-32"
    assert endianify("iso-8859-1", UTF_16_LE) == "iso-8859-1"


@pytest.mark.parametrize(
    ("descriptor", "expected"),
    [
        (UCS_4_LE, "ucs-4le"),
        (UCS_4_BE, "ucs-4be"),
        (UTF_16_LE, "utf-16le"),
        (UTF_16_BE, "utf-16be"),
        (UTF_8, "utf-8"),
        (EBCDIC, "ebcdic"),
        (UCS_4_2143, None),
        (UCS_4_3412, None),
        (ASCII_32BIT_BE, None),
        (ASCII_32BIT_LE, None),
        (ASCII_32BIT_2143, None),
        (ASCII_32BIT_3412, None),
        (ASCII_16BIT_BE, None),
        (ASCII_16BIT_LE, None),
        (ASCII_8BIT, None),
        (None, None),
    ],
)
def test_bom_encoding_name(descriptor, expected):
    assert bom_encoding_name(descriptor) == expected
