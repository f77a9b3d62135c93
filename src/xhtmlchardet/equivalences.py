"""Encoding name normalisation and equivalences.

This module defines:

1. **Alias normalisation**: a small fixed table that folds a few common
   spellings onto the names Python's codec registry prefers.

2. **Endian resolution**: the generic ``utf-16`` name is narrowed to its
   little- or big-endian variant when the byte order is already known
   from the leading bytes.

3. **BOM-derived names**: the encoding name a recognised byte pattern
   implies on its own.
"""

from __future__ import annotations

from xhtmlchardet.enums import ByteOrder, Flavour, Width
from xhtmlchardet.pipeline import (
    DEFAULT_DESCRIPTOR,
    EBCDIC,
    UCS_4_BE,
    UCS_4_LE,
    UTF_16_BE,
    UTF_16_LE,
    Descriptor,
)

# Applied in order as substring replacements on the lower-cased name.
ALIASES: tuple[tuple[str, str], ...] = (
    ("us-ascii", "ascii"),
    ("utf8", "utf-8"),
    ("shift-jis", "shift_jis"),
)

_ENDIAN_SUFFIXES: dict[ByteOrder, str] = {
    ByteOrder.LITTLE_ENDIAN: "le",
    ByteOrder.BIG_ENDIAN: "be",
}

# Only these descriptors name an encoding by themselves.  UCS-4 in the
# unusual orders and the bare "<?xml" patterns only tell us the width.
BOM_NAMES: dict[Descriptor, str] = {
    UCS_4_LE: "ucs-4le",
    UCS_4_BE: "ucs-4be",
    UTF_16_LE: "utf-16le",
    UTF_16_BE: "utf-16be",
    EBCDIC: "ebcdic",
}


def normalize_encoding_name(name: str) -> str:
    """Lower-case *name* and fold the known aliases."""
    name = name.lower()
    for alias, canonical in ALIASES:
        name = name.replace(alias, canonical)
    return name


def endianify(name: str, descriptor: Descriptor | None = None) -> str:
    """Add the byte order to a generic ``utf-16`` name when it is known.

    A declaration may say just ``UTF-16`` while the BOM has already pinned
    down the byte order.  Any other name, or any other byte order, is
    returned unchanged.
    """
    if name != "utf-16":
        return name
    order = (descriptor or DEFAULT_DESCRIPTOR).byte_order
    suffix = _ENDIAN_SUFFIXES.get(order)
    return name if suffix is None else name + suffix


def bom_encoding_name(descriptor: Descriptor | None) -> str | None:
    """Return the encoding name implied by *descriptor* alone, if any."""
    if descriptor is None:
        return None
    if descriptor.flavour is Flavour.UTF and descriptor.width is Width.EIGHT_BIT:
        return "utf-8"
    return BOM_NAMES.get(descriptor)
