"""Stage 2: in-document encoding declaration extraction.

Looks for ``encoding="..."`` (XML declaration) or ``charset="..."``
(HTML ``<meta>``) in the leading bytes of the stream.  Wide encodings are
first reduced to one byte per code unit so the ASCII-range characters of
the declaration can be matched directly.
"""

from __future__ import annotations

from xhtmlchardet.enums import ByteOrder
from xhtmlchardet.pipeline import DEFAULT_DESCRIPTOR, Descriptor

_NEEDLES: tuple[str, ...] = ("encoding=", "charset=")
_QUOTES = "\"'"


def _start_index(descriptor: Descriptor) -> int:
    """Offset of the byte that holds the ASCII value within a code unit."""
    order = descriptor.byte_order
    if order is ByteOrder.BIG_ENDIAN:
        return descriptor.chunk_size - 1
    if order is ByteOrder.UNUSUAL_2143:
        return 2
    if order is ByteOrder.UNUSUAL_3412:
        return 1
    return 0


def logical_bytes(haystack: bytes, descriptor: Descriptor | None = None) -> bytes:
    """Keep one byte per code unit of *haystack*.

    :param haystack: Raw bytes, assumed to start on a code unit boundary.
    :param descriptor: Width and byte order of the data.  Defaults to
        8-bit, in which case *haystack* is returned unchanged.
    :returns: The sampled bytes.
    """
    descriptor = descriptor or DEFAULT_DESCRIPTOR
    return bytes(haystack[_start_index(descriptor) :: descriptor.chunk_size])


def search(
    needle: str, haystack: bytes, descriptor: Descriptor | None = None
) -> str | None:
    """Return the quoted value that follows *needle* in *haystack*.

    The value runs from the end of the needle, past any opening quotes, up
    to the next quote or the end of the scanned text.  Undecodable bytes are
    replaced rather than rejected.

    :param needle: Literal text to find, e.g. ``"encoding="``.
    :param haystack: The raw bytes to scan.
    :param descriptor: Width and byte order used to reduce *haystack*.
    :returns: The extracted value (possibly empty), or ``None`` if *needle*
        does not occur.
    """
    text = logical_bytes(haystack, descriptor).decode("utf-8", errors="replace")
    pos = text.find(needle)
    if pos == -1:
        return None
    value = text[pos + len(needle) :].lstrip(_QUOTES)
    for i, char in enumerate(value):
        if char in _QUOTES:
            return value[:i]
    return value


def find_declared_encoding(
    haystack: bytes, descriptor: Descriptor | None = None
) -> str | None:
    """Return the raw declared encoding name, trying ``encoding=`` first."""
    for needle in _NEEDLES:
        declared = search(needle, haystack, descriptor)
        if declared is not None:
            return declared
    return None
