"""Stage 1: BOM (Byte Order Mark) classification.

Follows the table in Appendix F.1 of the XML 1.0 recommendation,
"Detection Without External Encoding Information".
"""

from __future__ import annotations

from xhtmlchardet._utils import BOM_SIZE
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
    Descriptor,
)

# Checked in order, first prefix wins.  The four UCS-4 marks come first so
# the two-byte UTF-16 marks only match when they are followed by something
# other than 00 00.
_BOMS: tuple[tuple[bytes, Descriptor], ...] = (
    (b"\x00\x00\xfe\xff", UCS_4_BE),
    (b"\xff\xfe\x00\x00", UCS_4_LE),
    (b"\x00\x00\xff\xfe", UCS_4_2143),
    (b"\xfe\xff\x00\x00", UCS_4_3412),
    (b"\xfe\xff", UTF_16_BE),
    (b"\xff\xfe", UTF_16_LE),
    (b"\xef\xbb\xbf", UTF_8),
)

# "<?xm" (or just its "<") in each width and byte order, plus EBCDIC "<?xm".
_DECLARATION_STARTS: dict[bytes, Descriptor] = {
    b"\x00\x00\x00\x3c": ASCII_32BIT_BE,
    b"\x3c\x00\x00\x00": ASCII_32BIT_LE,
    b"\x00\x00\x3c\x00": ASCII_32BIT_2143,
    b"\x00\x3c\x00\x00": ASCII_32BIT_3412,
    b"\x00\x3c\x00\x3f": ASCII_16BIT_BE,
    b"\x3c\x00\x3f\x00": ASCII_16BIT_LE,
    b"\x3c\x3f\x78\x6d": ASCII_8BIT,
    b"\x4c\x6f\xa7\x94": EBCDIC,
}


def detect_byte_order_mark(head: bytes) -> Descriptor | None:
    """Classify the first four bytes of a stream.

    Inputs shorter than four bytes are padded with zero bytes, so an empty
    stream is classified exactly like ``00 00 00 00``.  Bytes past the
    fourth are ignored.

    :param head: The leading bytes of the stream.
    :returns: The matching :class:`Descriptor`, or ``None`` when the bytes
        carry no recognisable pattern (which may well be UTF-8 without a
        declaration, since none is required for it).
    """
    head = bytes(head[:BOM_SIZE]).ljust(BOM_SIZE, b"\x00")
    for bom_bytes, descriptor in _BOMS:
        if head.startswith(bom_bytes):
            return descriptor
    return _DECLARATION_STARTS.get(head)
