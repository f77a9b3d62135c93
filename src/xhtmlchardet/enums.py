"""Enumerations for xhtmlchardet."""

import enum


class Flavour(enum.Enum):
    """Broad encoding family implied by the leading bytes of a stream."""

    UCS = "ucs"
    UTF = "utf"
    EBCDIC = "ebcdic"
    ASCII = "ascii"
    UNKNOWN = "unknown"


class Width(enum.IntEnum):
    """Number of bits per logical code unit."""

    EIGHT_BIT = 8
    SIXTEEN_BIT = 16
    THIRTY_TWO_BIT = 32

    @property
    def chunk_size(self) -> int:
        """Number of bytes per code unit."""
        return self.value // 8


class ByteOrder(enum.Enum):
    """Ordering of bytes within a multi-byte code unit.

    The two unusual orders are named after the position of the bytes of
    a 32-bit unit, e.g. ``2143`` stores the bytes of ``1234`` swapped
    pairwise.
    """

    BIG_ENDIAN = "be"
    LITTLE_ENDIAN = "le"
    UNUSUAL_2143 = "2143"
    UNUSUAL_3412 = "3412"
    NOT_APPLICABLE = "n/a"
