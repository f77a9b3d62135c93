"""Detection pipeline stages and shared types."""

from __future__ import annotations

import dataclasses

from xhtmlchardet.enums import ByteOrder, Flavour, Width


@dataclasses.dataclass(frozen=True, slots=True)
class Descriptor:
    """What the first four bytes of a stream say about its encoding.

    Frozen dataclass holding the encoding family, the code unit width and
    the byte order within a code unit.  Width and byte order together fix
    the stride and starting offset used to pull ASCII-range characters out
    of a multi-byte buffer.
    """

    flavour: Flavour
    width: Width
    byte_order: ByteOrder

    def __post_init__(self) -> None:
        if (
            self.byte_order is ByteOrder.NOT_APPLICABLE
            and self.width is not Width.EIGHT_BIT
        ):
            msg = f"byte order is required for {self.width.value}-bit code units"
            raise ValueError(msg)

    @property
    def chunk_size(self) -> int:
        """Number of bytes per code unit."""
        return self.width.chunk_size


# 32-bit encodings
UCS_4_BE = Descriptor(Flavour.UCS, Width.THIRTY_TWO_BIT, ByteOrder.BIG_ENDIAN)
UCS_4_LE = Descriptor(Flavour.UCS, Width.THIRTY_TWO_BIT, ByteOrder.LITTLE_ENDIAN)
UCS_4_2143 = Descriptor(Flavour.UCS, Width.THIRTY_TWO_BIT, ByteOrder.UNUSUAL_2143)
UCS_4_3412 = Descriptor(Flavour.UCS, Width.THIRTY_TWO_BIT, ByteOrder.UNUSUAL_3412)

# 16-bit encodings
UTF_16_BE = Descriptor(Flavour.UTF, Width.SIXTEEN_BIT, ByteOrder.BIG_ENDIAN)
UTF_16_LE = Descriptor(Flavour.UTF, Width.SIXTEEN_BIT, ByteOrder.LITTLE_ENDIAN)

UTF_8 = Descriptor(Flavour.UTF, Width.EIGHT_BIT, ByteOrder.NOT_APPLICABLE)
EBCDIC = Descriptor(Flavour.EBCDIC, Width.EIGHT_BIT, ByteOrder.NOT_APPLICABLE)

# ASCII-compatible encodings recognised from a bare "<?xml" without a BOM
ASCII_32BIT_BE = Descriptor(
    Flavour.UNKNOWN, Width.THIRTY_TWO_BIT, ByteOrder.BIG_ENDIAN
)
ASCII_32BIT_LE = Descriptor(
    Flavour.UNKNOWN, Width.THIRTY_TWO_BIT, ByteOrder.LITTLE_ENDIAN
)
ASCII_32BIT_2143 = Descriptor(
    Flavour.UNKNOWN, Width.THIRTY_TWO_BIT, ByteOrder.UNUSUAL_2143
)
ASCII_32BIT_3412 = Descriptor(
    Flavour.UNKNOWN, Width.THIRTY_TWO_BIT, ByteOrder.UNUSUAL_3412
)
ASCII_16BIT_BE = Descriptor(Flavour.UNKNOWN, Width.SIXTEEN_BIT, ByteOrder.BIG_ENDIAN)
ASCII_16BIT_LE = Descriptor(
    Flavour.UNKNOWN, Width.SIXTEEN_BIT, ByteOrder.LITTLE_ENDIAN
)
ASCII_8BIT = Descriptor(Flavour.ASCII, Width.EIGHT_BIT, ByteOrder.NOT_APPLICABLE)

#: Assumed by downstream stages when no byte pattern was recognised.
DEFAULT_DESCRIPTOR: Descriptor = ASCII_8BIT
