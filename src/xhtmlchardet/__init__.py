"""Basic character set detection for XML and HTML.

Example::

    >>> import io, xhtmlchardet
    >>> text = b'<?xml version="1.0" encoding="ISO-8859-1"?><channel/>'
    >>> xhtmlchardet.detect(io.BytesIO(text))
    ['iso-8859-1']
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO

from xhtmlchardet._utils import (
    BOM_SIZE,
    DEFAULT_SCAN_BYTES,
    _validate_hint,
    _validate_scan_bytes,
)
from xhtmlchardet.pipeline.orchestrator import run_pipeline

__version__ = "1.0.0"
__all__ = [
    "detect",
    "detect_bytes",
]

logger = logging.getLogger(__name__)


def detect(
    source: BinaryIO,
    hint: str | None = None,
    *,
    scan_bytes: int = DEFAULT_SCAN_BYTES,
) -> list[str]:
    """Detect the likely encodings of the byte stream *source*.

    *source* should be positioned at the start of the stream.  At most
    ``4 + scan_bytes`` bytes are read and the stream is never rewound.

    :param source: A readable binary stream.
    :param hint: A possible encoding name received outside the text itself,
        such as from an HTTP header.  It ranks below an in-document
        declaration and above the byte order mark.
    :param scan_bytes: How many bytes after the first four to scan for an
        encoding declaration, at most 1 MiB.
    :returns: Lower-case encoding names, most likely first.  The list is
        empty when the encoding could not be determined.
    :raises OSError: If reading the first four bytes fails.
    """
    _validate_hint(hint)
    _validate_scan_bytes(scan_bytes)

    head = source.read(BOM_SIZE) or b""

    # Only the first read is required to succeed; the rest is a best effort.
    try:
        body = source.read(scan_bytes) or b""
    except OSError as e:
        logger.debug("could not read declaration bytes, scanning none: %s", e)
        body = b""

    return run_pipeline(head, body, hint)


def detect_bytes(
    data: bytes | bytearray,
    hint: str | None = None,
    *,
    scan_bytes: int = DEFAULT_SCAN_BYTES,
) -> list[str]:
    """Detect the likely encodings of an in-memory byte string.

    Same as :func:`detect` with *data* wrapped in a stream.
    """
    return detect(io.BytesIO(bytes(data)), hint, scan_bytes=scan_bytes)
