"""Internal shared utilities for xhtmlchardet."""

from __future__ import annotations

#: Number of leading bytes inspected for a byte order mark.
BOM_SIZE: int = 4

#: Default number of bytes after the BOM scanned for a declaration.
DEFAULT_SCAN_BYTES: int = 512

#: Largest accepted scan window.  Unbuffered reads allocate it up front.
MAX_SCAN_BYTES: int = 1 << 20


def _validate_scan_bytes(scan_bytes: int) -> None:
    """Raise ValueError if *scan_bytes* is not a positive integer within bounds."""
    if (
        isinstance(scan_bytes, bool)
        or not isinstance(scan_bytes, int)
        or scan_bytes < 1
    ):
        msg = "scan_bytes must be a positive integer"
        raise ValueError(msg)
    if scan_bytes > MAX_SCAN_BYTES:
        msg = f"scan_bytes must not exceed {MAX_SCAN_BYTES}"
        raise ValueError(msg)


def _validate_hint(hint: str | None) -> None:
    """Raise TypeError if *hint* is neither a string nor ``None``."""
    if hint is not None and not isinstance(hint, str):
        msg = f"hint must be a str or None, not {type(hint).__name__}"
        raise TypeError(msg)
