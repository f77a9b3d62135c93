"""Stage 3: UTF-8 fallback validation."""

from __future__ import annotations


def is_utf8(data: bytes) -> bool:
    """Return True if *data* decodes as UTF-8 without any errors.

    Unlike the declaration scan this is strict: a single invalid or
    truncated sequence anywhere in *data* rules UTF-8 out.  Empty input is
    valid UTF-8.
    """
    try:
        data.decode("utf-8", errors="strict")
    except UnicodeDecodeError:
        return False
    return True
