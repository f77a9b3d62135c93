"""Pipeline orchestrator: assembles the ordered candidate list."""

from __future__ import annotations

import logging

from xhtmlchardet.equivalences import (
    bom_encoding_name,
    endianify,
    normalize_encoding_name,
)
from xhtmlchardet.pipeline import Descriptor
from xhtmlchardet.pipeline.bom import detect_byte_order_mark
from xhtmlchardet.pipeline.markup import find_declared_encoding
from xhtmlchardet.pipeline.utf8 import is_utf8

logger = logging.getLogger(__name__)


def _push_if_absent(candidates: list[str], encoding: str, source: str) -> None:
    if encoding in candidates:
        logger.debug("%s candidate %r already present", source, encoding)
        return
    logger.debug("%s candidate %r", source, encoding)
    candidates.append(encoding)


def _resolve(name: str, descriptor: Descriptor | None) -> str:
    return endianify(normalize_encoding_name(name), descriptor)


def run_pipeline(head: bytes, body: bytes, hint: str | None = None) -> list[str]:
    """Run every detection stage and return the candidate encodings.

    Candidates are ordered by confidence: the in-document declaration, then
    *hint*, then the name implied by the byte order mark.  UTF-8 is offered
    only when nothing else matched and *body* is valid UTF-8.

    :param head: The first bytes of the stream (at most four are used).
    :param body: The bytes that followed *head*, scanned for a declaration.
    :param hint: An encoding name obtained outside the document, such as
        the charset of an HTTP ``Content-Type`` header.
    :returns: Lower-case encoding names without duplicates.  An empty list
        means the encoding could not be determined.
    """
    descriptor = detect_byte_order_mark(head)
    logger.debug("leading bytes %r classified as %s", bytes(head[:4]), descriptor)

    candidates: list[str] = []

    declared = find_declared_encoding(body, descriptor)
    if declared is not None:
        _push_if_absent(candidates, _resolve(declared, descriptor), "declared")

    if hint is not None:
        _push_if_absent(candidates, _resolve(hint, descriptor), "hint")

    bom_name = bom_encoding_name(descriptor)
    if bom_name is not None:
        _push_if_absent(candidates, bom_name, "bom")

    if not candidates and is_utf8(body):
        _push_if_absent(candidates, "utf-8", "fallback")

    if not candidates:
        logger.debug("no encoding candidates found")
    return candidates
