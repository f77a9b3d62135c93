"""Command-line interface for xhtmlchardet."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import xhtmlchardet

_UNDETERMINED = "undetermined"


def _format(label: str, candidates: list[str], minimal: bool) -> str:
    if minimal:
        return candidates[0] if candidates else _UNDETERMINED
    return f"{label}: {', '.join(candidates) or _UNDETERMINED}"


def main(argv: list[str] | None = None) -> None:
    """Run the ``xhtmlchardetect`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Detect the character encoding of XML and HTML files."
    )
    parser.add_argument("files", nargs="*", help="Files to detect encoding of")
    parser.add_argument(
        "--hint", default=None, help="Encoding suggested by an external source"
    )
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the best encoding name"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log each detection step"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"xhtmlchardet {xhtmlchardet.__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    failed = False
    if args.files:
        for filepath in args.files:
            try:
                with Path(filepath).open("rb") as f:
                    candidates = xhtmlchardet.detect(f, args.hint)
            except OSError as e:
                print(f"xhtmlchardetect: {filepath}: {e}", file=sys.stderr)
                failed = True
                continue
            print(_format(filepath, candidates, args.minimal))
    else:
        candidates = xhtmlchardet.detect(sys.stdin.buffer, args.hint)
        print(_format("stdin", candidates, args.minimal))

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
