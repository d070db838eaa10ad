"""Interface for ``python -m url_values``."""

from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser, FileType
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Sequence

from ._version import version
from .flattening import ValueFlattener


__all__ = ["main"]

logger = logging.getLogger(__name__)


def main(args: Sequence[str] | None = None) -> int:
    """Flatten a JSON document and print its canonical query string."""
    parser = ArgumentParser(prog="url_values", description=main.__doc__)
    _ = parser.add_argument("-v", "--verbose", action="store_true", help="log elided fields")
    _ = parser.add_argument("--version", action="version", version=version)
    _ = parser.add_argument("--sep", default=".", help="key path separator (default: %(default)s)")
    _ = parser.add_argument(
        "source",
        nargs="?",
        type=FileType("r"),
        default=sys.stdin,
        help="JSON file to read (default: stdin)",
    )
    options = parser.parse_args(args)

    logging.basicConfig(level=logging.DEBUG if options.verbose else logging.WARNING)

    with options.source as source:
        try:
            document = json.load(source)
        except json.JSONDecodeError as exc:
            print(f"error: invalid JSON: {exc}", file=sys.stderr)
            return 1

    try:
        flattener = ValueFlattener(sep=options.sep)
        values = flattener.to_url_values(document)
    except ValueError as exc:
        logger.debug("flattening failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(values.encode())
    return 0


if __name__ == "__main__":
    sys.exit(main())
