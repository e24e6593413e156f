"""Command line listing of the scales of an EDO, one page at a time."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from ._impl.config import settings
from ._impl.enumerator import ScaleEnumerator, ScaleParamError, countCompositions
from ._impl.names import UNKNOWN_SCALE
from ._impl.paging import Pager
from ._impl.utils.number import resolvePositiveReal

_logger = logging.getLogger("edoscales")

INVALID_INPUT_MESSAGE = "Please enter valid positive integers for EDO and Scale Size."


def _parseInt(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _label(scale) -> str:
    if (name := scale.name) is not None:
        return name
    if (named := scale.namedRotation()) is not None:
        shift, name = named
        return f"rotation {shift} of {name}"
    return UNKNOWN_SCALE


def _buildParser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edoscales",
        description="List the scales of an equal division of the octave, "
        "counting modes of the same scale once.",
    )
    parser.add_argument("edo", help="number of equal divisions of the octave")
    parser.add_argument("size", help="number of notes in each scale")
    parser.add_argument("--page", type=int, default=1, help="1-based page to show")
    parser.add_argument(
        "--page-size",
        type=int,
        default=settings.pageSize,
        help=f"scales per page (default: {settings.pageSize})",
    )
    parser.add_argument(
        "--count", action="store_true", help="only print how many scales exist"
    )
    parser.add_argument(
        "--freqs", action="store_true", help="print the frequencies of every scale"
    )
    parser.add_argument(
        "--base-freq",
        type=float,
        default=settings.baseFreq,
        help=f"root frequency in Hz for --freqs (default: {settings.baseFreq})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _buildParser().parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    _logger.setLevel(level)

    edo, size = _parseInt(args.edo), _parseInt(args.size)
    try:
        if edo is None or size is None:
            raise ScaleParamError("edo and size must be integers")
        enumerator = ScaleEnumerator(edo, size)
    except ScaleParamError as e:
        _logger.debug("Rejected input edo=%r, size=%r: %s", args.edo, args.size, e)
        print(INVALID_INPUT_MESSAGE, file=sys.stderr)
        return 2

    try:
        baseFreq = resolvePositiveReal(args.base_freq, "base-freq")
    except ValueError as e:
        print(f"Invalid base frequency: {e}", file=sys.stderr)
        return 2

    if args.count:
        print(f"Scales: {len(enumerator)}")
        print(f"Compositions: {countCompositions(edo, size)}")
        return 0

    if len(enumerator) == 0:
        print(f"No scales exist with {size} notes in {edo}-EDO.")
        return 0

    try:
        pager = Pager(enumerator, args.page_size)
        items = pager.numbered(args.page)
    except (TypeError, ValueError) as e:
        print(f"Invalid page: {e}", file=sys.stderr)
        return 2

    if not items:
        print(f"Page {args.page} is empty; there are {pager.totalPages} pages.")
        return 0

    _logger.debug("Showing %d scales for edo=%d, size=%d", len(items), edo, size)
    for ordinal, scale in items:
        print(f"Scale {ordinal}: {scale} ({_label(scale)})")
        if args.freqs:
            freqs = ", ".join(f"{f:.2f}" for f in scale.freqs(baseFreq))
            print(f"    Hz: {freqs}")

    more = "more pages follow" if pager.hasNext(args.page) else "last page"
    print(f"Page {args.page} of {pager.totalPages} ({more})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
