"""Command line entrypoint for inspecting how a raw tag part normalizes."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

import structlog

from jsdoc_parts.parts import (
    CommentPart,
    PartPreconditionError,
    TagKindPart,
    TagTypeNamePart,
    TagTypePart,
    precondition_checks,
)
from jsdoc_parts.settings import Settings, get_settings
from jsdoc_parts.span import Span

_logger = structlog.get_logger("jsdoc_parts.cli")

PART_TYPES = {
    "comment": CommentPart,
    "kind": TagKindPart,
    "type": TagTypePart,
    "name": TagTypeNamePart,
}

Part = CommentPart | TagKindPart | TagTypePart | TagTypeNamePart


def configure_logging(log_level: str) -> None:
    numeric_level = logging.getLevelName(log_level.upper())
    if isinstance(numeric_level, str):
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, format="%(message)s")
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def describe_part(part: Part) -> dict[str, Any]:
    """Return a JSON-ready view of a part and its normalized values."""
    kind = next(name for name, cls in PART_TYPES.items() if isinstance(part, cls))
    payload: dict[str, Any] = {
        "kind": kind,
        "raw": part.raw,
        "parsed": part.parsed(),
        "span": [part.span.start, part.span.end],
    }
    if isinstance(part, CommentPart):
        trimmed = part.span_trimmed_first_line()
        payload["span_trimmed_first_line"] = [trimmed.start, trimmed.end]
    elif isinstance(part, TagTypeNamePart):
        payload["optional"] = part.optional
        payload["default"] = part.default
    return payload


def _offset(value: str) -> int:
    offset = int(value)
    if offset < 0:
        raise argparse.ArgumentTypeError(f"offset must be non-negative, got {offset}")
    return offset


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsdoc-parts",
        description="Normalize a raw JSDoc tag part and print the result as JSON.",
    )
    parser.add_argument("part", choices=sorted(PART_TYPES), help="Which part the raw text is")
    parser.add_argument("raw", help="Raw part text, or '-' to read it from stdin")
    parser.add_argument(
        "--start",
        type=_offset,
        default=0,
        help="Byte offset of the part in its source (default: 0)",
    )
    parser.add_argument(
        "--no-strict",
        action="store_true",
        help="Skip part precondition checks for this run",
    )
    return parser


def main(argv: Sequence[str] | None = None, *, settings: Settings | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    raw = sys.stdin.read() if args.raw == "-" else args.raw
    span = Span.covering(raw, start=args.start)
    part_cls = PART_TYPES[args.part]

    try:
        with precondition_checks(settings.strict_parts and not args.no_strict):
            part = part_cls(raw, span)
    except PartPreconditionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    _logger.debug("cli.described", part=args.part, span=str(span))
    print(json.dumps(describe_part(part), ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
