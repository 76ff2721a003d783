"""Raw JSDoc tag parts and their normalized views.

A surrounding parser slices each part out of a comment block and hands it over
together with its span::

    /**
     * @param {foo=} [bar = 1] Some description
     *   ^^^^^ ^^^^^^ ^^^^^^^^^^^ ^^^^^^^^^^^^^^^^
     *   kind  type   type name   comment
     */

The parts here only clean up those substrings; they never search the
surrounding comment.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field

from jsdoc_parts.settings import get_settings
from jsdoc_parts.span import Span, utf8_len

LOGGER = logging.getLogger(__name__)

COMMENT_MARKER = "*"

_STRICT_OVERRIDE: ContextVar[bool | None] = ContextVar("jsdoc_parts_strict", default=None)


class PartPreconditionError(ValueError):
    """Raised in strict mode when a raw part was sliced incorrectly."""


def _strict() -> bool:
    override = _STRICT_OVERRIDE.get()
    if override is not None:
        return override
    return get_settings().strict_parts


@contextmanager
def precondition_checks(enabled: bool) -> Iterator[None]:
    """Check (or skip) part preconditions for parts built inside the block.

    Takes precedence over ``Settings.strict_parts`` for the current context only.
    """
    token = _STRICT_OVERRIDE.set(enabled)
    try:
        yield
    finally:
        _STRICT_OVERRIDE.reset(token)


def _require(condition: bool, *, part: str, rule: str, raw: str) -> None:
    if condition:
        return
    LOGGER.warning(
        "part_precondition_failed",
        extra={"part": part, "rule": rule, "length": len(raw)},
    )
    raise PartPreconditionError(f"{part}: {rule}, got {raw!r}")


def _split_lines(value: str) -> list[str]:
    """Split on ``\\n`` only; a trailing line break does not start a new line."""
    if not value:
        return []
    lines = value.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _strip_comment_marker(line: str) -> str:
    line = line.strip()
    if line.startswith(COMMENT_MARKER):
        line = line[len(COMMENT_MARKER) :]
    return line.strip()


@dataclass(frozen=True, slots=True)
class CommentPart:
    """Free text of a tag or comment block, e.g. a parameter description.

    ``raw`` keeps everything between the surrounding parts, line breaks and
    ``*`` continuation markers included, so ``span`` covers the same bytes.
    """

    raw: str
    span: Span

    def parsed(self) -> str:
        """Return the text without the leading ``*`` of each line.

        A single line never carries a continuation marker and is only trimmed.
        """
        lines = _split_lines(self.raw)
        if len(lines) == 1:
            return self.raw.strip()

        kept = [line for line in map(_strip_comment_marker, lines) if line]
        LOGGER.debug(
            "comment part parsed",
            extra={"lines": len(lines), "kept": len(kept), "length": len(self.raw)},
        )
        return "\n".join(kept)

    def span_trimmed_first_line(self) -> Span:
        """Span of the first visible line only.

        Diagnostic renderers underline a single-line span but fall back to
        arrow markers for a multi-line one, so point at the first line and
        leave the rest out.
        """
        if not self.raw.strip():
            return Span.empty(self.span.start)

        base_len = utf8_len(self.raw)
        if len(_split_lines(self.raw)) == 1:
            leading = base_len - utf8_len(self.raw.lstrip())
            trailing = base_len - utf8_len(self.raw.rstrip())
            return Span(self.span.start + leading, self.span.end - trailing)

        start_trimmed = self.raw.lstrip()
        leading = base_len - utf8_len(start_trimmed)
        line_break = start_trimmed.find("\n")
        first_line_len = utf8_len(start_trimmed[:line_break]) if line_break >= 0 else 0
        return Span(self.span.start + leading, self.span.start + leading + first_line_len)


@dataclass(frozen=True, slots=True)
class TagKindPart:
    """The ``@kind`` keyword opening a tag, e.g. ``@param``."""

    raw: str
    span: Span

    def __post_init__(self) -> None:
        if not _strict():
            return
        _require(
            self.raw.startswith("@"),
            part="TagKindPart",
            rule="must start with '@'",
            raw=self.raw,
        )
        _require(
            self.raw == self.raw.strip(),
            part="TagKindPart",
            rule="must not have surrounding whitespace",
            raw=self.raw,
        )

    def parsed(self) -> str:
        """Return the kind without ``@``; any name is accepted (``param``, ``type``, ...)."""
        return self.raw[1:]


@dataclass(frozen=True, slots=True)
class TagTypePart:
    """A type expression including its braces, e.g. ``{Array<string>}``.

    The expression is opaque: nested braces are kept verbatim and nothing is
    parsed inside.
    """

    raw: str
    span: Span

    def __post_init__(self) -> None:
        if not _strict():
            return
        _require(
            len(self.raw) >= 2 and self.raw.startswith("{") and self.raw.endswith("}"),
            part="TagTypePart",
            rule="must be enclosed in '{' and '}'",
            raw=self.raw,
        )

    def parsed(self) -> str:
        """Return the type expression without the outer ``{`` and ``}``."""
        return self.raw[1:-1].strip()


@dataclass(frozen=True, slots=True)
class TagTypeNamePart:
    """The name following a type, e.g. ``bar``, ``[bar]`` or ``[bar = 1]``.

    ``optional`` is set for the bracketed form and ``default`` when the
    bracketed form also assigns a default value.
    """

    raw: str
    span: Span
    optional: bool = field(init=False)
    default: bool = field(init=False)

    def __post_init__(self) -> None:
        if _strict():
            _require(
                self.raw == self.raw.strip(),
                part="TagTypeNamePart",
                rule="must not have surrounding whitespace",
                raw=self.raw,
            )

        optional = self.raw.startswith("[") and self.raw.endswith("]")
        object.__setattr__(self, "optional", optional)
        object.__setattr__(self, "default", optional and "=" in self.raw)

    def parsed(self) -> str:
        """Return the bare name; a default value such as ``[foo = var]`` is dropped."""
        if not self.optional:
            return self.raw

        inner = self.raw[1:-1].strip()
        name, _, _ = inner.partition("=")
        return name.strip()
