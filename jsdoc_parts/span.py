"""Source spans shared by every part type."""

from __future__ import annotations

from dataclasses import dataclass


def utf8_len(value: str) -> int:
    """Number of bytes ``value`` occupies when encoded as UTF-8."""
    return len(value.encode("utf-8"))


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open ``[start, end)`` range of UTF-8 byte offsets into a source buffer."""

    start: int
    end: int

    @classmethod
    def empty(cls, offset: int) -> Span:
        return cls(offset, offset)

    @classmethod
    def covering(cls, text: str, start: int = 0) -> Span:
        """Span beginning at ``start`` and covering exactly the bytes of ``text``."""
        return cls(start, start + utf8_len(text))

    @property
    def size(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def source_text(self, source: str) -> str:
        """Return the part of ``source`` this span points at."""
        return source.encode("utf-8")[self.start : self.end].decode("utf-8")

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"
