"""Normalized views over the raw parts of JSDoc tags."""

from jsdoc_parts.parts import (
    CommentPart,
    PartPreconditionError,
    TagKindPart,
    TagTypeNamePart,
    TagTypePart,
    precondition_checks,
)
from jsdoc_parts.span import Span

__all__ = [
    "CommentPart",
    "PartPreconditionError",
    "Span",
    "TagKindPart",
    "TagTypeNamePart",
    "TagTypePart",
    "precondition_checks",
]
