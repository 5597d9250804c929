"""File classification by structural signature."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from efmodel.patterns import CONTEXT_CLASS_PATTERN, RECORD_CLASS_PATTERN


class FileKind(str, Enum):
    """What a generated source file declares."""

    CONTEXT = "context"
    RECORD = "record"


@dataclass(frozen=True)
class Classification:
    """Result of classifying one file."""

    kind: FileKind
    class_name: str


def classify(content: str) -> Classification | None:
    """Classify ``content`` as the context file, a record file, or neither.

    The context signature is checked first; the more permissive record
    signature only applies to files that are not the context.
    """
    match = CONTEXT_CLASS_PATTERN.search(content)
    if match:
        return Classification(FileKind.CONTEXT, match.group(1))

    match = RECORD_CLASS_PATTERN.search(content)
    if match:
        return Classification(FileKind.RECORD, match.group(1))

    return None
