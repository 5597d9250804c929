"""Entity extraction from classified context and record files."""

from __future__ import annotations

from enum import Enum, auto
from pathlib import PurePath

import structlog

from efmodel.config import KEY_ATTRIBUTE, REQUIRED_ATTRIBUTE
from efmodel.errors import DuplicateField, EmptyRecord, MissingNamespace
from efmodel.model import DatabaseContext, DbSet, Field, TableObject
from efmodel.patterns import (
    ATTRIBUTE_PATTERN,
    CLOSING_BRACE_PATTERN,
    DBSET_PATTERN,
    FIELD_PATTERN,
    NAMESPACE_PATTERN,
    constructor_pattern,
)

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Field Matcher
# ---------------------------------------------------------------------------


def match_attribute(line: str) -> str | None:
    """Text inside an attribute bracket, e.g. ``Key`` for ``[Key]``."""
    match = ATTRIBUTE_PATTERN.search(line)
    if match:
        return match.group(1)
    return None


def match_field(line: str, attributes: list[str]) -> Field | None:
    """Build a Field from a ``public [virtual] TYPE NAME { get; set; }`` line.

    ``attributes`` are the annotations seen since the previous field; the
    returned Field takes its own copy.
    """
    match = FIELD_PATTERN.search(line)
    if not match:
        return None

    type_name = match.group(1)
    allows_null = False
    if type_name.endswith("?"):
        type_name = type_name[:-1]
        allows_null = True
    elif type_name == "string" and REQUIRED_ATTRIBUTE not in attributes:
        allows_null = True

    return Field(
        type_name=type_name,
        variable_name=match.group(2),
        attributes=list(attributes),
        allows_null=allows_null,
    )


# ---------------------------------------------------------------------------
# Context Extractor
# ---------------------------------------------------------------------------


def extract_context(
    content: str, class_name: str
) -> tuple[str, DatabaseContext]:
    """Extract the namespace and DbSet list from the context file.

    Raises:
        MissingNamespace: The file does not declare exactly one namespace.
    """
    namespaces = NAMESPACE_PATTERN.findall(content)
    if len(namespaces) != 1:
        raise MissingNamespace(class_name, len(namespaces))

    # duplicates are kept in source order
    context = DatabaseContext(class_name=class_name)
    for match in DBSET_PATTERN.finditer(content):
        context.tables.append(DbSet(match.group(1), match.group(2)))

    logger.debug(
        "extracted context",
        class_name=class_name,
        namespace=namespaces[0],
        tables=len(context.tables),
    )
    return namespaces[0], context


# ---------------------------------------------------------------------------
# Record Extractor
# ---------------------------------------------------------------------------


class ScanPhase(Enum):
    SEEKING_CTOR_START = auto()
    SEEKING_CTOR_END = auto()
    COLLECTING_FIELDS = auto()


def extract_record(
    content: str, class_name: str, file_path: str
) -> TableObject:
    """Extract one table object from a record file.

    Generated record classes may open with a parameterless constructor that
    initializes collection properties; it is skipped before fields are
    collected. The constructor body ends at the first line holding only
    ``}``, so a constructor containing nested blocks is not supported.

    Raises:
        DuplicateField: A property name is declared twice.
        EmptyRecord: No field declarations were found.
    """
    obj = TableObject(class_name=class_name, file_name=PurePath(file_path).name)

    ctor = constructor_pattern(class_name)
    if ctor.search(content):
        phase = ScanPhase.SEEKING_CTOR_START
    else:
        phase = ScanPhase.COLLECTING_FIELDS

    attributes: list[str] = []
    for line in content.splitlines():
        if phase is ScanPhase.SEEKING_CTOR_START:
            if ctor.search(line):
                phase = ScanPhase.SEEKING_CTOR_END
            continue

        if phase is ScanPhase.SEEKING_CTOR_END:
            if CLOSING_BRACE_PATTERN.match(line):
                phase = ScanPhase.COLLECTING_FIELDS
            continue

        attribute = match_attribute(line)
        if attribute is not None:
            attributes.append(attribute)
            continue

        field_def = match_field(line, attributes)
        if field_def is None:
            continue
        if obj.has_field(field_def.variable_name):
            raise DuplicateField(
                class_name, field_def.variable_name, obj.file_name
            )

        obj.fields.append(field_def)
        attributes = []

        # last [Key] wins
        if KEY_ATTRIBUTE in field_def.attributes:
            obj.key_name = field_def.variable_name

    if not obj.fields:
        raise EmptyRecord(class_name, obj.file_name)

    logger.debug(
        "extracted record",
        class_name=class_name,
        file=obj.file_name,
        fields=len(obj.fields),
        key=obj.key_name,
    )
    return obj
