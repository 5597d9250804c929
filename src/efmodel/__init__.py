"""Parse generated Entity Framework models into an in-memory graph.

The parser targets models generated with the "code-first from database"
option. Custom made models will likely not work.
"""

from efmodel.builder import (
    ModelBuilder,
    build_model,
    parse_directory,
    read_sources,
)
from efmodel.classifier import Classification, FileKind, classify
from efmodel.dependencies import fk_name_for, resolve_dependencies
from efmodel.errors import (
    DuplicateContext,
    DuplicateField,
    DuplicateTableObject,
    EmptyRecord,
    FieldLookupFailed,
    ForeignKeyNotFound,
    MissingContext,
    MissingDbSetForTable,
    MissingNamespace,
    MissingPrimaryKey,
    ModelError,
    PathError,
    UnknownDependantType,
    ValidationFailed,
)
from efmodel.extractors import extract_context, extract_record
from efmodel.model import (
    DatabaseContext,
    DbSet,
    Dependant,
    Field,
    Model,
    TableObject,
)
from efmodel.validation import (
    ValidationStep,
    default_validation_steps,
    validate_model,
)

__all__ = [
    "Classification",
    "DatabaseContext",
    "DbSet",
    "Dependant",
    "DuplicateContext",
    "DuplicateField",
    "DuplicateTableObject",
    "EmptyRecord",
    "Field",
    "FieldLookupFailed",
    "FileKind",
    "ForeignKeyNotFound",
    "MissingContext",
    "MissingDbSetForTable",
    "MissingNamespace",
    "MissingPrimaryKey",
    "Model",
    "ModelBuilder",
    "ModelError",
    "PathError",
    "TableObject",
    "UnknownDependantType",
    "ValidationFailed",
    "ValidationStep",
    "build_model",
    "classify",
    "default_validation_steps",
    "extract_context",
    "extract_record",
    "fk_name_for",
    "parse_directory",
    "read_sources",
    "resolve_dependencies",
    "validate_model",
]
