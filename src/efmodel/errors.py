"""Exceptions raised while building or validating a model.

Every error is terminal: the pipeline stops at the first one and any
partially built model must be discarded.
"""

from __future__ import annotations

from typing import Any


class ModelError(Exception):
    """Base exception for all model parsing errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PathError(ModelError):
    """The model root does not exist or is not a directory."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"The path '{path}' {reason}", {"path": path})
        self.path = path


class DuplicateContext(ModelError):
    """More than one file declares a DbContext class."""

    def __init__(self, existing: str, duplicate: str, file: str = ""):
        super().__init__(
            f"The model contains multiple DbContext classes "
            f"('{existing}' and '{duplicate}'). There is no support for this.",
            {"existing": existing, "duplicate": duplicate, "file": file},
        )
        self.existing = existing
        self.duplicate = duplicate


class MissingContext(ModelError):
    """No file declares a DbContext class."""

    def __init__(self):
        super().__init__("The model contains no DbContext class.")


class MissingNamespace(ModelError):
    """The context file does not declare exactly one namespace."""

    def __init__(self, class_name: str, count: int):
        super().__init__(
            f"Could not determine the namespace for the model: "
            f"'{class_name}' declares {count} namespaces, expected exactly 1.",
            {"class_name": class_name, "count": count},
        )
        self.class_name = class_name
        self.count = count


class EmptyRecord(ModelError):
    """A record file produced no fields."""

    def __init__(self, class_name: str, file: str):
        super().__init__(
            f"The table object '{class_name}' in '{file}' has no fields.",
            {"class_name": class_name, "file": file},
        )
        self.class_name = class_name
        self.file = file


class DuplicateTableObject(ModelError):
    """Two record files declare the same class."""

    def __init__(self, class_name: str, existing_file: str, file: str):
        super().__init__(
            f"The table object '{class_name}' is declared in both "
            f"'{existing_file}' and '{file}'.",
            {
                "class_name": class_name,
                "existing_file": existing_file,
                "file": file,
            },
        )
        self.class_name = class_name
        self.existing_file = existing_file
        self.file = file


class DuplicateField(ModelError):
    """A record declares the same property name twice."""

    def __init__(self, class_name: str, field_name: str, file: str):
        super().__init__(
            f"The table object '{class_name}' in '{file}' declares the "
            f"field '{field_name}' more than once.",
            {"class_name": class_name, "field": field_name, "file": file},
        )
        self.class_name = class_name
        self.field_name = field_name
        self.file = file


class FieldLookupFailed(ModelError):
    """A field requested by name does not exist on a table object."""

    def __init__(self, object_name: str, field_name: str, reason: str):
        super().__init__(
            f"Could not find field with name '{field_name}' in object "
            f"'{object_name}'. Additional Info: {reason}",
            {"object": object_name, "field": field_name, "reason": reason},
        )
        self.object_name = object_name
        self.field_name = field_name
        self.reason = reason


class UnknownDependantType(ModelError):
    """An ICollection<T> field names a type that is not a table object."""

    def __init__(self, owner: str, field_name: str, type_name: str):
        super().__init__(
            f"Could not find the TableObject of type '{type_name}' "
            f"(referenced by '{owner}.{field_name}').",
            {"owner": owner, "field": field_name, "type": type_name},
        )
        self.owner = owner
        self.type_name = type_name


class ForeignKeyNotFound(FieldLookupFailed):
    """The dependant lacks the foreign key the naming convention expects."""

    def __init__(self, owner: str, dependant: str, fk_name: str, reason: str):
        super().__init__(dependant, fk_name, reason)
        self.details["owner"] = owner
        self.details["dependant"] = dependant
        self.details["fk_name"] = fk_name
        self.owner = owner
        self.dependant = dependant
        self.fk_name = fk_name


class ValidationFailed(ModelError):
    """Base class for validation step failures."""


class MissingDbSetForTable(ValidationFailed):
    """A table object has no DbSet in the context."""

    def __init__(self, context: str, object_name: str):
        super().__init__(
            f"The DbContext '{context}' has no DbSet for the table object "
            f"'{object_name}'.",
            {"context": context, "object": object_name},
        )
        self.context = context
        self.object_name = object_name


class MissingPrimaryKey(ValidationFailed):
    """A table object has no field matching its key name."""

    def __init__(self, object_name: str, key_name: str):
        shown = key_name or "<none>"
        super().__init__(
            f"The table object '{object_name}' has no primary key field "
            f"(key name: {shown}).",
            {"object": object_name, "key_name": key_name},
        )
        self.object_name = object_name
        self.key_name = key_name
