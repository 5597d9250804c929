"""In-memory representation of a parsed Entity Framework model.

A ``Model`` owns one ``DatabaseContext`` and every ``TableObject``;
``Dependant`` entries only reference objects and fields the model already
holds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from efmodel.config import KEY_ATTRIBUTE
from efmodel.errors import FieldLookupFailed, UnknownDependantType


@dataclass(frozen=True)
class DbSet:
    """A typed collection declared on the context.

    ``DbSet<device_type> devices`` becomes ``DbSet("device_type", "devices")``.
    """

    type_name: str
    variable_name: str

    def __str__(self) -> str:
        return f"DbSet<{self.type_name}> {self.variable_name};"


@dataclass
class DatabaseContext:
    """The DbContext class of the model and the tables it manages."""

    class_name: str
    tables: list[DbSet] = field(default_factory=list)

    def get_table_for_type(self, type_name: str) -> DbSet | None:
        for table in self.tables:
            if table.type_name == type_name:
                return table
        return None

    def has_table_for_type(self, type_name: str) -> bool:
        return self.get_table_for_type(type_name) is not None

    def describe(self) -> str:
        tables = "\n\t".join(str(t) for t in self.tables)
        return f"[DbContext]\nName: {self.class_name}\nTables:\n\t{tables}"


@dataclass
class Field:
    """A property declared on a table object."""

    type_name: str
    variable_name: str
    attributes: list[str] = field(default_factory=list)
    allows_null: bool = False

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    @property
    def is_key(self) -> bool:
        return self.has_attribute(KEY_ATTRIBUTE)

    def describe(self) -> str:
        lines = [f"<AllowsNull:{self.allows_null}>"]
        lines.extend(f"[{a}]" for a in self.attributes)
        lines.append(f"{self.type_name} {self.variable_name};")
        return "\n".join(lines)


@dataclass(eq=False, repr=False)
class Dependant:
    """A one-to-many relationship inferred from naming conventions.

    The owning object (the one holding this entry) is the parent of
    ``dependant``; ``dependant_fk`` lives on ``dependant`` and
    ``dependant_getter`` is the ``ICollection<T>`` field on the owner.
    """

    dependant: TableObject
    dependant_fk: Field
    dependant_getter: Field

    # compared by name so self-referential graphs don't recurse
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dependant):
            return NotImplemented
        return (
            self.dependant.class_name == other.dependant.class_name
            and self.dependant_fk == other.dependant_fk
            and self.dependant_getter == other.dependant_getter
        )

    def __repr__(self) -> str:
        return (
            f"Dependant(dependant={self.dependant.class_name!r}, "
            f"dependant_fk={self.dependant_fk.variable_name!r}, "
            f"dependant_getter={self.dependant_getter.variable_name!r})"
        )


@dataclass
class TableObject:
    """A record type: one generated class mapped to a table."""

    class_name: str
    file_name: str = ""
    key_name: str = ""
    fields: list[Field] = field(default_factory=list)
    dependants: list[Dependant] = field(default_factory=list)

    def find_field(self, name: str) -> Field | None:
        for f in self.fields:
            if f.variable_name == name:
                return f
        return None

    def has_field(self, name: str) -> bool:
        return self.find_field(name) is not None

    def get_field(self, name: str, reason: str = "No additional info") -> Field:
        """Look up a field that must exist.

        Args:
            name: Variable name of the field.
            reason: Why the field is needed (key, foreign key, ...). Included
                in the error so failures are diagnosable.

        Raises:
            FieldLookupFailed: No field called ``name`` exists.
        """
        found = self.find_field(name)
        if found is None:
            raise FieldLookupFailed(self.class_name, name, reason)
        return found

    def get_key(self) -> Field:
        return self.get_field(
            self.key_name, "Could not find the primary key field."
        )

    def describe(self) -> str:
        dependants = "\n\t".join(
            d.dependant.class_name for d in self.dependants
        )
        fields = "\n\n".join(f.describe() for f in self.fields)
        return (
            "[Table Object]\n"
            f"Name: {self.class_name}\n"
            f"KeyVar: {self.key_name}\n"
            f"File: '{self.file_name}'\n"
            f"Dependants: \n\t{dependants}\n"
            f"Fields:\n{fields}"
        )


@dataclass
class Model:
    """The whole parsed model: namespace, context and table objects."""

    namespace: str = ""
    context: DatabaseContext | None = None
    objects: list[TableObject] = field(default_factory=list)

    def find_object(self, type_name: str) -> TableObject | None:
        for obj in self.objects:
            if obj.class_name == type_name:
                return obj
        return None

    def is_object_type(self, type_name: str) -> bool:
        return self.find_object(type_name) is not None

    def get_object(
        self, type_name: str, owner: str = "", field_name: str = ""
    ) -> TableObject:
        """Look up a table object that must exist.

        ``owner`` and ``field_name`` name the reference being resolved and
        only feed the error message.
        """
        found = self.find_object(type_name)
        if found is None:
            raise UnknownDependantType(owner, field_name, type_name)
        return found

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "namespace": self.namespace,
            "context": (
                {
                    "class_name": self.context.class_name,
                    "tables": [
                        {
                            "type_name": t.type_name,
                            "variable_name": t.variable_name,
                        }
                        for t in self.context.tables
                    ],
                }
                if self.context
                else None
            ),
            "objects": [
                {
                    "class_name": o.class_name,
                    "key_name": o.key_name,
                    "file_name": o.file_name,
                    "fields": [
                        {
                            "type_name": f.type_name,
                            "variable_name": f.variable_name,
                            **(
                                {"attributes": f.attributes}
                                if f.attributes
                                else {}
                            ),
                            **({"allows_null": True} if f.allows_null else {}),
                        }
                        for f in o.fields
                    ],
                    "dependants": [
                        {
                            "dependant": d.dependant.class_name,
                            "foreign_key": d.dependant_fk.variable_name,
                            "getter": d.dependant_getter.variable_name,
                        }
                        for d in o.dependants
                    ],
                }
                for o in self.objects
            ],
        }

    def describe(self) -> str:
        context = self.context.describe() if self.context else "<none>"
        objects = "\n\n".join(o.describe() for o in self.objects)
        return (
            "[Model]\n"
            f"Namespace: {self.namespace}\n"
            f"Context:\n{context}\n"
            f"Objects:\n{objects}"
        )
