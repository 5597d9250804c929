"""Relationship inference over a fully extracted model.

Generated models carry no relationship metadata. A field typed
``ICollection<T>`` on an owner is taken to mean "T has a foreign key back to
the owner", and the key's name is derived from fixed naming conventions.
"""

from __future__ import annotations

from enum import Enum

import structlog

from efmodel.errors import ForeignKeyNotFound
from efmodel.model import Dependant, Model, TableObject
from efmodel.patterns import COLLECTION_PATTERN

logger = structlog.get_logger(__name__)


class RelationKind(str, Enum):
    SELF_REFERENTIAL = "self_referential"
    GENERAL = "general"


# foreign key naming convention: (template, explanation used in errors)
FK_NAMING_RULES: dict[RelationKind, tuple[str, str]] = {
    RelationKind.SELF_REFERENTIAL: (
        "parent_{owner}_id",
        "Self-referential foreign key must be named 'parent_<type>_id'.",
    ),
    RelationKind.GENERAL: (
        "{owner}_id",
        "Could not find the foreign key, are you following the naming "
        "convention '<type>_id'?",
    ),
}


def relation_kind(owner: TableObject, dependant: TableObject) -> RelationKind:
    if dependant is owner:
        return RelationKind.SELF_REFERENTIAL
    return RelationKind.GENERAL


def fk_name_for(owner: TableObject, dependant: TableObject) -> str:
    """Name of the foreign key on ``dependant`` that points at ``owner``."""
    template, _ = FK_NAMING_RULES[relation_kind(owner, dependant)]
    return template.format(owner=owner.class_name)


def collection_item_type(type_name: str) -> str | None:
    """``device`` for ``ICollection<device>``, else None."""
    match = COLLECTION_PATTERN.match(type_name)
    if match:
        return match.group(1)
    return None


def resolve_dependencies(model: Model) -> None:
    """Populate ``dependants`` on every table object of ``model``.

    Must run once, after every file has been extracted.

    Raises:
        UnknownDependantType: A collection names a type the model lacks.
        ForeignKeyNotFound: The dependant has no field matching the
            naming convention.
    """
    for owner in model.objects:
        for getter in owner.fields:
            item_type = collection_item_type(getter.type_name)
            if item_type is None:
                continue

            dependant = model.get_object(
                item_type, owner.class_name, getter.variable_name
            )
            kind = relation_kind(owner, dependant)
            _, reason = FK_NAMING_RULES[kind]
            fk_name = fk_name_for(owner, dependant)

            fk = dependant.find_field(fk_name)
            if fk is None:
                raise ForeignKeyNotFound(
                    owner.class_name, dependant.class_name, fk_name, reason
                )

            owner.dependants.append(
                Dependant(
                    dependant=dependant,
                    dependant_fk=fk,
                    dependant_getter=getter,
                )
            )
            logger.debug(
                "inferred dependant",
                owner=owner.class_name,
                dependant=dependant.class_name,
                foreign_key=fk_name,
                kind=kind.value,
            )
