"""Consistency checks run against a finished model.

A validation step is any callable taking the model and raising on failure.
Steps are passed explicitly to ``validate_model``; extend the defaults by
appending to the list returned from ``default_validation_steps``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import structlog

from efmodel.errors import (
    FieldLookupFailed,
    MissingDbSetForTable,
    MissingPrimaryKey,
)
from efmodel.model import Model

logger = structlog.get_logger(__name__)

ValidationStep = Callable[[Model], None]


def check_dbset_coverage(model: Model) -> None:
    """Every table object needs a DbSet in the context."""
    context = model.context
    for obj in model.objects:
        if context is None or not context.has_table_for_type(obj.class_name):
            raise MissingDbSetForTable(
                context.class_name if context else "", obj.class_name
            )


def check_primary_keys(model: Model) -> None:
    """Every table object needs a field named by its key."""
    for obj in model.objects:
        try:
            obj.get_key()
        except FieldLookupFailed as e:
            raise MissingPrimaryKey(obj.class_name, obj.key_name) from e


def default_validation_steps() -> list[ValidationStep]:
    return [check_dbset_coverage, check_primary_keys]


def validate_model(
    model: Model, steps: Iterable[ValidationStep] | None = None
) -> None:
    """Run ``steps`` in order; the first failing step aborts validation."""
    if steps is None:
        steps = default_validation_steps()

    for step in steps:
        name = getattr(step, "__name__", repr(step))
        logger.debug("running validation step", step=name)
        step(model)
