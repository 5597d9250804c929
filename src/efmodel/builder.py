"""Model assembly: classification, extraction and post-processing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

import structlog

from efmodel.classifier import FileKind, classify
from efmodel.config import SOURCE_EXTENSIONS, normalize_extensions
from efmodel.dependencies import resolve_dependencies
from efmodel.errors import (
    DuplicateContext,
    DuplicateTableObject,
    MissingContext,
    PathError,
)
from efmodel.extractors import extract_context, extract_record
from efmodel.model import Model
from efmodel.validation import ValidationStep, validate_model

logger = structlog.get_logger(__name__)


class ModelBuilder:
    """Builds a Model one file at a time.

    Files are added sequentially so that context and class name uniqueness
    can be checked as they arrive. ``build`` runs dependency resolution and
    may only be called once.
    """

    def __init__(self):
        self.model = Model()
        self._context_file: str | None = None
        self._record_files: dict[str, str] = {}
        self._built = False

    def add_file(self, file_path: str, content: str) -> FileKind | None:
        """Classify one file and extract its entity into the model.

        Returns the kind of file recognized, or None if it was ignored.
        """
        if self._built:
            raise RuntimeError("model already built")

        classification = classify(content)
        if classification is None:
            logger.debug("ignoring unrecognized file", path=file_path)
            return None

        if classification.kind is FileKind.CONTEXT:
            if self.model.context is not None:
                raise DuplicateContext(
                    self.model.context.class_name,
                    classification.class_name,
                    file_path,
                )
            namespace, context = extract_context(
                content, classification.class_name
            )
            self.model.namespace = namespace
            self.model.context = context
            self._context_file = file_path
        else:
            existing = self._record_files.get(classification.class_name)
            if existing is not None:
                raise DuplicateTableObject(
                    classification.class_name, existing, file_path
                )
            obj = extract_record(content, classification.class_name, file_path)
            self.model.objects.append(obj)
            self._record_files[obj.class_name] = file_path

        logger.debug(
            "classified file",
            path=file_path,
            kind=classification.kind.value,
            class_name=classification.class_name,
        )
        return classification.kind

    def build(self) -> Model:
        """Finish the model once every file has been added.

        Raises:
            MissingContext: No context file was added.
        """
        if self._built:
            raise RuntimeError("model already built")
        if self.model.context is None:
            raise MissingContext()

        resolve_dependencies(self.model)
        self._built = True

        logger.info(
            "built model",
            namespace=self.model.namespace,
            context=self.model.context.class_name,
            context_file=self._context_file,
            objects=len(self.model.objects),
        )
        return self.model


def build_model(
    files: Iterable[tuple[str, str]],
    validate: bool = True,
    steps: Iterable[ValidationStep] | None = None,
) -> Model:
    """Build and (by default) validate a Model from ``(path, content)``."""
    builder = ModelBuilder()
    for file_path, content in files:
        builder.add_file(file_path, content)

    model = builder.build()
    if validate:
        validate_model(model, steps)
    return model


def read_sources(
    root: Path | str,
    extensions: Iterable[str] | None = None,
) -> Iterator[tuple[str, str]]:
    """Yield ``(path, content)`` for every source file below ``root``.

    Files are yielded in sorted path order so repeated runs see the same
    sequence.

    Raises:
        PathError: ``root`` does not exist or is not a directory.
    """
    root = Path(root)
    if not root.exists():
        raise PathError(str(root), "doesn't exist.")
    if not root.is_dir():
        raise PathError(str(root), "doesn't point to a directory.")

    exts = SOURCE_EXTENSIONS
    if extensions is not None:
        exts = normalize_extensions(extensions) or SOURCE_EXTENSIONS
    return _iter_sources(root, exts)


def _iter_sources(
    root: Path, exts: frozenset[str]
) -> Iterator[tuple[str, str]]:
    for path in sorted(root.rglob("*")):
        if not path.is_file() or path.suffix.lower() not in exts:
            continue
        yield str(path), path.read_text(encoding="utf-8-sig", errors="replace")


def parse_directory(
    root: Path | str,
    validate: bool = True,
    steps: Iterable[ValidationStep] | None = None,
) -> Model:
    """Parse a directory of generated model sources.

    Only models generated with the "code-first from database" option are
    supported; hand-written models will likely not parse.
    """
    return build_model(read_sources(root), validate=validate, steps=steps)
