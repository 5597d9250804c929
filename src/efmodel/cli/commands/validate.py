"""Validate command - check a model against the built-in rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from efmodel import console
from efmodel.builder import build_model, read_sources
from efmodel.cli._common import enable_debug, resolve_root
from efmodel.validation import validate_model


@dataclass
class Validate:
    """Parse a directory and run every validation step."""

    directory: Path | None = field(
        default=None,
        metadata={"help": "Directory holding the generated .cs files"},
    )
    debug: bool = field(
        default=False,
        metadata={"help": "Enable debug logging"},
    )

    def run(self) -> int:
        """Execute the validate command."""
        if self.debug:
            enable_debug()

        root = resolve_root(self.directory)
        model = build_model(read_sources(root), validate=False)
        validate_model(model)

        console.success(f"model is valid: {root}")
        console.key_value("namespace", model.namespace, indent=2)
        console.key_value("context", model.context.class_name, indent=2)
        console.key_value("tables", len(model.context.tables), indent=2)
        console.key_value("objects", len(model.objects), indent=2)
        dependants = sum(len(o.dependants) for o in model.objects)
        console.key_value("dependants", dependants, indent=2)
        return 0
