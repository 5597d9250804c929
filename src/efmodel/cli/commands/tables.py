"""Tables command - summarize table objects and their relationships."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from efmodel import console
from efmodel.builder import parse_directory
from efmodel.cli._common import resolve_root


@dataclass
class Tables:
    """List table objects with their key, file and dependants."""

    directory: Path | None = field(
        default=None,
        metadata={"help": "Directory holding the generated .cs files"},
    )

    def run(self) -> int:
        """Execute the tables command."""
        model = parse_directory(resolve_root(self.directory), validate=False)

        console.header(f"{model.namespace} ({len(model.objects)} tables)")
        for obj in model.objects:
            console.subheader(f"\n{obj.class_name}")
            console.key_value("file", obj.file_name, indent=2)
            console.key_value("key", obj.key_name or "-", indent=2)
            console.key_value("fields", len(obj.fields), indent=2)
            for dep in obj.dependants:
                console.dim(
                    f"    -> {dep.dependant.class_name}"
                    f".{dep.dependant_fk.variable_name}"
                    f" via {dep.dependant_getter.variable_name}"
                )
        return 0
