"""Parse command - print the model extracted from a directory."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from efmodel import console
from efmodel.builder import parse_directory
from efmodel.cli._common import enable_debug, resolve_root


@dataclass
class Parse:
    """Parse a directory of generated model sources and print the model."""

    directory: Path | None = field(
        default=None,
        metadata={"help": "Directory holding the generated .cs files"},
    )
    json: bool = field(
        default=False,
        metadata={"help": "Print the model as JSON"},
    )
    validate: bool = field(
        default=True,
        metadata={"help": "Run validation steps after parsing"},
    )
    debug: bool = field(
        default=False,
        metadata={"help": "Enable debug logging"},
    )

    def run(self) -> int:
        """Execute the parse command."""
        if self.debug:
            enable_debug()

        model = parse_directory(
            resolve_root(self.directory), validate=self.validate
        )

        if self.json:
            print(json.dumps(model.to_dict(), indent=2))
        else:
            console.print(model.describe())
        return 0
