"""efmodel CLI - parse and validate generated Entity Framework models.

Uses tyro for type-driven CLI generation from dataclasses.
"""

from __future__ import annotations

from typing import Annotated

import tyro

from efmodel.cli.commands.parse import Parse
from efmodel.cli.commands.tables import Tables
from efmodel.cli.commands.validate import Validate
from efmodel.errors import ModelError

_Parse = Annotated[Parse, tyro.conf.subcommand("parse")]
_Validate = Annotated[Validate, tyro.conf.subcommand("validate")]
_Tables = Annotated[Tables, tyro.conf.subcommand("tables")]

Command = _Parse | _Validate | _Tables


def main(args: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    # configure structlog (respects EFMODEL_DEBUG env var)
    from efmodel.logging_config import configure_logging

    configure_logging()

    try:
        cmd = tyro.cli(
            Command,
            prog="efmodel",
            description="Parse and validate generated Entity Framework models.",
            args=args,
        )
        return cmd.run()
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except KeyboardInterrupt:
        return 130
    except (ModelError, OSError) as e:
        from efmodel import console

        console.error(str(e))
        return 1
