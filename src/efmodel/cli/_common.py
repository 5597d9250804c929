"""Shared helpers for CLI commands."""

from __future__ import annotations

import os
from pathlib import Path

from efmodel.config import ENV_DEBUG


def resolve_root(directory: Path | None) -> Path:
    return directory.resolve() if directory else Path.cwd()


def enable_debug() -> None:
    os.environ[ENV_DEBUG] = "1"
    from efmodel.logging_config import configure_logging

    configure_logging(debug=True, force=True)
