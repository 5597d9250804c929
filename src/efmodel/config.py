"""Parser configuration constants and environment overrides."""

from __future__ import annotations

import os
from collections.abc import Iterable

# Environment variable names
ENV_DEBUG = "EFMODEL_DEBUG"
ENV_EXTENSIONS = "EFMODEL_EXTENSIONS"

# base type that marks the DbContext class of a generated model
CONTEXT_BASE_TYPE = "DbContext"

# attribute tokens with special meaning to the record extractor
KEY_ATTRIBUTE = "Key"
REQUIRED_ATTRIBUTE = "Required"


DEFAULT_EXTENSIONS = frozenset({".cs"})


def normalize_extensions(raw: str | Iterable[str]) -> frozenset[str]:
    """Lowercased, dot-prefixed extensions from ``"cs,.CSX"`` or a list."""
    parts = raw.split(",") if isinstance(raw, str) else raw
    exts = set()
    for part in parts:
        part = part.strip().lower()
        if not part or part == ".":
            continue
        exts.add(part if part.startswith(".") else f".{part}")
    return frozenset(exts)


# file extensions picked up by the directory reader; an empty override
# falls back to the default, e.g., EFMODEL_EXTENSIONS=.cs,.csx
SOURCE_EXTENSIONS: frozenset[str] = (
    normalize_extensions(os.environ.get(ENV_EXTENSIONS, ""))
    or DEFAULT_EXTENSIONS
)


def debug_enabled() -> bool:
    """Whether debug logging was requested via the environment."""
    return os.environ.get(ENV_DEBUG, "").lower() not in ("", "0", "false", "no")
