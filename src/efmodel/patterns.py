"""Structural signatures recognized in generated Entity Framework sources.

These are the only parts of the C# text the parser understands; everything
else in a file is ignored.
"""

from __future__ import annotations

import re

from efmodel.config import CONTEXT_BASE_TYPE

# ---------------------------------------------------------------------------
# Class signatures
# ---------------------------------------------------------------------------

# public partial class ShopContext : DbContext
CONTEXT_CLASS_PATTERN = re.compile(
    r"public\s+partial\s+class\s+([A-Za-z_][A-Za-z0-9_]*)\s*:\s*"
    + re.escape(CONTEXT_BASE_TYPE)
    + r"\b"
)

# public partial class device
RECORD_CLASS_PATTERN = re.compile(
    r"public\s+partial\s+class\s+([A-Za-z_][A-Za-z0-9_]*)\s"
)

# ---------------------------------------------------------------------------
# Context members
# ---------------------------------------------------------------------------

# namespace Shop.Data
NAMESPACE_PATTERN = re.compile(r"\bnamespace\s+([A-Za-z0-9._]+)")

# public virtual DbSet<device> devices { get; set; }
DBSET_PATTERN = re.compile(
    r"public\s+virtual\s+DbSet<([A-Za-z_][A-Za-z0-9_]*)>\s+"
    r"([A-Za-z_][A-Za-z0-9_]*)\s"
)

# ---------------------------------------------------------------------------
# Record members
# ---------------------------------------------------------------------------

# [StringLength(50)]
ATTRIBUTE_PATTERN = re.compile(r"\[([^\]]+)\]")

# public virtual ICollection<device> devices { get; set; }
FIELD_PATTERN = re.compile(
    r"public\s(?:virtual\s)?([^\s]+)\s([^\s]+)\s\{\sget;\sset;\s\}"
)

# a line holding nothing but a closing brace
CLOSING_BRACE_PATTERN = re.compile(r"^\s*\}\s*$")

# ICollection<device>
COLLECTION_PATTERN = re.compile(r"^ICollection<([A-Za-z_][A-Za-z0-9_]*)>$")


def constructor_pattern(class_name: str) -> re.Pattern[str]:
    """Pattern for the parameterless constructor of ``class_name``."""
    return re.compile(rf"public\s+{re.escape(class_name)}\s*\(\s*\)")
