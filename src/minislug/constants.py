"""Global constants for minislug.

This module centralizes the character sets, reserved names and defaults
shared by the option resolver and the pipeline stages.
"""

from typing import FrozenSet

# Separators a caller may choose; anything else resolves to DEFAULT_SEPARATOR
ALLOWED_SEPARATORS: FrozenSet[str] = frozenset("-_+~")
DEFAULT_SEPARATOR: str = "-"

# Forbidden on Windows; NUL and other control characters are checked separately
FORBIDDEN_CHARS: FrozenSet[str] = frozenset('<>:"/\\|?*')

# Windows device names, compared case-insensitively against the whole name
RESERVED_NAMES: FrozenSet[str] = frozenset(
    ["CON", "PRN", "AUX", "NUL"]
    + [f"COM{i}" for i in range(1, 10)]
    + [f"LPT{i}" for i in range(1, 10)]
)

# Common filesystem limit for a single path component, in UTF-8 bytes
DEFAULT_MAX_LEN_BYTES: int = 255
DEFAULT_FALLBACK: str = "file"

# Prepended to names that would otherwise be reserved or hidden
SAFETY_PREFIX: str = "_"

# Characters stripped from the end of a name (plus the active separator)
TRAILING_UNSAFE: str = ". "

ENCODING: str = "utf-8"
