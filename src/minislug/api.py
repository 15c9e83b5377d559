"""Public API for minislug.

This module provides the complete public API: the slugify entry points,
their options and capability flags, and the helpers the pipeline is built
from.
"""

# Entry points
from .pipeline import slugify, slugify_with

# Options
from .options import (
    SlugOptions,
    DEFAULT_OPTIONS,
    resolve_options,
)

# Capabilities
from .capabilities import (
    Capability,
    Capabilities,
    DEFAULT_CAPABILITIES,
    ASCII_ONLY,
)

# Helpers
from .core.quirks import is_reserved_name
from .transliterate import transliterate

# Constants
from .constants import ALLOWED_SEPARATORS, RESERVED_NAMES

# Version
try:
    from importlib.metadata import version
    __version__ = version("minislug")
except Exception:
    __version__ = "0.1.0"

# Public API Export List
__all__ = [
    # Entry points
    "slugify",
    "slugify_with",

    # Options
    "SlugOptions",
    "DEFAULT_OPTIONS",
    "resolve_options",

    # Capabilities
    "Capability",
    "Capabilities",
    "DEFAULT_CAPABILITIES",
    "ASCII_ONLY",

    # Helpers
    "is_reserved_name",
    "transliterate",

    # Constants
    "ALLOWED_SEPARATORS",
    "RESERVED_NAMES",

    # Version
    "__version__",
]
