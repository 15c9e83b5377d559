"""Slug pipeline stages.

Classifier -> Normalizer -> Platform-quirk fixer -> Truncator. Each stage is
a plain function of its input and the resolved options.
"""

from .types import Keep, Boundary, BOUNDARY, Token
from .classify import classify, classify_char
from .normalize import normalize
from .quirks import fix_quirks, is_reserved_name, trim_trailing, trim_leading
from .truncate import truncate_bytes

__all__ = [
    # Tokens
    "Keep",
    "Boundary",
    "BOUNDARY",
    "Token",
    # Stages
    "classify",
    "classify_char",
    "normalize",
    "fix_quirks",
    "truncate_bytes",
    # Helpers
    "is_reserved_name",
    "trim_trailing",
    "trim_leading",
]
