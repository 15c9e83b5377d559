"""Slug options and option resolution.

SlugOptions is immutable: one instance describes one invocation. Callers
build variants with ``replace`` rather than mutating a shared instance.
Resolution clamps unusable values to safe ones and never raises.
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Optional

from .constants import (
    ALLOWED_SEPARATORS,
    DEFAULT_FALLBACK,
    DEFAULT_MAX_LEN_BYTES,
    DEFAULT_SEPARATOR,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlugOptions:
    """Configuration for a single slugify call.

    Attributes:
        separator: Character placed between words (one of ``- _ + ~``)
        lowercase: Lowercase letters in the output
        max_len_bytes: Maximum UTF-8 length of the output
        allow_unicode: Keep non-ASCII letters and digits as-is
        keep_underscore: Keep ``_`` literally instead of treating it as a boundary
        avoid_leading_dot: Prefix names starting with ``.`` so they are not hidden
        fallback: Name used when nothing survives sanitization
        retrim_after_truncate: Re-apply the platform fixes after truncation, within the budget
    """
    separator: str = DEFAULT_SEPARATOR
    lowercase: bool = True
    max_len_bytes: int = DEFAULT_MAX_LEN_BYTES
    allow_unicode: bool = False
    keep_underscore: bool = True
    avoid_leading_dot: bool = True
    fallback: str = DEFAULT_FALLBACK
    retrim_after_truncate: bool = False

    def replace(self, **changes) -> "SlugOptions":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)


DEFAULT_OPTIONS = SlugOptions()


def resolve_separator(separator: str) -> str:
    """Return ``separator`` if it is allowed, else the default separator."""
    if separator in ALLOWED_SEPARATORS:
        return separator
    logger.debug(f"Separator {separator!r} not allowed, using {DEFAULT_SEPARATOR!r}")
    return DEFAULT_SEPARATOR


def resolve_options(options: Optional[SlugOptions] = None) -> SlugOptions:
    """Produce the effective options for one call.

    Args:
        options: Caller-supplied options, or None for the defaults

    Returns:
        Options with every field clamped to a usable value
    """
    if options is None:
        return DEFAULT_OPTIONS

    changes = {}

    separator = resolve_separator(options.separator)
    if separator != options.separator:
        changes["separator"] = separator

    if options.max_len_bytes < 0:
        logger.debug(f"max_len_bytes={options.max_len_bytes} clamped to 0")
        changes["max_len_bytes"] = 0

    if not options.fallback:
        logger.debug(f"Empty fallback replaced with {DEFAULT_FALLBACK!r}")
        changes["fallback"] = DEFAULT_FALLBACK

    return options.replace(**changes) if changes else options
