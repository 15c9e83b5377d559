"""Platform quirk fixes applied to the normalized name.

Windows rejects names ending in a dot or space and reserves a handful of
device names regardless of case; Unix hides names starting with a dot.
"""

import logging

from ..constants import RESERVED_NAMES, SAFETY_PREFIX, TRAILING_UNSAFE
from ..options import SlugOptions

logger = logging.getLogger(__name__)


def trim_trailing(name: str, separator: str) -> str:
    """Strip trailing dots, spaces and separators."""
    return name.rstrip(TRAILING_UNSAFE + separator)


def trim_leading(name: str, separator: str) -> str:
    """Strip leading separators."""
    return name.lstrip(separator)


def is_reserved_name(name: str) -> bool:
    """Check whether ``name`` is a Windows device name (CON, COM1, ...)."""
    # Non-ASCII text must not case-fold into a device name (e.g. "ſ" -> "S")
    if not name.isascii():
        return False
    return name.upper() in RESERVED_NAMES


def fix_quirks(name: str, options: SlugOptions) -> str:
    """Apply the platform fixes in order.

    1. Trim trailing dot/space/separator (and leading separators)
    2. Substitute the fallback for an empty result
    3. Prefix reserved device names
    4. Prefix hidden names when ``avoid_leading_dot`` is set

    Args:
        name: Normalized name
        options: Resolved slug options

    Returns:
        Name safe on every supported platform (before length capping)
    """
    name = trim_leading(trim_trailing(name, options.separator), options.separator)

    if not name:
        logger.debug(f"Nothing left after sanitizing, using fallback {options.fallback!r}")
        name = options.fallback

    if is_reserved_name(name):
        logger.debug(f"{name!r} is a reserved device name, prefixing")
        name = SAFETY_PREFIX + name

    if options.avoid_leading_dot and name.startswith("."):
        name = SAFETY_PREFIX + name

    return name
