"""Byte-length capping."""

import logging

from ..constants import ENCODING

logger = logging.getLogger(__name__)


def truncate_bytes(name: str, max_len_bytes: int) -> str:
    """Cap the UTF-8 length of ``name`` to ``max_len_bytes``.

    Whole characters are removed from the end, so the result always encodes
    cleanly. A budget smaller than the first character yields ``""``.
    """
    encoded = name.encode(ENCODING)
    if len(encoded) <= max_len_bytes:
        return name
    # Input is valid UTF-8, so only a partial final character can fail to decode
    truncated = encoded[:max(max_len_bytes, 0)].decode(ENCODING, errors="ignore")
    logger.debug(f"Truncated {len(encoded)} bytes to {len(truncated.encode(ENCODING))}")
    return truncated
