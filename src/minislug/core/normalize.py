"""Boundary collapsing."""

from typing import Iterable

from .types import Keep, Token


def normalize(tokens: Iterable[Token], separator: str) -> str:
    """Join kept text, replacing each run of boundaries with one separator.

    Boundary runs at either end of the stream produce nothing, so input made
    only of boundaries normalizes to the empty string.

    Args:
        tokens: Classified token stream
        separator: Resolved separator character

    Returns:
        Normalized text
    """
    parts = []
    pending_separator = False
    for token in tokens:
        if isinstance(token, Keep):
            if pending_separator and parts:
                parts.append(separator)
            pending_separator = False
            parts.append(token.text)
        else:
            pending_separator = True
    return "".join(parts)
