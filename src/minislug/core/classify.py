"""Per-character classification.

Turns input text into a lazy stream of Keep/Boundary tokens. The order of
checks matters: forbidden and control characters always become boundaries,
and Unicode preservation wins over transliteration when both apply.
"""

import unicodedata
from typing import Iterator

from ..capabilities import Capabilities, Capability
from ..constants import FORBIDDEN_CHARS
from ..options import SlugOptions
from ..transliterate import transliterate
from .types import BOUNDARY, Keep, Token


def is_forbidden_char(ch: str) -> bool:
    """Check for characters no filesystem accepts (Windows set, NUL, controls)."""
    return ch in FORBIDDEN_CHARS or unicodedata.category(ch) == "Cc"


def _is_ascii_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _classify_ascii(ch: str, options: SlugOptions) -> Token:
    """Classify an ASCII character (or one character of transliterated text)."""
    if _is_ascii_alnum(ch):
        return Keep(ch.lower() if options.lowercase else ch)
    if ch == "_" and options.keep_underscore:
        return Keep(ch)
    return BOUNDARY


def classify_char(ch: str, options: SlugOptions, capabilities: Capabilities) -> Iterator[Token]:
    """Classify a single input character.

    Yields zero or more tokens: usually one, several for multi-letter
    transliterations, none for characters transliterated to empty text.

    Args:
        ch: Input character
        options: Resolved slug options
        capabilities: Available optional behaviors
    """
    if is_forbidden_char(ch) or ch.isspace():
        yield BOUNDARY
        return

    if ch.isascii():
        yield _classify_ascii(ch, options)
        return

    if capabilities.supports(Capability.UNICODE) and options.allow_unicode and ch.isalnum():
        if not options.lowercase:
            yield Keep(ch)
            return
        # Lowercasing may add combining marks ("İ" -> "i\u0307"); keep only alphanumerics
        for lc in ch.lower():
            if lc.isalnum():
                yield Keep(lc)
        return

    if capabilities.supports(Capability.TRANSLITERATE):
        replacement = transliterate(ch, options.lowercase)
        if replacement is not None:
            for t in replacement:
                yield _classify_ascii(t, options)
            return

    yield BOUNDARY


def classify(text: str, options: SlugOptions, capabilities: Capabilities) -> Iterator[Token]:
    """Classify every character of ``text`` in order."""
    for ch in text:
        yield from classify_char(ch, options, capabilities)
