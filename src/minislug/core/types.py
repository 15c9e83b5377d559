"""Token types passed from the classifier to the normalizer."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Keep:
    """Literal text copied into the slug (one character or a transliteration)."""
    text: str


@dataclass(frozen=True)
class Boundary:
    """Word boundary; runs of boundaries become a single separator."""


BOUNDARY = Boundary()

Token = Union[Keep, Boundary]
