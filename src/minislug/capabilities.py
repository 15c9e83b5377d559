"""Optional classifier capabilities.

Unicode preservation and transliteration are independent switches. The
classifier asks ``Capabilities.supports`` instead of branching on build
configuration, so either capability can be turned off without changing the
behavior of the other stages.
"""

from dataclasses import dataclass
from enum import Enum


class Capability(str, Enum):
    """Optional behaviors of the non-ASCII branch of the classifier."""
    UNICODE = "unicode"              # keep non-ASCII letters/digits when allowed
    TRANSLITERATE = "transliterate"  # map non-ASCII characters to ASCII text

    def describe(self) -> str:
        """Human-readable description of this capability."""
        descriptions = {
            Capability.UNICODE: "Preserve non-ASCII letters and digits when allow_unicode is set",
            Capability.TRANSLITERATE: "Replace known non-ASCII characters with ASCII text",
        }
        return descriptions.get(self, "Unknown capability")


@dataclass(frozen=True)
class Capabilities:
    """Set of capabilities available to the classifier.

    Attributes:
        unicode: Unicode preservation is available
        transliterate: Transliteration is available
    """
    unicode: bool = True
    transliterate: bool = True

    def supports(self, capability: Capability) -> bool:
        """Check whether a capability is available."""
        if capability is Capability.UNICODE:
            return self.unicode
        if capability is Capability.TRANSLITERATE:
            return self.transliterate
        return False


DEFAULT_CAPABILITIES = Capabilities()
ASCII_ONLY = Capabilities(unicode=False, transliterate=False)
