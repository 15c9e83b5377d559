"""minislug: safe, predictable filename components from arbitrary text.

Converts any string into a single path component that is valid on Windows,
macOS and Linux: forbidden characters removed, separators collapsed,
reserved device names and hidden names avoided, and the UTF-8 length capped.
"""

# Export the public API
from .api import *  # noqa: F403, F401
from .api import __all__, __version__  # noqa: F401
