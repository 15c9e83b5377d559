"""Slug pipeline and its entry points.

``slugify_with`` runs the four stages in order:

1. classify   - per-character Keep/Boundary decision
2. normalize  - collapse boundary runs into single separators
3. fix_quirks - trailing trim, fallback, device names, hidden names
4. truncate   - cap the UTF-8 length

The pipeline is a pure function of its arguments and never raises for
unusual text or option values.
"""

from typing import Optional

from .capabilities import DEFAULT_CAPABILITIES, Capabilities
from .core.classify import classify
from .core.normalize import normalize
from .core.quirks import fix_quirks, trim_trailing
from .core.truncate import truncate_bytes
from .options import SlugOptions, resolve_options


def _refix_truncated(name: str, opts: SlugOptions) -> str:
    """Re-apply the quirk fixes to a truncated name until it is stable.

    Each pass re-runs the fixes, caps the result again and trims anything the
    cut exposed. A budget too small for even the fallback ends in ``""``.
    """
    previous = None
    while name != previous:
        previous = name
        name = fix_quirks(name, opts)
        name = trim_trailing(truncate_bytes(name, opts.max_len_bytes), opts.separator)
    return name


def slugify(text: str) -> str:
    """Convert text into a safe filename component using default options.

    Examples:
        >>> slugify("Hello, world!")
        'hello-world'
        >>> slugify("  spaced   out ")
        'spaced-out'
        >>> slugify("a/b\\\\c")
        'a-b-c'
    """
    return slugify_with(text)


def slugify_with(
    text: str,
    options: Optional[SlugOptions] = None,
    *,
    capabilities: Optional[Capabilities] = None,
) -> str:
    """Convert text into a safe filename component.

    Args:
        text: Arbitrary input text
        options: Slug options (defaults when None); invalid values are clamped
        capabilities: Optional classifier behaviors (all enabled when None)

    Returns:
        A single path component, at most ``max_len_bytes`` UTF-8 bytes long

    Examples:
        >>> slugify_with("hello_world", SlugOptions(keep_underscore=False))
        'hello-world'
        >>> slugify_with("a b c", SlugOptions(separator="_", keep_underscore=False))
        'a_b_c'
    """
    opts = resolve_options(options)
    caps = capabilities if capabilities is not None else DEFAULT_CAPABILITIES

    name = normalize(classify(text, opts, caps), opts.separator)
    name = fix_quirks(name, opts)
    name = truncate_bytes(name, opts.max_len_bytes)

    if opts.retrim_after_truncate:
        name = _refix_truncated(name, opts)

    return name
