#!/usr/bin/env python3
"""Example usage of the minislug programmatic API."""

from __future__ import annotations

import logging

from minislug import (
    ASCII_ONLY,
    Capabilities,
    SlugOptions,
    slugify,
    slugify_with,
)

SAMPLES = [
    "Hello, world!",
    "a/b\\c",
    "  spaced   out ",
    "CON",
    ".bashrc",
    "Crème brûlée",
    "Привіт світ",
    "Харьков_Ужгород",
    "\n\t\r",
]


def describe(title: str, options: SlugOptions | None = None, capabilities: Capabilities | None = None) -> None:
    """Print every sample slugified with the given settings."""
    print(f"\n{title}")
    for text in SAMPLES:
        print(f"  {text!r:>24} -> {slugify_with(text, options, capabilities=capabilities)!r}")


def main() -> None:
    print("minislug API demo")

    # 1) Defaults
    print(f"\nslugify('Hello, world!') = {slugify('Hello, world!')!r}")
    describe("Default options")

    # 2) Keep Unicode letters, underscore as separator
    describe(
        "allow_unicode=True, separator='_', keep_underscore=False",
        SlugOptions(allow_unicode=True, separator="_", keep_underscore=False),
    )

    # 3) ASCII only, no transliteration
    describe("No optional capabilities", capabilities=ASCII_ONLY)

    # 4) Tight byte budget, with and without re-trimming
    budget = SlugOptions(max_len_bytes=6, allow_unicode=True)
    describe("max_len_bytes=6", budget)
    describe("max_len_bytes=6, retrim_after_truncate=True", budget.replace(retrim_after_truncate=True))

    print("\nAPI demo complete")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    main()
