"""Tests for SlugOptions and option resolution."""

import dataclasses
import logging

import pytest

from minislug import DEFAULT_OPTIONS, SlugOptions, resolve_options
from minislug.options import resolve_separator


class TestSlugOptions:
    """Tests for the options dataclass."""

    def test_defaults(self):
        """Test default values."""
        opt = SlugOptions()
        assert opt.separator == "-"
        assert opt.lowercase is True
        assert opt.max_len_bytes == 255
        assert opt.allow_unicode is False
        assert opt.keep_underscore is True
        assert opt.avoid_leading_dot is True
        assert opt.fallback == "file"
        assert opt.retrim_after_truncate is False

    def test_is_immutable(self):
        """Test options cannot be mutated."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_OPTIONS.separator = "_"

    def test_replace_returns_copy(self):
        """Test replace leaves the original untouched."""
        opt = DEFAULT_OPTIONS.replace(lowercase=False, separator="~")
        assert opt.lowercase is False
        assert opt.separator == "~"
        assert DEFAULT_OPTIONS.lowercase is True
        assert DEFAULT_OPTIONS.separator == "-"


class TestResolveOptions:
    """Tests for resolve_options."""

    def test_none_gives_defaults(self):
        """Test None resolves to the default options."""
        assert resolve_options(None) == DEFAULT_OPTIONS

    def test_valid_options_returned_unchanged(self):
        """Test already-valid options pass through as the same object."""
        opt = SlugOptions(separator="+", max_len_bytes=10, fallback="x")
        assert resolve_options(opt) is opt

    @pytest.mark.parametrize("sep", ["-", "_", "+", "~"])
    def test_allowed_separator_kept(self, sep):
        """Test allowed separators are kept."""
        assert resolve_separator(sep) == sep

    @pytest.mark.parametrize("sep", ["/", "\\", ".", " ", "*", "--", ""])
    def test_disallowed_separator_clamped(self, sep):
        """Test disallowed separators resolve to '-'."""
        assert resolve_options(SlugOptions(separator=sep)).separator == "-"

    def test_other_fields_pass_through(self):
        """Test fields other than the clamped ones are untouched."""
        opt = SlugOptions(
            separator="/",
            lowercase=False,
            max_len_bytes=12,
            allow_unicode=True,
            keep_underscore=False,
            avoid_leading_dot=False,
            fallback="blank",
        )
        resolved = resolve_options(opt)
        assert resolved == opt.replace(separator="-")

    def test_negative_budget_clamped_to_zero(self):
        """Test negative max_len_bytes resolves to 0."""
        assert resolve_options(SlugOptions(max_len_bytes=-1)).max_len_bytes == 0

    def test_empty_fallback_clamped(self):
        """Test an empty fallback resolves to 'file'."""
        assert resolve_options(SlugOptions(fallback="")).fallback == "file"

    def test_clamping_is_logged(self, caplog):
        """Test clamps are reported at DEBUG level."""
        with caplog.at_level(logging.DEBUG, logger="minislug.options"):
            resolve_options(SlugOptions(separator="/"))
        assert "not allowed" in caplog.text
