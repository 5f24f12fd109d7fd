"""
Tests for vercmp.parsers package.

Tests segment parsers including:
- Default split/classify rules and the failure rule
- PEP 440-style parsing (epochs, dev/pre/post markers)
- Parser registry lookup and registration
"""

from __future__ import annotations

import pytest

from vercmp.exceptions import ConfigError
from vercmp.parsers import (
    available_parsers,
    default_parser,
    get_parser,
    pep440_parser,
    register_parser,
)
from vercmp.segments import Epoch, ExtendedText, Integer, Text


class TestDefaultParser:
    """Tests for default_parser."""

    def test_segment_counts(self, valid_version):
        """Test the number of segments for known versions."""
        version, count = valid_version
        segments = default_parser(version)
        assert segments is not None
        assert len(segments) == count

    def test_classifies_tokens(self):
        """Test that digit runs become Integer and the rest Text."""
        assert default_parser("1.2.3-dev") == [
            Integer(1),
            Integer(2),
            Integer(3),
            Text("dev"),
        ]

    def test_any_separator(self):
        """Test that all non-alphanumeric runs are equivalent separators."""
        expected = [Integer(1), Integer(2), Integer(3)]
        for s in ("1.2.3", "1-2-3", "1_2_3", "1 2 3", "1..2--3", "1/2+3"):
            assert default_parser(s) == expected

    def test_leading_zeros(self):
        """Test that numeric tokens parse in base 10."""
        assert default_parser("01.002") == [Integer(1), Integer(2)]

    def test_large_numbers(self):
        """Test that long digit runs stay numeric."""
        assert default_parser("20240101123456789") == [Integer(20240101123456789)]

    def test_mixed_token_is_text(self):
        """Test that a token mixing digits and letters is Text."""
        assert default_parser("1.2a") == [Integer(1), Text("2a")]

    def test_non_ascii_digits_are_text(self):
        """Test that only ASCII digits make an Integer."""
        assert default_parser("1.٣") == [Integer(1), Text("٣")]

    def test_empty_input(self):
        """Test that empty input parses to zero segments."""
        assert default_parser("") == []

    def test_separator_only_input(self):
        """Test that a string of separators parses to zero segments."""
        assert default_parser(" .-_ ") == []

    def test_rejects_versions_without_numbers(self, invalid_version):
        """Test that tokens without any number are rejected."""
        assert default_parser(invalid_version) is None


class TestPep440Parser:
    """Tests for pep440_parser."""

    def test_release(self):
        """Test a plain release gets an implicit epoch."""
        assert pep440_parser("1.2.3") == [Epoch(0), Integer(1), Integer(2), Integer(3)]

    def test_explicit_epoch(self):
        """Test reading an N! epoch prefix."""
        assert pep440_parser("2!1.0") == [Epoch(2), Integer(1), Integer(0)]

    def test_dev_suffix(self):
        """Test that a dev marker glued to a number is split from it."""
        assert pep440_parser("1.2.3dev1") == [
            Epoch(0),
            Integer(1),
            Integer(2),
            Integer(3),
            ExtendedText(0, "dev", 1),
        ]

    def test_glued_marker_matches_separated(self):
        """Test that "10rc1" and "10.rc1" give the same segments."""
        assert pep440_parser("1.10rc1") == pep440_parser("1.10.rc1")

    def test_post_segment(self):
        """Test a separate post-release segment."""
        assert pep440_parser("1.0.post2")[-1] == ExtendedText(0, "post", 2)

    def test_case_insensitive(self):
        """Test that input is lower-cased."""
        assert pep440_parser("1.0RC1") == pep440_parser("1.0rc1")

    def test_v_prefix(self):
        """Test that a leading 'v' is dropped."""
        assert pep440_parser("v1.2") == pep440_parser("1.2")
        assert pep440_parser("V1.2") == pep440_parser("1.2")

    def test_unstructured_token_is_text(self):
        """Test that tokens not matching digits/letters/digits stay Text."""
        assert pep440_parser("1.a1b2")[-1] == Text("a1b2")

    def test_empty_input(self):
        """Test that empty input parses to zero segments."""
        assert pep440_parser("") == []

    def test_epoch_only(self):
        """Test that an epoch with no release is still numeric."""
        assert pep440_parser("3!") == [Epoch(3)]

    def test_extended_with_digits_is_numeric(self):
        """Test that "1a1" is accepted on its own."""
        assert pep440_parser("1a1") == [Epoch(0), Integer(1), ExtendedText(0, "a", 1)]

    def test_marker_without_release_number_is_numeric(self):
        """Test that "rc1" counts as a number through its trailing digits."""
        assert pep440_parser("rc1") == [Epoch(0), ExtendedText(0, "rc", 1)]

    @pytest.mark.parametrize("version", ["dev", "alpha.beta", "post-rc"])
    def test_rejects_versions_without_numbers(self, version):
        """Test the shared failure rule."""
        assert pep440_parser(version) is None


class TestParserRegistry:
    """Tests for the parser registry."""

    def test_builtin_parsers_registered(self):
        """Test that built-in parsers are available by name."""
        assert get_parser("default") is default_parser
        assert get_parser("pep440") is pep440_parser
        assert {"default", "pep440"} <= set(available_parsers())

    def test_unknown_parser_raises(self):
        """Test that unknown names raise ConfigError listing the options."""
        with pytest.raises(ConfigError, match="Available: .*default"):
            get_parser("nonexistent")

    def test_register_custom_parser(self, monkeypatch):
        """Test registering a custom parser."""
        from vercmp.parsers import base

        monkeypatch.setattr(base, "_PARSER_REGISTRY", dict(base._PARSER_REGISTRY))

        def dotted_ints(version):
            return [Integer(int(p)) for p in version.split(".") if p]

        register_parser("dotted_ints", dotted_ints)

        assert get_parser("dotted_ints") is dotted_ints
        assert "dotted_ints" in available_parsers()
