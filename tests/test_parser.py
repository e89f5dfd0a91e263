# SPDX-License-Identifier: MIT
"""Unit tests for version parsing."""

import dataclasses

import pytest

from version_util import (
    InvalidVersionFormatError,
    NumericPreRelease,
    OpaquePreRelease,
    is_valid_version,
    parse_version,
)


class TestParseVersion:
    """Tests for parse_version on well-formed input."""

    def test_basic_version(self):
        """Test parsing basic MAJOR.MINOR.PATCH version."""
        v = parse_version("1.2.3")
        assert v.numeric_parts == (1, 2, 3)
        assert v.pre_release is None
        assert v.custom_suffix is None
        assert v.beta is None
        assert v.custom is None

    def test_version_with_zeros(self):
        """Test parsing version with zero components."""
        assert parse_version("0.0.0").numeric_parts == (0, 0, 0)

    def test_single_component(self):
        """Test that a single number is a valid version."""
        assert parse_version("7").numeric_parts == (7,)

    def test_many_components(self):
        """Test that any number of numeric components is accepted."""
        assert parse_version("1.2.3.4.5").numeric_parts == (1, 2, 3, 4, 5)

    def test_large_version_numbers(self):
        """Test parsing large version numbers."""
        assert parse_version("999.888.777").numeric_parts == (999, 888, 777)

    def test_leading_zeros_are_dropped(self):
        """Test that leading zeros are accepted and parsed numerically."""
        v = parse_version("01.002.3")
        assert v.numeric_parts == (1, 2, 3)
        assert v.original == "01.002.3"

    def test_original_preserved(self):
        """Test that the input string is kept verbatim."""
        v = parse_version("1.2.3-beta.4")
        assert v.original == "1.2.3-beta.4"
        assert str(v) == "1.2.3-beta.4"


class TestPreRelease:
    """Tests for pre-release classification."""

    def test_beta(self):
        """Test parsing a numeric beta pre-release."""
        v = parse_version("1.2.3-beta.4")
        assert v.numeric_parts == (1, 2, 3)
        assert v.pre_release == NumericPreRelease((4,))
        assert v.beta == (4,)
        assert v.custom is None
        assert v.is_prerelease is True

    def test_multi_part_beta(self):
        """Test parsing a beta with several numeric groups."""
        assert parse_version("1.2.3-beta.4.1").beta == (4, 1)

    def test_beta_prefix_is_optional(self):
        """Test that a bare numeric suffix is a numeric pre-release."""
        assert parse_version("1.2.3-4").beta == (4,)
        assert parse_version("1.2.3-4.5").beta == (4, 5)

    def test_opaque_tag(self):
        """Test that a non-numeric suffix is an opaque pre-release."""
        v = parse_version("1.0.0-rc")
        assert v.beta is None
        assert v.custom == "rc"
        assert v.pre_release == OpaquePreRelease("rc")
        assert v.is_degraded is False

    def test_opaque_tag_is_not_split(self):
        """Test that the whole captured suffix is kept when any group is non-numeric."""
        assert parse_version("1.0.0-rc.1").custom == "rc.1"
        assert parse_version("1.0.0-1.rc").custom == "1.rc"

    def test_beta_without_number(self):
        """Test that '-beta' without a dot is an opaque tag."""
        v = parse_version("1.0.0-beta")
        assert v.beta is None
        assert v.custom == "beta"

    def test_mixed_alphanumeric_group(self):
        """Test that a group mixing digits and letters is opaque."""
        assert parse_version("1.0.0-beta.1a").custom == "1a"

    def test_numeric_str(self):
        """Test string form of a numeric pre-release."""
        assert str(NumericPreRelease((4, 1))) == "4.1"


class TestDegradedParse:
    """Tests for the best-effort parse of non-conforming strings."""

    def test_trailing_text(self):
        """Test that trailing text becomes the custom suffix."""
        v = parse_version("1.2.3dev")
        assert v.numeric_parts == (1, 2, 3)
        assert v.custom == "dev"
        assert v.custom_suffix == "dev"
        assert v.pre_release is None
        assert v.is_degraded is True

    def test_empty_beta(self):
        """Test that '-beta.' with nothing after it falls back to the degraded parse."""
        v = parse_version("1.2.3-beta.")
        assert v.numeric_parts == (1, 2, 3)
        assert v.custom == "-beta."
        assert v.beta is None

    def test_space_separated_suffix(self):
        """Test that a space-separated suffix is kept verbatim."""
        v = parse_version("2.0 beta")
        assert v.numeric_parts == (2, 0)
        assert v.custom == " beta"

    def test_trailing_dot(self):
        """Test that an empty trailing group counts as zero."""
        v = parse_version("1.2.")
        assert v.numeric_parts == (1, 2, 0)
        assert v.custom == ""
        assert v.is_degraded is True

    def test_trailing_newline(self):
        """Test that a trailing newline is not swallowed by the grammar."""
        v = parse_version("1.2.3\n")
        assert v.numeric_parts == (1, 2, 3)
        assert v.custom == "\n"


class TestLongDigitGroups:
    """Tests for digit groups longer than the interpreter's int conversion limit."""

    def test_long_numeric_group(self):
        """Test that a 5000-digit component parses to the exact integer."""
        v = parse_version("1" * 5000 + ".0")
        assert v.numeric_parts == ((10**5000 - 1) // 9, 0)

    def test_long_beta_group(self):
        """Test that a 5000-digit beta number parses as a numeric pre-release."""
        v = parse_version("1.0-beta." + "9" * 5000)
        assert v.beta == (10**5000 - 1,)

    def test_long_degraded_group(self):
        """Test that a long digit run in a degraded parse is converted too."""
        v = parse_version("2" + "0" * 4999 + "dev")
        assert v.numeric_parts == (2 * 10**4999,)
        assert v.custom == "dev"

    def test_leading_zeros_across_chunks(self):
        """Test that leading zeros spanning several chunks are dropped."""
        assert parse_version("0" * 1500 + "7").numeric_parts == (7,)


class TestInvalidVersions:
    """Tests for strings with no leading numeric run."""

    @pytest.mark.parametrize("version", ["abc", "", "v1.2.3", "-1.0.0", " 1.0.0", ".beta", "..."])
    def test_invalid(self, version):
        """Test that strings without leading digits raise."""
        with pytest.raises(InvalidVersionFormatError):
            parse_version(version)

    def test_error_details(self):
        """Test that the error names the input and the expected grammar."""
        with pytest.raises(InvalidVersionFormatError) as exc_info:
            parse_version("abc")
        assert exc_info.value.version == "abc"
        assert "'abc'" in str(exc_info.value)
        assert "1.2.3-beta.4" in exc_info.value.expected

    def test_is_value_error(self):
        """Test that the error can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_version("abc")

    def test_non_string_input(self):
        """Test that non-string input raises error."""
        with pytest.raises(InvalidVersionFormatError):
            parse_version(123)  # type: ignore

    def test_none_input(self):
        """Test that None input raises error."""
        with pytest.raises(InvalidVersionFormatError):
            parse_version(None)  # type: ignore


class TestIsValidVersion:
    """Tests for is_valid_version function."""

    def test_valid(self):
        """Test strings matching the full grammar."""
        assert is_valid_version("1.2.3") is True
        assert is_valid_version("1.2.3-beta.4") is True
        assert is_valid_version("1.0.0-rc") is True

    def test_degraded_is_not_valid(self):
        """Test that a degraded parse does not count as valid."""
        assert is_valid_version("1.2.3dev") is False

    def test_invalid(self):
        """Test strings with no numeric run and non-strings."""
        assert is_valid_version("abc") is False
        assert is_valid_version(123) is False  # type: ignore


class TestParsedVersionValue:
    """Tests for ParsedVersion equality and immutability."""

    def test_equal(self):
        """Test that parsing the same string twice gives equal values."""
        assert parse_version("1.2.3-beta.4") == parse_version("1.2.3-beta.4")

    def test_hashable(self):
        """Test that parsed versions can be used in sets."""
        v = parse_version("1.0.0")
        assert v in {v}

    def test_frozen(self):
        """Test that ParsedVersion is immutable."""
        v = parse_version("1.0.0")
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.numeric_parts = (2,)  # type: ignore
