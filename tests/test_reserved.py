"""Tests for reserved word escaping."""
import pytest
from tsdecl.translation import RESERVED_WORDS, clean_reserved


class TestCleanReserved:
    """Tests for clean_reserved."""

    def test_reserved_word(self) -> None:
        assert clean_reserved("class") == "__class"

    def test_strict_mode_word(self) -> None:
        assert clean_reserved("yield") == "__yield"
        assert clean_reserved("interface") == "__interface"

    def test_plain_identifier(self) -> None:
        assert clean_reserved("fooBar") == "fooBar"

    def test_case_sensitive(self) -> None:
        assert clean_reserved("Class") == "Class"

    def test_escaped_form_never_reserved(self) -> None:
        """Test that escaping always produces a usable identifier."""
        for word in RESERVED_WORDS:
            escaped = clean_reserved(word)
            assert escaped not in RESERVED_WORDS
            assert clean_reserved(escaped) == escaped
