"""Tests for reserved character escaping"""
import pytest

from lineprotocol.escaping import escape


class TestEscape:
    """Test the escape helper"""

    @pytest.mark.parametrize("raw,escaped", [
        ("plain", "plain"),
        ("a b", "a\\ b"),
        ("a,b", "a\\,b"),
        ("a=b", "a\\=b"),
        (" ,=", "\\ \\,\\="),
        ("", ""),
    ])
    def test_reserved_characters(self, raw, escaped):
        """Test each reserved character gains one backslash"""
        assert escape(raw) == escaped

    def test_other_characters_untouched(self):
        """Test quotes, backslashes and newlines pass through"""
        assert escape('"x"\\\n') == '"x"\\\n'

    def test_non_string_input(self):
        """Test values are converted to text first"""
        assert escape(12) == "12"
        assert escape(1.5) == "1.5"

    def test_escaping_is_single_pass(self):
        """Test already escaped input is escaped exactly once more"""
        assert escape("\\,") == "\\\\,"
        assert escape(escape("a b")) == "a\\\\ b"
