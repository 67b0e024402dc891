"""
Tests for search path parsing.
"""

from srclibkit.toolchain.search_path import SearchPath


class TestSearchPathParse:
    """Test SearchPath.parse."""

    def test_single_entry(self):
        """Test a single directory."""
        assert list(SearchPath.parse("/opt/srclib")) == ["/opt/srclib"]

    def test_preserves_order(self):
        """Test entries keep their order."""
        assert list(SearchPath.parse("/b:/a:/c")) == ["/b", "/a", "/c"]

    def test_empty_segments_become_current_dir(self):
        """Test empty segments map to '.'."""
        assert list(SearchPath.parse(":/a::")) == [".", "/a", ".", "."]

    def test_empty_string(self):
        """Test empty string is the current directory."""
        assert list(SearchPath.parse("")) == ["."]

    def test_no_deduplication(self):
        """Test repeated entries are kept."""
        assert list(SearchPath.parse("/a:/a")) == ["/a", "/a"]


class TestSearchPathBehaviour:
    """Test SearchPath container behaviour."""

    def test_str_round_trip(self):
        """Test str() joins entries with colons."""
        assert str(SearchPath.parse("/a:/b")) == "/a:/b"

    def test_len_and_index(self):
        """Test len() and indexing."""
        search_path = SearchPath.parse("/a:/b")
        assert len(search_path) == 2
        assert search_path[1] == "/b"

    def test_entries_is_a_copy(self):
        """Test modifying entries doesn't change the search path."""
        search_path = SearchPath.parse("/a")
        search_path.entries.append("/b")
        assert list(search_path) == ["/a"]

    def test_equality(self):
        """Test equality compares entries."""
        assert SearchPath.parse("/a:/b") == SearchPath(["/a", "/b"])
        assert SearchPath.parse("/a") != SearchPath.parse("/b")
