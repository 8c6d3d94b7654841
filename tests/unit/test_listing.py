"""
Unit tests for filtered directory listings.
"""

from kvfilter.models.config import FilterConfig
from kvfilter.models.entry import Entry, entries_from_paths
from kvfilter.models.navigation import NavigationDecision
from kvfilter.tools.listing import ListingItem, list_directory, list_for_decision
from kvfilter.tools.path_filter import PathFilterEngine


class TestListDirectory:
    """Test cases for list_directory."""

    def setup_method(self):
        """Set up test fixtures."""
        self.entries = entries_from_paths(["my-secret", "my", "beep/boop/bop", "beep/boop-1", "beep/boop/bap"])

    def test_root_listing(self):
        """Test that deep keys collapse into directories at the root."""
        items = list_directory(self.entries, "")
        assert [item.name for item in items] == ["my-secret", "my", "beep/"]
        assert items[2].is_directory
        assert not items[0].is_directory

    def test_directory_listing(self):
        """Test listing a sub-directory."""
        items = list_directory(self.entries, "beep/")
        assert items == [
            ListingItem(name="boop/", path="beep/boop/", is_directory=True),
            ListingItem(name="boop-1", path="beep/boop-1", is_directory=False),
        ]

    def test_filter_by_substring(self):
        """Test that only children containing the filter are kept."""
        assert [item.name for item in list_directory(self.entries, "beep/", "boop-")] == ["boop-1"]
        assert [item.name for item in list_directory(self.entries, "beep/", "oop")] == ["boop/", "boop-1"]
        assert [item.name for item in list_directory(self.entries, "", "secret")] == ["my-secret"]

    def test_case_sensitivity(self):
        """Test case-sensitive and case-insensitive matching."""
        assert list_directory(self.entries, "", "MY") == []
        insensitive = list_directory(self.entries, "", "MY", case_sensitive=False)
        assert [item.name for item in insensitive] == ["my-secret", "my"]

    def test_unknown_directory(self):
        """Test that a directory with no keys lists nothing."""
        assert list_directory(self.entries, "nope/") == []

    def test_directory_key_not_listed_in_itself(self):
        """Test that a directory-style key is not its own child."""
        entries = entries_from_paths(["a/", "a/b"])
        assert [item.path for item in list_directory(entries, "a/")] == ["a/b"]
        assert [item.path for item in list_directory(entries, "")] == ["a/"]


class TestListForDecision:
    """Test cases for list_for_decision."""

    def test_uses_decision_and_config(self):
        """Test listing the directory a decision points at."""
        entries = entries_from_paths(["beep/Boop", "beep/bap"])
        decision = NavigationDecision(target_directory="beep/", residual_filter="boop")
        config = FilterConfig.from_dict({'listing': {'case_sensitive': False}})

        assert [item.name for item in list_for_decision(entries, decision)] == []
        assert [item.name for item in list_for_decision(entries, decision, config)] == ["Boop"]


class TestPlainKeys:
    """Test cases for listings built from plain key strings."""

    def test_list_plain_keys(self):
        """Test that a snapshot of key strings can be resolved and listed."""
        keys = ["beep/boop", "my", "beep/bap/x"]
        decision = PathFilterEngine().resolve(keys, "", "beep/")

        items = list_for_decision(keys, decision)
        assert [item.path for item in items] == ["beep/boop", "beep/bap/"]

    def test_mixed_entries_and_keys(self):
        """Test that entries and key strings can be listed together."""
        items = list_directory([Entry(path="a/b"), "a/c"], "a/", "c")
        assert [item.name for item in items] == ["c"]
