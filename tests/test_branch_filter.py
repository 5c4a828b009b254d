"""Tests for the branch filter"""
import pytest

from git_branch_cleanup.models.branch_filter import BranchFilter, FilterMode
from git_branch_cleanup.services.branch_filter import build_filter

GONE_LINE = "  feature/1 34a234a [origin/feature/1: gone] Implemented endpoints"
BEHIND_LINE = "  feature/2 3fc2e37 [origin/feature/2: behind 71] Added CLI command"
CURRENT_LINE = "* master    34a234a [origin/master] Merged some features"


class TestBuildFilter:
    """Test which mode is picked from the options."""

    def test_default_is_marker_only(self):
        assert build_filter() == BranchFilter(FilterMode.MARKER_ONLY)

    def test_free_text_wins(self):
        branch_filter = build_filter("behind", "feature")
        assert branch_filter.mode is FilterMode.FREE_TEXT
        assert branch_filter.text == "behind"

    def test_and_filter(self):
        branch_filter = build_filter(None, "feature/1")
        assert branch_filter.mode is FilterMode.MARKER_AND_TEXT
        assert branch_filter.text == "feature/1"

    def test_empty_strings_not_configured(self):
        assert build_filter("", "").mode is FilterMode.MARKER_ONLY


class TestMatches:
    """Test matching status lines."""

    def test_marker_only(self):
        branch_filter = BranchFilter()
        assert branch_filter.matches(GONE_LINE)
        assert not branch_filter.matches(BEHIND_LINE)
        assert not branch_filter.matches(CURRENT_LINE)

    def test_free_text_ignores_goneness(self):
        branch_filter = build_filter("behind 71")
        assert branch_filter.matches(BEHIND_LINE)
        assert not branch_filter.matches(GONE_LINE)

    def test_marker_and_text(self):
        branch_filter = build_filter(and_filter_text="endpoints")
        assert branch_filter.matches(GONE_LINE)
        assert not branch_filter.matches(BEHIND_LINE.replace("behind 71", "gone"))
        assert not branch_filter.matches(BEHIND_LINE)

    def test_callable(self):
        assert BranchFilter()(GONE_LINE)


class TestValidation:
    """Test that modes and texts must agree."""

    def test_text_modes_require_text(self):
        with pytest.raises(ValueError, match="requires a non-empty match text"):
            BranchFilter(FilterMode.FREE_TEXT)
        with pytest.raises(ValueError, match="requires a non-empty match text"):
            BranchFilter(FilterMode.MARKER_AND_TEXT, "")

    def test_marker_only_rejects_text(self):
        with pytest.raises(ValueError, match="does not take a match text"):
            BranchFilter(FilterMode.MARKER_ONLY, "gone")

    def test_immutable(self):
        branch_filter = BranchFilter()
        with pytest.raises(AttributeError):
            branch_filter.text = "x"
