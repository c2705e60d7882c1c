# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Unit tests for git reference names.

Tests ReferenceName.parse(), ReferenceName.from_branch_name() and the
friendly/without_origin forms from merge_message/references.py.
"""

from __future__ import annotations

import pytest

from merge_message.references import REMOTE_TRACKING_BRANCH_PREFIX, ReferenceName


class TestFromBranchName:
    """Tests for ReferenceName.from_branch_name()."""

    def test_short_name_is_local_branch(self) -> None:
        """Test that a short name gets the refs/heads/ prefix."""
        ref = ReferenceName.from_branch_name("feature/foo")
        assert ref.canonical == "refs/heads/feature/foo"
        assert ref.is_local_branch is True
        assert ref.is_remote_branch is False

    def test_canonical_local_name_is_kept(self) -> None:
        """Test that refs/heads/ names are not prefixed twice."""
        ref = ReferenceName.from_branch_name("refs/heads/main")
        assert ref.canonical == "refs/heads/main"

    def test_remote_tracking_name_is_kept(self) -> None:
        """Test that refs/remotes/ names stay remote-tracking branches."""
        ref = ReferenceName.from_branch_name(f"{REMOTE_TRACKING_BRANCH_PREFIX}origin/main")
        assert ref.canonical == "refs/remotes/origin/main"
        assert ref.is_remote_branch is True

    def test_empty_name_is_accepted(self) -> None:
        """Test that the empty string does not raise."""
        ref = ReferenceName.from_branch_name("")
        assert ref.canonical == "refs/heads/"
        assert ref.friendly == ""
        assert ref.without_origin == ""


class TestParse:
    """Tests for ReferenceName.parse()."""

    def test_parse_tag(self) -> None:
        """Test parsing a tag reference."""
        ref = ReferenceName.parse("refs/tags/v1.2.0")
        assert ref.is_tag is True
        assert ref.friendly == "v1.2.0"

    def test_parse_rejects_short_name(self) -> None:
        """Test that non-canonical names are rejected."""
        with pytest.raises(ValueError, match="not a canonical reference name"):
            ReferenceName.parse("main")


class TestWithoutOrigin:
    """Tests for ReferenceName.without_origin."""

    def test_remote_branch_drops_remote_name(self) -> None:
        """Test that the remote segment is removed from remote-tracking branches."""
        ref = ReferenceName.parse("refs/remotes/origin/release/1.2.0")
        assert ref.friendly == "origin/release/1.2.0"
        assert ref.without_origin == "release/1.2.0"

    def test_remote_branch_other_remote(self) -> None:
        """Test that any remote name is removed, not only origin."""
        ref = ReferenceName.parse("refs/remotes/upstream/main")
        assert ref.without_origin == "main"

    def test_local_branch_drops_origin_prefix(self) -> None:
        """Test that a local name starting with origin/ loses it."""
        ref = ReferenceName.from_branch_name("origin/develop")
        assert ref.without_origin == "develop"

    def test_local_branch_without_origin_unchanged(self) -> None:
        """Test that other local names are unchanged."""
        ref = ReferenceName.from_branch_name("feature/foo")
        assert ref.without_origin == "feature/foo"


class TestEquality:
    """Tests for ReferenceName value semantics."""

    def test_equal_by_canonical_name(self) -> None:
        """Test that references with the same canonical name are equal."""
        assert ReferenceName.from_branch_name("main") == ReferenceName.parse("refs/heads/main")
        assert hash(ReferenceName.from_branch_name("main")) == hash(ReferenceName.parse("refs/heads/main"))

    def test_str_is_canonical(self) -> None:
        """Test string representation."""
        assert str(ReferenceName.from_branch_name("main")) == "refs/heads/main"
