# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Git reference names for branches and tags.

A reference name is kept in its canonical form (e.g. 'refs/heads/main') and
exposes the shorter forms used when matching branch names against versions.

References:
    - git-check-ref-format: https://git-scm.com/docs/git-check-ref-format
    - Git References: https://git-scm.com/book/en/v2/Git-Internals-Git-References
"""

from __future__ import annotations

from dataclasses import dataclass

LOCAL_BRANCH_PREFIX = "refs/heads/"
REMOTE_TRACKING_BRANCH_PREFIX = "refs/remotes/"
TAG_PREFIX = "refs/tags/"
ORIGIN_PREFIX = "origin/"

KNOWN_PREFIXES = (LOCAL_BRANCH_PREFIX, REMOTE_TRACKING_BRANCH_PREFIX, TAG_PREFIX)


@dataclass(frozen=True)
class ReferenceName:
    """A canonical git reference name (branch, remote-tracking branch or tag)."""

    canonical: str

    @classmethod
    def parse(cls, canonical_name: str) -> ReferenceName:
        """Create a reference from an already canonical name.

        Args:
            canonical_name: Full reference name (e.g., 'refs/heads/main').

        Returns:
            The ReferenceName for the given canonical name.

        Raises:
            ValueError: If the name does not start with a known reference prefix.

        Examples:
            >>> ReferenceName.parse("refs/tags/v1.2.0").friendly
            'v1.2.0'
        """
        if canonical_name.startswith(KNOWN_PREFIXES):
            return cls(canonical_name)
        raise ValueError(f"'{canonical_name}' is not a canonical reference name")

    @classmethod
    def from_branch_name(cls, branch_name: str) -> ReferenceName:
        """Create a branch reference from a short or canonical branch name.

        Names already carrying the local or remote-tracking prefix are kept as
        they are, anything else is treated as a local branch. The empty string
        is accepted and yields the bare 'refs/heads/' reference.

        Args:
            branch_name: Branch name (e.g., 'feature/foo', 'refs/remotes/origin/main').

        Returns:
            The ReferenceName for the branch.

        Examples:
            >>> ReferenceName.from_branch_name("feature/foo").canonical
            'refs/heads/feature/foo'
            >>> ReferenceName.from_branch_name("refs/remotes/origin/main").canonical
            'refs/remotes/origin/main'
        """
        if branch_name.startswith((LOCAL_BRANCH_PREFIX, REMOTE_TRACKING_BRANCH_PREFIX)):
            return cls.parse(branch_name)
        return cls.parse(f"{LOCAL_BRANCH_PREFIX}{branch_name}")

    @property
    def is_local_branch(self) -> bool:
        return self.canonical.startswith(LOCAL_BRANCH_PREFIX)

    @property
    def is_remote_branch(self) -> bool:
        return self.canonical.startswith(REMOTE_TRACKING_BRANCH_PREFIX)

    @property
    def is_tag(self) -> bool:
        return self.canonical.startswith(TAG_PREFIX)

    @property
    def friendly(self) -> str:
        """Return the name with its reference prefix removed.

        Examples:
            >>> ReferenceName.parse("refs/remotes/origin/main").friendly
            'origin/main'
        """
        for prefix in KNOWN_PREFIXES:
            if self.canonical.startswith(prefix):
                return self.canonical[len(prefix) :]
        return self.canonical

    @property
    def without_origin(self) -> str:
        """Return the friendly name without the remote name segment.

        Remote-tracking branches drop their first path segment (the remote),
        local branches only drop a leading 'origin/'.

        Examples:
            >>> ReferenceName.parse("refs/remotes/upstream/release/1.2.0").without_origin
            'release/1.2.0'
            >>> ReferenceName.from_branch_name("origin/develop").without_origin
            'develop'
        """
        friendly = self.friendly
        if self.is_remote_branch:
            _, sep, rest = friendly.partition("/")
            return rest if sep else friendly
        if friendly.startswith(ORIGIN_PREFIX):
            return friendly[len(ORIGIN_PREFIX) :]
        return friendly

    def __str__(self) -> str:
        return self.canonical
