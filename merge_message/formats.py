# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Merge message formats (dialect rules) and the ordered rule table.

Each hosting platform or GUI tool writes merge commits in its own wording.
A format is a named, case-insensitive pattern with the named groups
SourceBranch, TargetBranch, Source and PullRequestNumber. Formats are tried
in order and the first one matching from the start of the message wins, so
user formats always come before the built-in ones.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# .NET/PCRE style named group '(?<Name>' as written in tool configuration files.
# Lookbehinds '(?<=' and '(?<!' are left alone.
_NAMED_GROUP = re.compile(r"\(\?<(?=[A-Za-z_])")


class PatternError(ValueError):
    """Raised when a merge message format pattern cannot be compiled."""

    def __init__(self, name: str, pattern: str, reason: str) -> None:
        self.name = name
        self.pattern = pattern
        super().__init__(f"Invalid pattern for merge message format '{name}': {reason} ({pattern!r})")


@dataclass(frozen=True)
class MergeMessageFormat:
    """A named, compiled merge message pattern."""

    name: str
    pattern: re.Pattern[str]

    @classmethod
    def compile(cls, name: str, pattern: str) -> MergeMessageFormat:
        """Compile a raw pattern string into a case-insensitive format.

        Args:
            name: Name of the format (e.g., 'GitHubPull').
            pattern: Raw pattern, Python or .NET named group syntax.

        Returns:
            The compiled MergeMessageFormat.

        Raises:
            PatternError: If the pattern is not a valid regular expression.

        Examples:
            >>> fmt = MergeMessageFormat.compile("Custom", r"^Merged (?<SourceBranch>\\S+)")
            >>> fmt.pattern.match("merged feature/x").group("SourceBranch")
            'feature/x'
        """
        try:
            compiled = re.compile(_NAMED_GROUP.sub("(?P<", pattern), re.IGNORECASE)
        except re.error as e:
            raise PatternError(name, pattern, str(e)) from e
        return cls(name=name, pattern=compiled)


DEFAULT_FORMATS: tuple[MergeMessageFormat, ...] = tuple(
    MergeMessageFormat.compile(name, pattern)
    for name, pattern in (
        (
            "Default",
            r"^Merge (branch|tag) '(?P<SourceBranch>[^']*)'(?: into (?P<TargetBranch>[^\s]*))*",
        ),
        (
            "SmartGit",
            r"^Finish (?P<SourceBranch>[^\s]*)(?: into (?P<TargetBranch>[^\s]*))*",
        ),
        (
            "BitBucketPull",
            r"^Merge pull request #(?P<PullRequestNumber>\d+) (from|in) (?P<Source>.*)"
            r" from (?P<SourceBranch>[^\s]*) to (?P<TargetBranch>[^\s]*)",
        ),
        (
            "BitBucketPullv7",
            r"^Pull request #(?P<PullRequestNumber>\d+).*\r?\n\r?\nMerge in (?P<Source>.*)"
            r" from (?P<SourceBranch>[^\s]*) to (?P<TargetBranch>[^\s]*)",
        ),
        (
            "GitHubPull",
            r"^Merge pull request #(?P<PullRequestNumber>\d+) (from|in) (?:[^\s/]+/)?"
            r"(?P<SourceBranch>[^\s]*)(?: into (?P<TargetBranch>[^\s]*))*",
        ),
        (
            "RemoteTracking",
            r"^Merge remote-tracking branch '(?P<SourceBranch>[^\s]*)'(?: into (?P<TargetBranch>[^\s]*))*",
        ),
    )
)


def build_formats(custom_formats: Mapping[str, str] | None = None) -> tuple[MergeMessageFormat, ...]:
    """Build the ordered rule table: custom formats first, then the built-ins.

    Names are not deduplicated. A custom format named like a built-in is
    simply tried first, which masks the built-in.

    Args:
        custom_formats: Mapping of format name to raw pattern, in evaluation order.

    Returns:
        Tuple of compiled formats in evaluation order.

    Raises:
        PatternError: If any custom pattern is invalid.

    Examples:
        >>> [fmt.name for fmt in build_formats({"Mine": "^Merged (?<SourceBranch>.*)"})][:2]
        ['Mine', 'Default']
    """
    custom = tuple(MergeMessageFormat.compile(name, pattern) for name, pattern in (custom_formats or {}).items())
    if custom:
        logger.debug("Using %d custom merge message format(s): %s", len(custom), ", ".join(f.name for f in custom))
    return custom + DEFAULT_FORMATS
