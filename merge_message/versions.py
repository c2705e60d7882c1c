# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Semantic version parsing.

This module parses version text embedded in branch names, either strictly
according to SemVer 2.0.0 or with a looser grammar that also accepts partial
and four-part versions.

References:
    - Semantic Versioning 2.0.0: https://semver.org/
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

# SemVer 2.0.0 grammar: no leading zeros in numeric identifiers
# See: https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
STRICT_VERSION_PATTERN = re.compile(
    r"(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?",
    re.ASCII,
)

# Loose grammar: X[.Y[.Z[.R]]][-pre][+build], leading zeros allowed
LOOSE_VERSION_PATTERN = re.compile(
    r"(?P<major>\d+)(?:\.(?P<minor>\d+))?(?:\.(?P<patch>\d+))?(?:\.(?P<revision>\d+))?"
    r"(?:-(?P<prerelease>[^+]*))?(?:\+(?P<buildmetadata>.*))?",
    re.ASCII,
)


class SemanticVersionFormat(Enum):
    """Grammar used when parsing version text."""

    STRICT = "strict"
    LOOSE = "loose"

    @classmethod
    def from_name(cls, name: str) -> SemanticVersionFormat:
        """Look up a format by name, ignoring case.

        Raises:
            ValueError: If the name is not a known format.

        Examples:
            >>> SemanticVersionFormat.from_name("Loose")
            <SemanticVersionFormat.LOOSE: 'loose'>
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown semantic version format '{name}' (expected one of: {valid})") from None


@dataclass(frozen=True)
class SemanticVersion:
    """A parsed semantic version."""

    major: int
    minor: int = 0
    patch: int = 0
    pre_release_tag: str = ""
    build_metadata: str = ""
    revision: int | None = None

    def __str__(self) -> str:
        """Return the SemVer text (e.g., '1.2.3-rc.1+build.5')."""
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release_tag:
            text += f"-{self.pre_release_tag}"
        if self.build_metadata:
            text += f"+{self.build_metadata}"
        return text


def try_parse(
    text: str,
    prefix: str | None = None,
    version_format: SemanticVersionFormat = SemanticVersionFormat.STRICT,
) -> SemanticVersion | None:
    """Parse version text, returning None instead of raising on failure.

    Args:
        text: The text to parse (e.g., '1.2.3', 'v1.2.3').
        prefix: Optional literal prefix removed from the start of the text.
        version_format: Grammar to apply (default: STRICT).

    Returns:
        The parsed SemanticVersion, or None if the text is not a version.

    Examples:
        >>> str(try_parse("v1.2.3", "v"))
        '1.2.3'
        >>> try_parse("1.2") is None
        True
        >>> try_parse("1.2", version_format=SemanticVersionFormat.LOOSE).patch
        0
    """
    if prefix and text.startswith(prefix):
        text = text[len(prefix) :]

    if version_format is SemanticVersionFormat.STRICT:
        match = STRICT_VERSION_PATTERN.fullmatch(text)
        if not match:
            logger.debug("'%s' is not a strict semantic version", text)
            return None
        return SemanticVersion(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            pre_release_tag=match.group("prerelease") or "",
            build_metadata=match.group("buildmetadata") or "",
        )

    match = LOOSE_VERSION_PATTERN.fullmatch(text)
    if not match:
        logger.debug("'%s' is not a loose semantic version", text)
        return None
    revision = match.group("revision")
    return SemanticVersion(
        major=int(match.group("major")),
        minor=int(match.group("minor") or 0),
        patch=int(match.group("patch") or 0),
        pre_release_tag=match.group("prerelease") or "",
        build_metadata=match.group("buildmetadata") or "",
        revision=int(revision) if revision is not None else None,
    )
