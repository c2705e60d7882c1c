# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Merge commit message classification.

This module matches a merge commit message against the ordered merge message
formats and extracts the merged branch, the target branch, the pull request
number and any version embedded in the merged branch name.

References:
    - Semantic Versioning 2.0.0: https://semver.org/
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from merge_message.config import ClassifierConfiguration
from merge_message.formats import MergeMessageFormat, build_formats
from merge_message.references import REMOTE_TRACKING_BRANCH_PREFIX, ReferenceName
from merge_message.versions import SemanticVersion, SemanticVersionFormat, try_parse

logger = logging.getLogger(__name__)

REMOTE_TRACKING_FORMAT = "RemoteTracking"

# Flow prefixes such as release/, feature-, hotfix/ (chained any number of times)
FLOW_PREFIX_PATTERN = re.compile(r"^(\w+[-/])*", re.IGNORECASE)

# Leading X.Y[.Z...] version number
VERSION_NUMBER_PATTERN = re.compile(r"^\d+\.\d+(?:\.\d+)*", re.ASCII)

# Version text right after a scheme separator is a URL, not a version
URL_SCHEME_SEPARATOR = "://"

# Pull request numbers: no sign, no leading zeros, signed 32-bit range
PULL_REQUEST_NUMBER_PATTERN = re.compile(r"^(0|[1-9][0-9]*)$")
MAX_PULL_REQUEST_NUMBER = 2**31 - 1


@dataclass(frozen=True)
class MergeMessage:
    """Metadata extracted from a merge commit message."""

    format_name: str | None = None
    merged_branch: ReferenceName | None = None
    target_branch: str | None = None
    pull_request_number: int | None = None
    version: SemanticVersion | None = None

    @classmethod
    def empty(cls) -> MergeMessage:
        """Return the result for a message no format matched."""
        return cls()

    @property
    def is_merged_pull_request(self) -> bool:
        return self.pull_request_number is not None


def _parse_pull_request_number(text: str | None) -> int | None:
    """Parse a captured pull request number.

    Examples:
        >>> _parse_pull_request_number("42")
        42
        >>> _parse_pull_request_number("042") is None
        True
    """
    if text is None or not PULL_REQUEST_NUMBER_PATTERN.match(text):
        return None
    number = int(text)
    if number > MAX_PULL_REQUEST_NUMBER:
        return None
    return number


def _merged_branch_name(format_name: str, source_branch: str) -> ReferenceName:
    """Build the merged branch reference, qualifying remote-tracking branches."""
    if format_name == REMOTE_TRACKING_FORMAT and not source_branch.startswith(REMOTE_TRACKING_BRANCH_PREFIX):
        source_branch = f"{REMOTE_TRACKING_BRANCH_PREFIX}{source_branch}"
    return ReferenceName.from_branch_name(source_branch)


def extract_version(
    merged_branch: ReferenceName | None,
    label_prefix: str | None,
    version_format: SemanticVersionFormat = SemanticVersionFormat.STRICT,
) -> SemanticVersion | None:
    """Extract a version embedded in a merged branch name.

    The remote name and any flow prefixes ('release/', 'feature-', ...) are
    removed, then the label prefix if the remainder starts with it exactly
    (case-sensitive). The remainder must start with an X.Y[.Z...] number that
    does not directly follow '://'.

    Args:
        merged_branch: The merged branch reference.
        label_prefix: Literal prefix expected before versions (e.g., 'v').
        version_format: Grammar used to parse the version number.

    Returns:
        The embedded SemanticVersion, or None if there is none.

    Examples:
        >>> str(extract_version(ReferenceName.from_branch_name("release/v1.2.0"), "v"))
        '1.2.0'
        >>> extract_version(ReferenceName.from_branch_name("http://2.3.4"), "v") is None
        True
    """
    if label_prefix is None or merged_branch is None:
        return None

    branch_name = merged_branch.without_origin
    remainder = FLOW_PREFIX_PATTERN.sub("", branch_name, count=1)
    if remainder.startswith(label_prefix):
        remainder = remainder[len(label_prefix) :]

    preceding = branch_name[: len(branch_name) - len(remainder)]
    if preceding.endswith(URL_SCHEME_SEPARATOR):
        logger.debug("Ignoring version in '%s': looks like a URL", branch_name)
        return None

    match = VERSION_NUMBER_PATTERN.match(remainder)
    if not match:
        return None

    version = try_parse(match.group(0), label_prefix, version_format)
    if version is None:
        logger.debug("'%s' in branch '%s' is not a %s version", match.group(0), branch_name, version_format.value)
    return version


class MergeMessageClassifier:
    """Classifies merge commit messages against a compiled rule table.

    The rule table is compiled once and only read afterwards, so one
    classifier can be shared between threads.
    """

    def __init__(self, configuration: ClassifierConfiguration | None = None) -> None:
        """Compile the merge message formats for a configuration.

        Args:
            configuration: Classifier settings. Defaults to ClassifierConfiguration().

        Raises:
            PatternError: If a configured merge message format is invalid.
        """
        self._configuration = configuration or ClassifierConfiguration()
        self._formats = build_formats(self._configuration.merge_message_formats)

    @property
    def configuration(self) -> ClassifierConfiguration:
        return self._configuration

    @property
    def formats(self) -> tuple[MergeMessageFormat, ...]:
        return self._formats

    def classify(self, message: str) -> MergeMessage:
        """Classify a merge commit message.

        The first format whose pattern matches at the start of the message
        wins. An empty message, or one no format matches, gives an empty
        result.

        Args:
            message: The literal commit message.

        Returns:
            MergeMessage with the extracted metadata.

        Raises:
            ValueError: If message is None.

        Examples:
            >>> result = MergeMessageClassifier().classify("Merge branch 'feature/foo' into develop")
            >>> result.format_name, result.merged_branch.friendly, result.target_branch
            ('Default', 'feature/foo', 'develop')
        """
        if message is None:
            raise ValueError("Merge message is required.")

        if not message:
            return MergeMessage.empty()

        for merge_format in self._formats:
            match = merge_format.pattern.match(message)
            if not match:
                continue

            groups = match.groupdict()
            source_branch = groups.get("SourceBranch")
            merged_branch = None
            if source_branch is not None:
                merged_branch = _merged_branch_name(merge_format.name, source_branch)

            result = MergeMessage(
                format_name=merge_format.name,
                merged_branch=merged_branch,
                target_branch=groups.get("TargetBranch"),
                pull_request_number=_parse_pull_request_number(groups.get("PullRequestNumber")),
                version=extract_version(
                    merged_branch,
                    self._configuration.label_prefix,
                    self._configuration.semantic_version_format,
                ),
            )
            logger.debug(
                "Message matched format '%s': merged=%s target=%s pr=%s version=%s",
                result.format_name,
                result.merged_branch,
                result.target_branch,
                result.pull_request_number,
                result.version,
            )
            return result

        logger.debug("Message did not match any merge message format")
        return MergeMessage.empty()


def classify(message: str, configuration: ClassifierConfiguration | None = None) -> MergeMessage:
    """Classify a merge commit message with a one-off classifier.

    Args:
        message: The literal commit message.
        configuration: Classifier settings. Defaults to ClassifierConfiguration().

    Returns:
        MergeMessage with the extracted metadata.

    Raises:
        PatternError: If a configured merge message format is invalid.
        ValueError: If message is None.
    """
    return MergeMessageClassifier(configuration).classify(message)
