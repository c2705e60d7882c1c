# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Classifier configuration.

Configuration is plain data built by the caller (or by the action entry
point from its inputs) before any message is classified.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from merge_message.versions import SemanticVersionFormat

logger = logging.getLogger(__name__)

DEFAULT_LABEL_PREFIX = "v"


@dataclass(frozen=True)
class ClassifierConfiguration:
    """Settings consumed by the merge message classifier."""

    merge_message_formats: Mapping[str, str] = field(default_factory=dict)
    label_prefix: str | None = DEFAULT_LABEL_PREFIX
    semantic_version_format: SemanticVersionFormat = SemanticVersionFormat.STRICT


def parse_format_lines(text: str) -> dict[str, str]:
    """Parse NAME=PATTERN lines into an ordered format mapping.

    Blank lines and lines starting with '#' are skipped. Only the first '='
    separates the name from the pattern, so patterns may contain '='.

    Args:
        text: Newline separated format definitions.

    Returns:
        Dict of format name to pattern, in the order given.

    Raises:
        ValueError: If a line has no '=', an empty name, or repeats a name.

    Examples:
        >>> parse_format_lines("Squash=^Squashed (?<SourceBranch>\\\\S+)")
        {'Squash': '^Squashed (?<SourceBranch>\\\\S+)'}
    """
    formats: dict[str, str] = {}
    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        name, sep, pattern = line.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Line {line_number}: expected NAME=PATTERN, got '{line}'")
        if name in formats:
            raise ValueError(f"Line {line_number}: duplicate merge message format '{name}'")

        formats[name] = pattern.strip()

    logger.debug("Parsed %d merge message format(s)", len(formats))
    return formats
