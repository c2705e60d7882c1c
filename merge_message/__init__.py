# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Merge commit message classifier - Core modules."""

from merge_message.classifier import MergeMessage, MergeMessageClassifier, classify
from merge_message.config import ClassifierConfiguration
from merge_message.formats import DEFAULT_FORMATS, MergeMessageFormat, PatternError, build_formats
from merge_message.references import ReferenceName
from merge_message.versions import SemanticVersion, SemanticVersionFormat, try_parse

__all__ = [
    "DEFAULT_FORMATS",
    "ClassifierConfiguration",
    "MergeMessage",
    "MergeMessageClassifier",
    "MergeMessageFormat",
    "PatternError",
    "ReferenceName",
    "SemanticVersion",
    "SemanticVersionFormat",
    "build_formats",
    "classify",
    "try_parse",
]
