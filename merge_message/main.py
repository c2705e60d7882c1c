# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Main entry point for the merge message classifier action.

This module reads the action inputs, resolves the commit message to classify
and writes the extracted metadata as action outputs.

References:
    - GitHub Actions Environment Variables:
      https://docs.github.com/en/actions/writing-workflows/choosing-what-your-workflow-does/store-information-in-variables#default-environment-variables
    - GitHub Actions Outputs:
      https://docs.github.com/en/actions/writing-workflows/choosing-what-your-workflow-does/passing-information-between-jobs#setting-an-output-parameter
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass, field

from github.GithubException import GithubException

from merge_message.classifier import MergeMessage, MergeMessageClassifier
from merge_message.config import DEFAULT_LABEL_PREFIX, ClassifierConfiguration, parse_format_lines
from merge_message.formats import PatternError
from merge_message.github_api import GitHubAPI
from merge_message.versions import SemanticVersionFormat

logger = logging.getLogger(__name__)


@dataclass
class ActionInputs:
    """Parsed action inputs from CLI arguments or environment variables."""

    token: str
    debug: bool
    message: str = ""
    label_prefix: str | None = DEFAULT_LABEL_PREFIX
    version_format: SemanticVersionFormat = SemanticVersionFormat.STRICT
    formats: dict[str, str] = field(default_factory=dict)


@dataclass
class GitHubContext:
    """GitHub event context from environment variables."""

    sha: str
    repository: str


@dataclass
class ActionOutputs:
    """Action outputs to be written to GITHUB_OUTPUT."""

    format_name: str = ""
    merged_branch: str = ""
    target_branch: str = ""
    pull_request_number: str = ""
    is_merged_pull_request: str = "false"
    version: str = ""


def parse_inputs(args: list[str] | None = None) -> ActionInputs:
    """Parse action inputs from CLI arguments or environment variables.

    CLI arguments take precedence over environment variables.

    Args:
        args: Optional list of CLI arguments. If None, uses environment
              variables only (GitHub Actions mode).

    Returns:
        ActionInputs with parsed values.
    """
    parser = argparse.ArgumentParser(
        description="Merge Message Classifier - Extract branch, pull request and version from merge commits",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables (used as defaults when CLI args not provided):
  INPUT_MESSAGE                  Commit message to classify
  INPUT_TOKEN, GITHUB_TOKEN      GitHub token, used to fetch GITHUB_SHA's message
  INPUT_DEBUG                    Enable debug logging (true/false)
  INPUT_LABEL_PREFIX             Literal prefix before versions in branch names
  INPUT_VERSION_FORMAT           strict or loose
  INPUT_MERGE_MESSAGE_FORMATS    NAME=PATTERN lines, tried before the built-ins

Examples:
  # Run with environment variables (GitHub Actions mode)
  python -m merge_message.main

  # Classify a message locally
  python -m merge_message.main --message "Merge branch 'release/1.2.0' into main"

  # Add a custom format
  python -m merge_message.main --format "Squash=^Squashed (?<SourceBranch>\\S+)" --message "Squashed feature/x"
        """,
    )

    parser.add_argument(
        "--message",
        default=os.environ.get("INPUT_MESSAGE", ""),
        help="Commit message to classify (default: message of GITHUB_SHA)",
    )
    parser.add_argument(
        "--token",
        default=os.environ.get("INPUT_TOKEN", os.environ.get("GITHUB_TOKEN", "")),
        help="GitHub token for authentication (default: from INPUT_TOKEN or GITHUB_TOKEN env)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=os.environ.get("INPUT_DEBUG", "false").lower() == "true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--label-prefix",
        default=os.environ.get("INPUT_LABEL_PREFIX", DEFAULT_LABEL_PREFIX),
        help="Literal prefix before versions in branch names (default: v)",
    )
    parser.add_argument(
        "--no-label-prefix",
        action="store_true",
        help="Disable version extraction from merged branch names",
    )
    parser.add_argument(
        "--version-format",
        default=os.environ.get("INPUT_VERSION_FORMAT", SemanticVersionFormat.STRICT.value),
        help="Semantic version grammar: strict or loose (default: strict)",
    )
    parser.add_argument(
        "--format",
        action="append",
        dest="formats",
        metavar="NAME=PATTERN",
        help="Custom merge message format, tried before the built-ins (repeatable)",
    )

    parsed = parser.parse_args(args if args is not None else [])

    try:
        version_format = SemanticVersionFormat.from_name(parsed.version_format)
    except ValueError as e:
        logger.error("Invalid version-format: %s", e)
        sys.exit(1)

    format_lines = "\n".join(parsed.formats) if parsed.formats else os.environ.get("INPUT_MERGE_MESSAGE_FORMATS", "")
    try:
        formats = parse_format_lines(format_lines)
    except ValueError as e:
        logger.error("Invalid merge-message-formats: %s", e)
        sys.exit(1)

    return ActionInputs(
        token=parsed.token,
        debug=parsed.debug,
        message=parsed.message,
        label_prefix=None if parsed.no_label_prefix else parsed.label_prefix,
        version_format=version_format,
        formats=formats,
    )


def parse_context() -> GitHubContext:
    """Parse GitHub context from environment variables."""
    return GitHubContext(
        sha=os.environ.get("GITHUB_SHA", ""),
        repository=os.environ.get("GITHUB_REPOSITORY", ""),
    )


def configure_logging(debug: bool) -> None:
    """Configure logging based on debug flag.

    Args:
        debug: If True, enable DEBUG level logging.
    """
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def resolve_message(inputs: ActionInputs, context: GitHubContext) -> str:
    """Return the commit message to classify.

    An explicit message input wins; otherwise the message of the commit at
    GITHUB_SHA is fetched from the repository.

    Args:
        inputs: Action inputs.
        context: GitHub event context.

    Returns:
        The commit message.

    Raises:
        ValueError: If there is neither a message nor a commit to read it from.
        GithubException: If the commit cannot be fetched.
    """
    if inputs.message:
        return inputs.message

    if not context.sha:
        raise ValueError("No message given and GITHUB_SHA is not set.")

    api = GitHubAPI(token=inputs.token, repository=context.repository)
    if api.get_parent_count(context.sha) < 2:
        logger.info("Commit %s is not a merge commit", context.sha[:7])

    logger.debug("Fetched message of commit %s", context.sha[:7])
    return api.get_commit_message(context.sha)


def build_outputs(result: MergeMessage) -> ActionOutputs:
    """Convert a classification result into action output strings."""
    outputs = ActionOutputs(is_merged_pull_request="true" if result.is_merged_pull_request else "false")
    if result.format_name is not None:
        outputs.format_name = result.format_name
    if result.merged_branch is not None:
        outputs.merged_branch = result.merged_branch.friendly
    if result.target_branch is not None:
        outputs.target_branch = result.target_branch
    if result.pull_request_number is not None:
        outputs.pull_request_number = str(result.pull_request_number)
    if result.version is not None:
        outputs.version = str(result.version)
    return outputs


def set_outputs(outputs: ActionOutputs) -> None:
    """Write action outputs to GITHUB_OUTPUT file.

    Args:
        outputs: ActionOutputs to write.
    """
    output_file = os.environ.get("GITHUB_OUTPUT", "")
    if not output_file:
        logger.warning("GITHUB_OUTPUT not set, outputs will not be written")
        return

    with open(output_file, "a") as f:
        f.write(f"format-name={outputs.format_name}\n")
        f.write(f"merged-branch={outputs.merged_branch}\n")
        f.write(f"target-branch={outputs.target_branch}\n")
        f.write(f"pull-request-number={outputs.pull_request_number}\n")
        f.write(f"is-merged-pull-request={outputs.is_merged_pull_request}\n")
        f.write(f"version={outputs.version}\n")

    logger.info("Set outputs: format-name=%s, version=%s", outputs.format_name, outputs.version)


def main() -> None:
    """Main entry point for the action."""
    inputs = parse_inputs(sys.argv[1:])
    configure_logging(inputs.debug)

    context = parse_context()

    configuration = ClassifierConfiguration(
        merge_message_formats=inputs.formats,
        label_prefix=inputs.label_prefix,
        semantic_version_format=inputs.version_format,
    )
    try:
        classifier = MergeMessageClassifier(configuration)
    except PatternError as e:
        logger.error("%s", e)
        sys.exit(1)

    try:
        message = resolve_message(inputs, context)
    except (ValueError, GithubException) as e:
        logger.error("Failed to read commit message: %s", e)
        sys.exit(1)

    result = classifier.classify(message)
    if result.format_name is None:
        logger.info("Message does not match any merge message format")
    else:
        logger.info("Matched merge message format '%s'", result.format_name)

    set_outputs(build_outputs(result))


if __name__ == "__main__":  # pragma: no cover
    main()
