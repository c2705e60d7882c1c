"""Shared pytest fixtures for the test suite."""

from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from merge_message.config import ClassifierConfiguration


def make_commit(message: str, parent_count: int = 2) -> MagicMock:
    """Create a mock commit object with the given message.

    This is a shared helper for creating mock GitHub commit objects
    used across multiple test modules.

    Args:
        message: The full commit message.
        parent_count: Number of parents (2 for a merge commit).
    """
    commit = MagicMock()
    commit.commit.message = message
    commit.parents = [MagicMock() for _ in range(parent_count)]
    return commit


@pytest.fixture
def default_config() -> ClassifierConfiguration:
    """Configuration with the default label prefix and strict versions."""
    return ClassifierConfiguration()


@pytest.fixture
def mock_github_env(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock GitHub environment variables."""
    env_vars = {
        "GITHUB_SHA": "abc123def456",
        "GITHUB_REPOSITORY": "owner/repo",
        "GITHUB_OUTPUT": "/dev/null",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def mock_pygithub() -> Generator[dict[str, Any], None, None]:
    """Patch PyGithub for unit tests."""
    with patch("merge_message.github_api.Github") as mock_github:
        mock_repo = MagicMock()
        mock_github.return_value.get_repo.return_value = mock_repo
        yield {"github": mock_github, "repo": mock_repo}


@pytest.fixture
def sample_messages() -> dict[str, str]:
    """Sample merge commit messages, one per built-in format."""
    return {
        "Default": "Merge branch 'feature/foo' into develop",
        "SmartGit": "Finish feature/abc into develop",
        "BitBucketPull": "Merge pull request #7 in PROJ/repo from feature/bar to develop",
        "BitBucketPullv7": "Pull request #68: Release/2.2\n\nMerge in aaa/777 from release/2.2 to master",
        "GitHubPull": "Merge pull request #1234 from owner/feature/foo\n\nAdd foo",
        "RemoteTracking": "Merge remote-tracking branch 'origin/feature/x' into main",
    }
