"""Unit tests for github_api.py - GitHubAPI wrapper methods."""

from typing import Any
from unittest.mock import MagicMock, patch

import pytest
from github.GithubException import GithubException

from merge_message.github_api import GitHubAPI
from tests.conftest import make_commit


class TestGitHubAPIInit:
    """Tests for GitHubAPI initialization and token handling."""

    def test_init_with_explicit_token_and_repo(self):
        """GitHubAPI initializes with explicit token and repository."""
        with patch("merge_message.github_api.Github") as mock_github:
            mock_repo = MagicMock()
            mock_github.return_value.get_repo.return_value = mock_repo

            GitHubAPI(token="test-token", repository="owner/repo")

            mock_github.assert_called_once_with("test-token")
            mock_github.return_value.get_repo.assert_called_once_with("owner/repo")

    def test_init_with_env_vars(self, monkeypatch):
        """GitHubAPI uses environment variables when parameters not provided."""
        monkeypatch.setenv("GITHUB_TOKEN", "env-token")
        monkeypatch.setenv("GITHUB_REPOSITORY", "env-owner/env-repo")

        with patch("merge_message.github_api.Github") as mock_github:
            GitHubAPI()

            mock_github.assert_called_once_with("env-token")
            mock_github.return_value.get_repo.assert_called_once_with("env-owner/env-repo")

    def test_init_missing_token_raises_error(self, monkeypatch):
        """GitHubAPI raises ValueError when token is missing."""
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)
        monkeypatch.setenv("GITHUB_REPOSITORY", "owner/repo")

        with pytest.raises(ValueError, match="GitHub token is required"):
            GitHubAPI()

    def test_init_missing_repository_raises_error(self, monkeypatch):
        """GitHubAPI raises ValueError when repository is missing."""
        monkeypatch.setenv("GITHUB_TOKEN", "test-token")
        monkeypatch.delenv("GITHUB_REPOSITORY", raising=False)

        with pytest.raises(ValueError, match="Repository is required"):
            GitHubAPI()


class TestGetCommit:
    """Tests for GitHubAPI commit lookups."""

    def test_get_commit_message(self, mock_pygithub: dict[str, Any]):
        """get_commit_message returns the full commit message."""
        mock_repo = mock_pygithub["repo"]
        mock_repo.get_commit.return_value = make_commit("Merge pull request #1 from owner/feature/x\n\nBody")

        api = GitHubAPI(token="test-token", repository="owner/repo")
        result = api.get_commit_message("abc123")

        assert result == "Merge pull request #1 from owner/feature/x\n\nBody"
        mock_repo.get_commit.assert_called_once_with("abc123")

    def test_get_parent_count_merge_commit(self, mock_pygithub: dict[str, Any]):
        """get_parent_count returns 2 for a merge commit."""
        mock_pygithub["repo"].get_commit.return_value = make_commit("Merge branch 'a'", parent_count=2)

        api = GitHubAPI(token="test-token", repository="owner/repo")

        assert api.get_parent_count("abc123") == 2

    def test_get_parent_count_regular_commit(self, mock_pygithub: dict[str, Any]):
        """get_parent_count returns 1 for a regular commit."""
        mock_pygithub["repo"].get_commit.return_value = make_commit("Add file", parent_count=1)

        api = GitHubAPI(token="test-token", repository="owner/repo")

        assert api.get_parent_count("abc123") == 1

    def test_get_commit_propagates_errors(self, mock_pygithub: dict[str, Any]):
        """get_commit_message propagates GithubException."""
        mock_pygithub["repo"].get_commit.side_effect = GithubException(404, "Not Found", None)

        api = GitHubAPI(token="test-token", repository="owner/repo")

        with pytest.raises(GithubException):
            api.get_commit_message("missing")
