# Copyright (c) 2026 Mark Ferrell. MIT License.
"""GitHub API wrapper for commit lookups.

References:
    - GitHub REST API: https://docs.github.com/en/rest
    - PyGithub Documentation: https://pygithub.readthedocs.io/
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from github import Github

if TYPE_CHECKING:
    from github.Commit import Commit


class GitHubAPI:
    """Wrapper around PyGithub for reading commits.

    Handles authentication via token input, defaulting to GITHUB_TOKEN
    environment variable if not provided.

    References:
        - Authentication: https://docs.github.com/en/rest/authentication
        - GITHUB_TOKEN: https://docs.github.com/en/actions/security-for-github-actions/security-guides/automatic-token-authentication
    """

    def __init__(self, token: str | None = None, repository: str | None = None) -> None:
        """Initialize the GitHub API client.

        Args:
            token: GitHub token for authentication. Defaults to GITHUB_TOKEN env var.
            repository: Repository in 'owner/repo' format. Defaults to GITHUB_REPOSITORY env var.

        References:
            - Get a repository: https://docs.github.com/en/rest/repos/repos#get-a-repository
        """
        self._token = token or os.environ.get("GITHUB_TOKEN", "")
        self._repository = repository or os.environ.get("GITHUB_REPOSITORY", "")

        if not self._token:
            raise ValueError("GitHub token is required. Set GITHUB_TOKEN or pass token parameter.")
        if not self._repository:
            raise ValueError("Repository is required. Set GITHUB_REPOSITORY or pass repository parameter.")

        self._github = Github(self._token)
        self._repo = self._github.get_repo(self._repository)

    def get_commit(self, commit_sha: str) -> Commit:
        """Get a single commit.

        Args:
            commit_sha: SHA of the commit.

        Raises:
            GithubException: If the commit doesn't exist or access fails.

        References:
            - Get a commit: https://docs.github.com/en/rest/commits/commits#get-a-commit
        """
        return self._repo.get_commit(commit_sha)

    def get_commit_message(self, commit_sha: str) -> str:
        """Get the full message of a commit.

        Args:
            commit_sha: SHA of the commit.

        Returns:
            The commit message, including its body.

        Raises:
            GithubException: If the commit doesn't exist or access fails.
        """
        return self.get_commit(commit_sha).commit.message

    def get_parent_count(self, commit_sha: str) -> int:
        """Get the number of parents of a commit (2 or more for merge commits).

        Raises:
            GithubException: If the commit doesn't exist or access fails.
        """
        return len(self.get_commit(commit_sha).parents)
