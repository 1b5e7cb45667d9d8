"""
Local git repository access for collecting an author's commit times.
"""

import logging
from datetime import datetime
from typing import Iterator

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

logger = logging.getLogger(__name__)


class GitClientError(Exception):
    """Base exception for repository access errors."""

    pass


class GitClient:
    """Client for reading commit history from a local git repository."""

    def __init__(self, path: str):
        """
        Open the repository at path.

        Args:
            path: Path to a git working tree or bare repository

        Raises:
            GitClientError: If the path is missing or not a git repository
        """
        self.path = path
        try:
            self.repo = Repo(path)
        except NoSuchPathError:
            raise GitClientError(f"Repository path '{path}' does not exist.")
        except InvalidGitRepositoryError:
            raise GitClientError(f"'{path}' is not a git repository.")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self) -> None:
        """Stop the git helper processes held by the repository."""
        self.repo.close()

    def author_commit_times(self, email: str) -> Iterator[datetime]:
        """
        Yield local author timestamps of commits reachable from HEAD.

        Args:
            email: Author email to match exactly

        Yields:
            Author datetime of each matching commit, in the local time zone

        Raises:
            GitClientError: If the repository has no commits
        """
        try:
            head = self.repo.head.commit
        except ValueError:
            raise GitClientError(f"Repository '{self.path}' has no commits yet.")

        logger.debug("Walking history of %s from %s", self.path, head.hexsha[:7])
        walked = 0
        matched = 0
        for commit in self.repo.iter_commits(head):
            walked += 1
            if commit.author.email != email:
                continue
            matched += 1
            yield commit.authored_datetime.astimezone()

        logger.debug("Matched %d of %d commits for %s", matched, walked, email)
