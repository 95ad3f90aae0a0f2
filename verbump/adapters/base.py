"""Abstract base for Git platform adapters."""

from abc import ABC, abstractmethod
from typing import List, NamedTuple, Sequence

from verbump.models import PullRequest


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    pass


class RawFile(NamedTuple):
    """Raw file fetch result: HTTP status and body bytes."""

    status_code: int
    content: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class GitPlatformAdapter(ABC):
    """Abstract interface for the hosting operations a run needs.

    repo is always in format owner/repo.
    """

    @abstractmethod
    def fetch_raw_file(self, repo: str, branch: str, path: str) -> RawFile:
        """Fetch a file from a branch without interpreting the status.

        Raises:
            GitPlatformError: On transport errors (connection, timeout)
        """
        ...

    @abstractmethod
    def list_pull_requests(
        self,
        repo: str,
        head: str,
        base: str,
        sort: str = "updated",
        direction: str = "desc",
    ) -> List[PullRequest]:
        """List open and closed pull requests for an exact head/base pair."""
        ...

    @abstractmethod
    def create_pull_request(
        self,
        repo: str,
        head: str,
        base: str,
        title: str | None = None,
        body: str | None = None,
        draft: bool = False,
    ) -> PullRequest:
        """Create a pull request. None title/body are left unset."""
        ...

    @abstractmethod
    def update_pull_request(
        self,
        repo: str,
        number: int,
        title: str | None = None,
        body: str | None = None,
        state: str = "open",
    ) -> PullRequest:
        """Update a pull request. None title/body keep the current value."""
        ...

    @abstractmethod
    def check_assignable(self, repo: str, username: str) -> bool:
        """Return True if the user can be assigned to issues in the repo."""
        ...

    @abstractmethod
    def add_assignees(self, repo: str, issue_number: int, assignees: Sequence[str]) -> None:
        """Add assignees to an issue or pull request."""
        ...

    @abstractmethod
    def request_reviewers(
        self,
        repo: str,
        number: int,
        reviewers: Sequence[str],
        team_reviewers: Sequence[str],
    ) -> None:
        """Request reviews from users and teams."""
        ...

    @abstractmethod
    def add_labels(self, repo: str, issue_number: int, labels: Sequence[str]) -> None:
        """Add labels to an issue or pull request (keeps existing ones)."""
        ...
