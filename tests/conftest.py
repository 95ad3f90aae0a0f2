"""Shared fixtures: isolate tests from the runner environment."""

import os
from typing import Callable
from unittest.mock import MagicMock

import pytest

from verbump.adapters.base import GitPlatformAdapter, RawFile
from verbump.models import PullRequest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop GITHUB_*, INPUT_* and LOGGING_* vars so settings only see test values."""
    for key in list(os.environ):
        if key.startswith(("GITHUB_", "INPUT_", "LOGGING_")):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def adapter() -> MagicMock:
    """Platform adapter double: no files, no pull requests, everyone assignable."""
    mock = MagicMock(spec=GitPlatformAdapter)
    mock.fetch_raw_file.return_value = RawFile(404, b"")
    mock.list_pull_requests.return_value = []
    mock.check_assignable.return_value = True
    return mock


@pytest.fixture
def make_pr() -> Callable[..., PullRequest]:
    """Factory for PullRequest records of owner/repo."""

    def _make(number: int = 7, state: str = "open", **kwargs: object) -> PullRequest:
        data: dict[str, object] = {
            "number": number,
            "url": f"https://api.github.com/repos/owner/repo/pulls/{number}",
            "html_url": f"https://github.com/owner/repo/pull/{number}",
            "state": state,
            "head_ref": "release/2.3",
            "base_ref": "main",
        }
        data.update(kwargs)
        return PullRequest(**data)

    return _make
