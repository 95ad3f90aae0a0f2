"""End-to-end run against a mocked platform adapter."""

from pathlib import Path
from typing import Callable
from unittest.mock import MagicMock

import pytest

from verbump.adapters.base import RawFile
from verbump.config import ActionInputs, RunConfig
from verbump.errors import DuplicateOpenPullRequest, ManifestNotFound, TemplateMalformed
from verbump.models import OutcomeKind, PullRequest
from verbump.outputs import RunOutputs
from verbump.runner import make_adapter, run

TEMPLATE = b"""
pull-request:
  title: "Release v${head-version}"
  description: "${base-branch} ${base-version} <- ${head-branch} ${head-version} (prerelease: ${is-prerelease})"
  assignees: [alice, bob, carol]
  labels: [release]
"""


def _config(**inputs: str) -> RunConfig:
    values = {"base-branch": "main", "head-branch": "release/2.3", **inputs}
    return RunConfig(inputs=ActionInputs(**values), owner="owner", repo="repo", default_branch="main")


def _files(template: bytes | None = TEMPLATE) -> Callable[[str, str, str], RawFile]:
    manifests = {"main": b'{"version": "2.2.0"}', "release/2.3": b'{"version": "2.3.0-beta.1"}'}

    def fetch(repo: str, branch: str, path: str) -> RawFile:
        if path == "package.json":
            return RawFile(200, manifests[branch])
        if template is not None and path.endswith("version-pr.yml"):
            return RawFile(200, template)
        return RawFile(404, b"")

    return fetch


def test_run_creates_pull_request(adapter: MagicMock, make_pr: Callable[..., PullRequest]) -> None:
    """No existing pull request: create with substituted template, publish all outputs."""
    adapter.fetch_raw_file.side_effect = _files()
    adapter.create_pull_request.return_value = make_pr(number=42)
    adapter.check_assignable.side_effect = lambda repo, name: name != "bob"
    outputs = RunOutputs()

    outcome = run(_config(**{"pr-create-draft": "true"}), adapter=adapter, outputs=outputs)

    assert outcome.kind is OutcomeKind.CREATED
    adapter.create_pull_request.assert_called_once_with(
        "owner/repo",
        head="release/2.3",
        base="main",
        title="Release v2.3.0-beta.1",
        body="main 2.2.0 <- release/2.3 2.3.0-beta.1 (prerelease: true)",
        draft=True,
    )
    adapter.add_assignees.assert_called_once_with("owner/repo", 42, ["alice", "carol"])
    adapter.add_labels.assert_called_once_with("owner/repo", 42, ["release"])
    adapter.request_reviewers.assert_not_called()
    assert outputs.values == {
        "base-branch": "main",
        "base-version": "2.2.0",
        "head-branch": "release/2.3",
        "head-version": "2.3.0-beta.1",
        "is-prerelease": "true",
        "is-draft-pr": "true",
        "pull-request-number": "42",
        "pull-request-url": "https://api.github.com/repos/owner/repo/pulls/42",
        "assignees": "alice,carol",
        "reviewers": "",
        "team-reviewers": "",
        "labels": "release",
    }


def test_run_without_template_uses_inputs(adapter: MagicMock, make_pr: Callable[..., PullRequest]) -> None:
    adapter.fetch_raw_file.side_effect = _files(template=None)
    adapter.list_pull_requests.return_value = [make_pr(number=8, state="closed")]
    adapter.update_pull_request.return_value = make_pr(number=8)

    outcome = run(_config(**{"pr-title": "Bump to ${head-version}"}), adapter=adapter, outputs=RunOutputs())

    assert outcome.kind is OutcomeKind.UPDATED
    adapter.update_pull_request.assert_called_once_with(
        "owner/repo", 8, title="Bump to 2.3.0-beta.1", body=None, state="open"
    )
    adapter.create_pull_request.assert_not_called()
    adapter.check_assignable.assert_not_called()


def test_run_blank_title_without_template_is_unset(adapter: MagicMock, make_pr: Callable[..., PullRequest]) -> None:
    """Whitespace-only title and description are sent as unset fields."""
    adapter.fetch_raw_file.side_effect = _files(template=None)
    adapter.create_pull_request.return_value = make_pr(number=9)

    run(_config(**{"pr-title": "   ", "pr-description": " \t "}), adapter=adapter, outputs=RunOutputs())

    adapter.create_pull_request.assert_called_once_with(
        "owner/repo", head="release/2.3", base="main", title=None, body=None, draft=False
    )


def test_run_rejects_open_duplicate(adapter: MagicMock, make_pr: Callable[..., PullRequest]) -> None:
    """fail-if-exist with an open match aborts before any mutation; version outputs remain."""
    adapter.fetch_raw_file.side_effect = _files()
    adapter.list_pull_requests.return_value = [make_pr(number=8, state="open")]
    outputs = RunOutputs()

    with pytest.raises(DuplicateOpenPullRequest) as exc_info:
        run(_config(**{"pr-fail-if-exist": "true"}), adapter=adapter, outputs=outputs)

    assert exc_info.value.number == 8
    adapter.create_pull_request.assert_not_called()
    adapter.update_pull_request.assert_not_called()
    adapter.add_assignees.assert_not_called()
    assert outputs.values["head-version"] == "2.3.0-beta.1"
    assert "pull-request-number" not in outputs.values


def test_run_missing_manifest_is_fatal(adapter: MagicMock) -> None:
    adapter.fetch_raw_file.return_value = RawFile(404, b"")
    with pytest.raises(ManifestNotFound):
        run(_config(), adapter=adapter, outputs=RunOutputs())
    adapter.list_pull_requests.assert_not_called()


def test_run_malformed_template_is_fatal(adapter: MagicMock) -> None:
    adapter.fetch_raw_file.side_effect = _files(template=b"pull-request: [broken")
    with pytest.raises(TemplateMalformed):
        run(_config(), adapter=adapter, outputs=RunOutputs())
    adapter.list_pull_requests.assert_not_called()


def test_run_writes_output_file(adapter: MagicMock, make_pr: Callable[..., PullRequest], tmp_path: Path) -> None:
    adapter.fetch_raw_file.side_effect = _files(template=None)
    adapter.create_pull_request.return_value = make_pr(number=3)
    path = tmp_path / "out"
    config = _config().model_copy(update={"github": _config().github.model_copy(update={"output": str(path)})})

    run(config, adapter=adapter)

    assert "pull-request-number=3\n" in path.read_text()


def test_make_adapter_uses_config() -> None:
    config = _config().model_copy(update={"token": "t0ken"})
    adapter = make_adapter(config)
    assert adapter.api_url == "https://api.github.com"
    assert adapter._session.headers["Authorization"] == "Bearer t0ken"
