"""GitHub API adapter."""

import logging
from datetime import datetime
from typing import Any, Dict, List, Sequence

import requests

from verbump.adapters.base import GitPlatformAdapter, GitPlatformError, RawFile
from verbump.models import PullRequest
from verbump.utils import raw_file_url

LOG = logging.getLogger("verbump.adapters.github")

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_RAW_URL = "https://raw.githubusercontent.com"
DEFAULT_TIMEOUT = 30


def _parse_iso(s: str) -> datetime:
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


def _pr_from_api(data: Dict[str, Any]) -> PullRequest:
    head = data.get("head") or {}
    base = data.get("base") or {}
    updated = data.get("updated_at")
    return PullRequest(
        number=data["number"],
        url=data.get("url") or "",
        html_url=data.get("html_url"),
        state=data.get("state", "open"),
        title=data.get("title") or "",
        body=data.get("body") or "",
        head_ref=head.get("ref", ""),
        base_ref=base.get("ref", ""),
        draft=bool(data.get("draft", False)),
        updated_at=_parse_iso(updated) if isinstance(updated, str) else None,
    )


def _owner(repo: str) -> str:
    return repo.split("/", 1)[0]


class GitHubAdapter(GitPlatformAdapter):
    """GitHub REST API implementation."""

    def __init__(
        self,
        token: str | None = None,
        api_url: str = DEFAULT_API_URL,
        raw_url: str = DEFAULT_RAW_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.token = token
        self.api_url = api_url.rstrip("/")
        self.raw_url = raw_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )
        if token:
            self._session.headers["Authorization"] = f"Bearer {token}"

    def _send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        try:
            return self._session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise GitPlatformError(f"{method} {url} failed: {e}") from e

    def _request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        url = f"{self.api_url}{path}" if path.startswith("/") else f"{self.api_url}/{path}"
        resp = self._send(method, url, params=params, json=json)
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                msg = resp.json().get("message", msg)
            except Exception:
                pass
            raise GitPlatformError(f"GitHub API error {resp.status_code}: {msg}")
        return resp

    def fetch_raw_file(self, repo: str, branch: str, path: str) -> RawFile:
        url = raw_file_url(self.raw_url, repo, branch, path)
        LOG.debug("GET %s", url)
        resp = self._send("GET", url, headers={"Accept": "*/*"})
        return RawFile(status_code=resp.status_code, content=resp.content or b"")

    def list_pull_requests(
        self,
        repo: str,
        head: str,
        base: str,
        sort: str = "updated",
        direction: str = "desc",
    ) -> List[PullRequest]:
        # The head filter needs the owner:branch form.
        head_filter = head if ":" in head else f"{_owner(repo)}:{head}"
        params = {
            "state": "all",
            "head": head_filter,
            "base": base,
            "sort": sort,
            "direction": direction,
        }
        resp = self._request("GET", f"/repos/{repo}/pulls", params=params)
        data = resp.json() or []
        return [_pr_from_api(d) for d in data]

    def create_pull_request(
        self,
        repo: str,
        head: str,
        base: str,
        title: str | None = None,
        body: str | None = None,
        draft: bool = False,
    ) -> PullRequest:
        payload: Dict[str, Any] = {"head": head, "base": base, "draft": draft}
        if title is not None:
            payload["title"] = title
        if body is not None:
            payload["body"] = body
        resp = self._request("POST", f"/repos/{repo}/pulls", json=payload)
        return _pr_from_api(resp.json())

    def update_pull_request(
        self,
        repo: str,
        number: int,
        title: str | None = None,
        body: str | None = None,
        state: str = "open",
    ) -> PullRequest:
        payload: Dict[str, Any] = {"state": state}
        if title is not None:
            payload["title"] = title
        if body is not None:
            payload["body"] = body
        resp = self._request("PATCH", f"/repos/{repo}/pulls/{number}", json=payload)
        return _pr_from_api(resp.json())

    def check_assignable(self, repo: str, username: str) -> bool:
        url = f"{self.api_url}/repos/{repo}/assignees/{username}"
        resp = self._send("GET", url)
        if resp.status_code == 204:
            return True
        if resp.status_code == 404:
            return False
        raise GitPlatformError(f"GitHub API error {resp.status_code}: {resp.text or resp.reason}")

    def add_assignees(self, repo: str, issue_number: int, assignees: Sequence[str]) -> None:
        self._request(
            "POST",
            f"/repos/{repo}/issues/{issue_number}/assignees",
            json={"assignees": list(assignees)},
        )

    def request_reviewers(
        self,
        repo: str,
        number: int,
        reviewers: Sequence[str],
        team_reviewers: Sequence[str],
    ) -> None:
        self._request(
            "POST",
            f"/repos/{repo}/pulls/{number}/requested_reviewers",
            json={"reviewers": list(reviewers), "team_reviewers": list(team_reviewers)},
        )

    def add_labels(self, repo: str, issue_number: int, labels: Sequence[str]) -> None:
        self._request(
            "POST",
            f"/repos/{repo}/issues/{issue_number}/labels",
            json={"labels": list(labels)},
        )
