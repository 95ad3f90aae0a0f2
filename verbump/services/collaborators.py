"""Assignees, reviewers and labels for the resolved pull request.

Each pass is best effort: a failure is logged and reported, never raised,
and never stops the other passes.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Sequence, Tuple

from verbump.adapters.base import GitPlatformAdapter, GitPlatformError
from verbump.models import CollaboratorReport, Intent, PullRequest
from verbump.utils import join_list

LOG = logging.getLogger("verbump.services.collaborators")

DEFAULT_MAX_WORKERS = 8


def _is_assignable(adapter: GitPlatformAdapter, repo: str, username: str) -> bool:
    LOG.info("Checking before adding assignee: %s...", username)
    return adapter.check_assignable(repo, username)


def filter_assignable(
    adapter: GitPlatformAdapter,
    repo: str,
    candidates: Sequence[str],
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> Tuple[str, ...]:
    """Check every candidate concurrently and keep those that can be assigned.

    A check that raises or answers no drops only that candidate. All checks
    complete before this returns. Candidate order is kept.
    """
    if not candidates:
        return ()
    verdicts: List[bool] = []
    with ThreadPoolExecutor(max_workers=min(max_workers, len(candidates))) as pool:
        futures = [pool.submit(_is_assignable, adapter, repo, name) for name in candidates]
        for name, future in zip(candidates, futures):
            try:
                ok = bool(future.result())
            except Exception as e:
                LOG.warning("Assignability check for %s failed: %s", name, e)
                ok = False
            LOG.info("assignee: %s is %sassignable.", name, "" if ok else "not ")
            verdicts.append(ok)
    return tuple(name for name, ok in zip(candidates, verdicts) if ok)


def apply_assignees(
    adapter: GitPlatformAdapter,
    repo: str,
    number: int,
    candidates: Sequence[str],
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> CollaboratorReport:
    """Add the assignable candidates; report lists only those."""
    eligible = filter_assignable(adapter, repo, candidates, max_workers=max_workers)
    report = CollaboratorReport(names=eligible)
    if not eligible:
        return report
    try:
        adapter.add_assignees(repo, number, list(eligible))
    except GitPlatformError as e:
        LOG.warning("Failed to add assignees %s to #%s: %s", list(eligible), number, e)
        return report.model_copy(update={"error": str(e)})
    return report.model_copy(update={"applied": True})


def apply_reviewers(
    adapter: GitPlatformAdapter,
    repo: str,
    number: int,
    reviewers: Sequence[str],
    team_reviewers: Sequence[str],
) -> CollaboratorReport:
    """Request reviews from users and teams in one call."""
    report = CollaboratorReport(names=tuple(reviewers), team_names=tuple(team_reviewers))
    if not reviewers and not team_reviewers:
        return report
    try:
        adapter.request_reviewers(repo, number, list(reviewers), list(team_reviewers))
    except GitPlatformError as e:
        LOG.warning("Failed to request reviewers on #%s: %s", number, e)
        return report.model_copy(update={"error": str(e)})
    return report.model_copy(update={"applied": True})


def apply_labels(
    adapter: GitPlatformAdapter,
    repo: str,
    number: int,
    labels: Sequence[str],
) -> CollaboratorReport:
    """Add all labels in one call."""
    report = CollaboratorReport(names=tuple(labels))
    if not labels:
        return report
    try:
        adapter.add_labels(repo, number, list(labels))
    except GitPlatformError as e:
        LOG.warning("Failed to add labels to #%s: %s", number, e)
        return report.model_copy(update={"error": str(e)})
    return report.model_copy(update={"applied": True})


def apply_collaborators(
    adapter: GitPlatformAdapter,
    repo: str,
    pull_request: PullRequest,
    intent: Intent,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> Dict[str, str]:
    """Run the three passes and return their run outputs."""
    assignees = apply_assignees(adapter, repo, pull_request.number, intent.assignees, max_workers=max_workers)
    reviewers = apply_reviewers(adapter, repo, pull_request.number, intent.reviewers, intent.team_reviewers)
    labels = apply_labels(adapter, repo, pull_request.number, intent.labels)
    return {
        "assignees": join_list(assignees.names),
        "reviewers": join_list(reviewers.names),
        "team-reviewers": join_list(reviewers.team_names),
        "labels": join_list(labels.names),
    }
