"""Create, update or reject the version pull request for a head/base pair.

At most one pull request per head/base pair is managed. The most recently
updated one (open or closed) is the candidate:

- fail_if_exist and candidate open -> REJECTED_EXISTING, nothing mutated
- candidate (open or closed)       -> UPDATED, reopened with new title/body
- no candidate                     -> CREATED
"""

import logging
from typing import Dict

from verbump.adapters.base import GitPlatformAdapter
from verbump.models import Intent, OutcomeKind, PullRequest, ReconciliationOutcome

LOG = logging.getLogger("verbump.services.reconciler")


def find_candidate(adapter: GitPlatformAdapter, repo: str, head: str, base: str) -> PullRequest | None:
    """Latest updated pull request for head -> base, or None."""
    pulls = adapter.list_pull_requests(repo, head=head, base=base, sort="updated", direction="desc")
    return pulls[0] if pulls else None


def decide(candidate: PullRequest | None, fail_if_exist: bool) -> OutcomeKind:
    """Pick the action for the current candidate."""
    if fail_if_exist and candidate is not None and candidate.is_open:
        return OutcomeKind.REJECTED_EXISTING
    if candidate is not None:
        return OutcomeKind.UPDATED
    return OutcomeKind.CREATED


def reconcile(
    adapter: GitPlatformAdapter,
    repo: str,
    head: str,
    base: str,
    intent: Intent,
    draft: bool = False,
    fail_if_exist: bool = False,
) -> ReconciliationOutcome:
    """Converge the remote pull request to intent.

    Empty title or description are sent as unset so the current value is kept.
    API errors from the mutation propagate.
    """
    candidate = find_candidate(adapter, repo, head, base)
    LOG.info("Parameter [pr-fail-if-exist] is set: %s", "true" if fail_if_exist else "false")
    kind = decide(candidate, fail_if_exist)
    title = intent.title or None
    body = intent.description or None

    if kind is OutcomeKind.REJECTED_EXISTING:
        LOG.info("Open pull request #%s found for %s -> %s", candidate.number, head, base)
        return ReconciliationOutcome(kind=kind, existing=candidate)

    if kind is OutcomeKind.UPDATED:
        LOG.info("Updating pull request #%s (state: %s)", candidate.number, candidate.state)
        pull_request = adapter.update_pull_request(repo, candidate.number, title=title, body=body, state="open")
    else:
        LOG.info("Creating pull request %s -> %s (draft: %s)", head, base, draft)
        pull_request = adapter.create_pull_request(repo, head=head, base=base, title=title, body=body, draft=draft)

    LOG.info("Pull request #%s %s: %s", pull_request.number, kind.value, pull_request.url)
    return ReconciliationOutcome(kind=kind, pull_request=pull_request)


def pull_request_outputs(pull_request: PullRequest) -> Dict[str, str]:
    return {
        "pull-request-number": str(pull_request.number),
        "pull-request-url": pull_request.url,
    }
