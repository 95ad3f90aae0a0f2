"""One version pull request run, from version facts to collaborators."""

import logging

from verbump.adapters.base import GitPlatformAdapter
from verbump.adapters.github import GitHubAdapter
from verbump.config import RunConfig
from verbump.errors import DuplicateOpenPullRequest
from verbump.models import OutcomeKind, ReconciliationOutcome
from verbump.outputs import RunOutputs
from verbump.services import (
    apply_collaborators,
    load_template,
    merge_intent,
    pull_request_outputs,
    reconcile,
    render_intent,
    resolve_versions,
    version_bindings,
    version_outputs,
)

LOG = logging.getLogger("verbump.runner")


def make_adapter(config: RunConfig) -> GitHubAdapter:
    """GitHub adapter for the configured API, raw host and token."""
    return GitHubAdapter(
        token=config.token,
        api_url=config.github.api_url,
        raw_url=config.github.raw_url,
        timeout=config.github.timeout,
    )


def run(
    config: RunConfig,
    adapter: GitPlatformAdapter | None = None,
    outputs: RunOutputs | None = None,
) -> ReconciliationOutcome:
    """Resolve versions and intent, reconcile the pull request, apply collaborators.

    Version outputs are published before reconciliation so they survive a
    later failure. Nothing committed remotely is rolled back.

    Raises:
        ManifestNotFound, InvalidVersion, TemplateMalformed: Before any mutation.
        DuplicateOpenPullRequest: fail-if-exist policy hit; nothing mutated.
        GitPlatformError: Listing, creating or updating the pull request failed.
    """
    adapter = adapter or make_adapter(config)
    outputs = outputs or RunOutputs(config.github.output)
    inputs = config.inputs
    repo = config.repository
    base, head = inputs.base_branch.strip(), inputs.head_branch.strip()

    facts = resolve_versions(adapter, repo, base, head, inputs.manifest)
    template = load_template(adapter, repo, config.default_branch, inputs.pr_template_uri.strip() or None)
    intent = render_intent(merge_intent(inputs, template), version_bindings(facts))

    outputs.update(version_outputs(facts))
    outputs.set("is-draft-pr", inputs.create_draft)

    outcome = reconcile(
        adapter,
        repo,
        head=head,
        base=base,
        intent=intent,
        draft=inputs.create_draft,
        fail_if_exist=inputs.fail_if_exist,
    )
    if outcome.kind is OutcomeKind.REJECTED_EXISTING:
        number = outcome.existing.number if outcome.existing else None
        raise DuplicateOpenPullRequest(base, head, number)

    pull_request = outcome.pull_request
    outputs.update(pull_request_outputs(pull_request))
    outputs.update(
        apply_collaborators(adapter, repo, pull_request, intent, max_workers=config.github.max_workers)
    )
    return outcome
