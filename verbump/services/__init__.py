"""Reconciliation services: versions, template, placeholders, pull request, collaborators."""

from verbump.services.collaborators import (
    apply_assignees,
    apply_collaborators,
    apply_labels,
    apply_reviewers,
    filter_assignable,
)
from verbump.services.placeholders import Placeholder, render_intent, substitute, version_bindings
from verbump.services.reconciler import decide, find_candidate, pull_request_outputs, reconcile
from verbump.services.template_resolver import load_template, merge_intent, parse_template, resolve
from verbump.services.version_resolver import (
    classify_version,
    prerelease_components,
    resolve_version,
    resolve_versions,
    version_outputs,
)

__all__ = [
    "Placeholder",
    "apply_assignees",
    "apply_collaborators",
    "apply_labels",
    "apply_reviewers",
    "classify_version",
    "decide",
    "filter_assignable",
    "find_candidate",
    "load_template",
    "merge_intent",
    "parse_template",
    "prerelease_components",
    "pull_request_outputs",
    "reconcile",
    "render_intent",
    "resolve",
    "resolve_version",
    "resolve_versions",
    "substitute",
    "version_bindings",
    "version_outputs",
]
