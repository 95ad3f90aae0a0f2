"""Data models for version facts, pull request intent and pull requests (Pydantic)."""

from verbump.models.intent import Intent
from verbump.models.outcome import CollaboratorReport, OutcomeKind, ReconciliationOutcome
from verbump.models.pull_request import PullRequest
from verbump.models.template import PullRequestTemplate, TemplateSection
from verbump.models.version import VersionFact, VersionFacts

__all__ = [
    "CollaboratorReport",
    "Intent",
    "OutcomeKind",
    "PullRequest",
    "PullRequestTemplate",
    "ReconciliationOutcome",
    "TemplateSection",
    "VersionFact",
    "VersionFacts",
]
