"""Results of reconciliation and collaborator passes."""

from enum import Enum
from typing import Tuple

from pydantic import BaseModel

from verbump.models.pull_request import PullRequest


class OutcomeKind(str, Enum):
    """What the reconciler did with the pull request."""

    CREATED = "created"
    UPDATED = "updated"
    REJECTED_EXISTING = "rejected_existing"


class ReconciliationOutcome(BaseModel):
    """Decision taken plus the resulting pull request.

    pull_request is None when the decision was REJECTED_EXISTING; the
    blocking pull request is then in existing.
    """

    kind: OutcomeKind
    pull_request: PullRequest | None = None
    existing: PullRequest | None = None


class CollaboratorReport(BaseModel):
    """Names a collaborator pass acted on and whether its mutation went through."""

    names: Tuple[str, ...] = ()
    team_names: Tuple[str, ...] = ()
    applied: bool = False
    error: str | None = None
