"""Pull request template document (.github/workflows/templates/version-pr.yml).

Expected shape::

    pull-request:
      title: "Release v${head-version}"
      description: "..."
      assignees: [octocat]
      reviewers: [octocat]
      team-reviewers: [maintainers]
      labels: [release]

Other top-level keys are allowed and ignored.
"""

from typing import List

from pydantic import BaseModel, Field


class TemplateSection(BaseModel):
    """The pull-request section of a template."""

    model_config = {"extra": "ignore", "populate_by_name": True}

    title: str | None = None
    description: str | None = None
    assignees: List[str] | None = None
    reviewers: List[str] | None = None
    team_reviewers: List[str] | None = Field(default=None, alias="team-reviewers")
    labels: List[str] | None = None


class PullRequestTemplate(BaseModel):
    """Whole template document."""

    model_config = {"extra": "allow", "populate_by_name": True}

    pull_request: TemplateSection | None = Field(default=None, alias="pull-request")
