"""Pull request template loading and intent merge.

The template is a YAML document on the default branch. A template that
cannot be fetched means "no template"; one that is fetched but has the
wrong shape is fatal.
"""

import logging
from typing import Sequence, Tuple, TypeVar

import yaml
from pydantic import ValidationError

from verbump.adapters.base import GitPlatformAdapter, GitPlatformError
from verbump.config import DEFAULT_TEMPLATE_PATH, ActionInputs
from verbump.errors import TemplateMalformed
from verbump.models import Intent, PullRequestTemplate, TemplateSection
from verbump.utils import normalize_repo_path, unique

LOG = logging.getLogger("verbump.services.template_resolver")

T = TypeVar("T")


def resolve(explicit: T | None, fallback: T | None, default: T) -> T:
    """Layered value: explicit if non-empty, else fallback if present, else default."""
    if explicit:
        return explicit
    if fallback is not None:
        return fallback
    return default


def parse_template(content: bytes | str, location: str) -> PullRequestTemplate:
    """Decode and validate a template document.

    Raises:
        TemplateMalformed: Not YAML, root or pull-request section not a
            mapping, or fields of the wrong type.
    """
    try:
        document = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise TemplateMalformed(location, f"invalid YAML: {e}") from e
    if document is None:
        return PullRequestTemplate()
    if not isinstance(document, dict):
        raise TemplateMalformed(location, "document root must be a mapping")
    try:
        return PullRequestTemplate.model_validate(document)
    except ValidationError as e:
        raise TemplateMalformed(location, str(e)) from e


def load_template(
    adapter: GitPlatformAdapter,
    repo: str,
    default_branch: str,
    template_path: str | None = None,
) -> PullRequestTemplate | None:
    """Fetch the template from the default branch.

    Returns:
        Parsed template, or None when it cannot be fetched.

    Raises:
        TemplateMalformed: If the fetched document has the wrong shape.
    """
    if template_path:
        LOG.info("pr template uri: %s", template_path)
    else:
        template_path = DEFAULT_TEMPLATE_PATH
        LOG.info("pr template uri not specified, look for template from: %s.", template_path)
    path = normalize_repo_path(template_path)
    try:
        raw = adapter.fetch_raw_file(repo, default_branch, path)
    except GitPlatformError as e:
        LOG.info("pr template not found in location: %s (%s).", path, e)
        return None
    if not raw.ok:
        LOG.info("pr template not found in location: %s (HTTP %s).", path, raw.status_code)
        return None
    template = parse_template(raw.content, f"{repo}/{default_branch}/{path}")
    LOG.info("pr template found in location: %s.", path)
    return template


def _names(values: Sequence[str] | None) -> Tuple[str, ...] | None:
    if values is None:
        return None
    return unique(str(v).strip() for v in values)


def merge_intent(inputs: ActionInputs, template: PullRequestTemplate | None) -> Intent:
    """Merge explicit inputs over template values, field by field."""
    section = (template.pull_request if template else None) or TemplateSection()
    intent = Intent(
        title=resolve(inputs.pr_title, section.title, ""),
        description=resolve(inputs.pr_description, section.description, ""),
        assignees=resolve(inputs.assignees, _names(section.assignees), ()),
        reviewers=resolve(inputs.reviewers, _names(section.reviewers), ()),
        team_reviewers=resolve(inputs.team_reviewers, _names(section.team_reviewers), ()),
        labels=resolve(inputs.labels, _names(section.labels), ()),
    )
    LOG.info("assignees: %s", list(intent.assignees))
    LOG.info("reviewers: %s", list(intent.reviewers))
    LOG.info("team reviewers: %s", list(intent.team_reviewers))
    LOG.info("labels: %s", list(intent.labels))
    return intent
