"""Configuration loading from action inputs, YAML and environment.

Action inputs come from INPUT_<NAME> environment variables the way the
workflow runner exports them (name upper-cased, dashes kept, e.g.
INPUT_PR-TITLE). A YAML file can provide the same values for local runs:

    inputs:
      base-branch: main
      head-branch: release/2.3
    github:
      repository: owner/repo
    logging:
      level: DEBUG

Environment values win over the file. Secrets (tokens) are taken from the
github-token input, GITHUB_TOKEN or the file named by GITHUB_TOKEN_FILE.
Never put real tokens in config files committed to the repo.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping, Tuple

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from verbump.errors import ConfigError
from verbump.utils import parse_bool, split_list

LOG = logging.getLogger("verbump.config")

DEFAULT_TEMPLATE_PATH = ".github/workflows/templates/version-pr.yml"
DEFAULT_MANIFEST_PATH = "package.json"
INPUT_PREFIX = "INPUT_"


def _read_secret(env_key: str, file_env_key: str) -> str | None:
    """Read secret from env var or from file path in env (e.g. Docker
    secrets)."""
    value = os.environ.get(env_key)
    if value:
        return value.strip()
    file_path = os.environ.get(file_env_key)
    if file_path:
        try:
            return Path(file_path).read_text().strip()
        except OSError as e:
            raise ConfigError(f"Cannot read {file_env_key} ({file_path}): {e}") from e
    return None


class ActionInputs(BaseModel):
    """Inputs of a run, named as in the action definition."""

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    base_branch: str = Field(default="", alias="base-branch", description="Branch the pull request merges into")
    head_branch: str = Field(default="", alias="head-branch", description="Branch carrying the new version")
    pr_create_draft: str = Field(default="", alias="pr-create-draft", description="'true' to create as draft")
    pr_fail_if_exist: str = Field(
        default="", alias="pr-fail-if-exist", description="'true' to fail when an open pull request exists"
    )
    pr_template_uri: str = Field(default="", alias="pr-template-uri", description="Template path on default branch")
    pr_title: str = Field(default="", alias="pr-title")
    pr_description: str = Field(default="", alias="pr-description")
    pr_assignees: str = Field(default="", alias="pr-assignees", description="Comma-separated logins")
    pr_reviewers: str = Field(default="", alias="pr-reviewers", description="Comma-separated logins")
    pr_team_reviewers: str = Field(default="", alias="pr-team-reviewers", description="Comma-separated team slugs")
    pr_labels: str = Field(default="", alias="pr-labels", description="Comma-separated label names")
    github_token: str = Field(default="", alias="github-token")
    manifest_path: str = Field(default="", alias="manifest-path", description="Manifest holding the version field")

    @field_validator("*", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        """Inputs are trimmed strings; blank means not given. YAML scalars
        (true, 2) are taken as their text."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value.strip() if isinstance(value, str) else value

    @property
    def create_draft(self) -> bool:
        return parse_bool(self.pr_create_draft)

    @property
    def fail_if_exist(self) -> bool:
        return parse_bool(self.pr_fail_if_exist)

    @property
    def template_path(self) -> str:
        return self.pr_template_uri.strip() or DEFAULT_TEMPLATE_PATH

    @property
    def manifest(self) -> str:
        return self.manifest_path.strip() or DEFAULT_MANIFEST_PATH

    @property
    def assignees(self) -> Tuple[str, ...]:
        return split_list(self.pr_assignees)

    @property
    def reviewers(self) -> Tuple[str, ...]:
        return split_list(self.pr_reviewers)

    @property
    def team_reviewers(self) -> Tuple[str, ...]:
        return split_list(self.pr_team_reviewers)

    @property
    def labels(self) -> Tuple[str, ...]:
        return split_list(self.pr_labels)


class _EnvFirstSettings(BaseSettings):
    """Settings where process env wins over values passed in (from YAML)."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, init_settings, dotenv_settings, file_secret_settings


class GitHubConfig(_EnvFirstSettings):
    """GitHub API and workflow runner settings (GITHUB_* env)."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", env_ignore_empty=True, extra="ignore")

    token: str | None = Field(default=None, description="Token; prefer the github-token input or env")
    api_url: str = Field(default="https://api.github.com", description="API base URL")
    raw_url: str = Field(default="https://raw.githubusercontent.com", description="Raw file base URL")
    repository: str = Field(default="", description="owner/repo of the workflow repository")
    event_path: str | None = Field(default=None, description="Path of the workflow event payload")
    output: str | None = Field(default=None, description="File receiving run outputs")
    default_branch: str = Field(default="main", description="Fallback when the event has no default branch")
    timeout: float = Field(default=30, gt=0, description="Per-request timeout in seconds")
    max_workers: int = Field(default=8, ge=1, le=64, description="Concurrent assignability checks")


class LoggingConfig(_EnvFirstSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", env_ignore_empty=True, extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class RunConfig(BaseModel):
    """Everything a run needs, built once by load_config and never mutated."""

    model_config = {"frozen": True}

    inputs: ActionInputs = Field(default_factory=ActionInputs)
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    owner: str
    repo: str
    default_branch: str = "main"
    token: str | None = None

    @property
    def repository(self) -> str:
        """Repository in format owner/repo."""
        return f"{self.owner}/{self.repo}"


def _substitute_env(value: Any, env: Mapping[str, str]) -> Any:
    """Replace ${VAR} and $VAR strings with values from env."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v, env) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v, env) for v in value]
    return value


def _env_inputs(env: Mapping[str, str]) -> dict[str, str]:
    """Collect INPUT_<ALIAS> values (e.g. INPUT_PR-TITLE) from env."""
    values: dict[str, str] = {}
    for name, field in ActionInputs.model_fields.items():
        key = f"{INPUT_PREFIX}{(field.alias or name).upper()}"
        if key in env:
            values[name] = env[key]
    return values


def _load_event(event_path: str | None) -> dict[str, Any]:
    """Read the workflow event payload; {} when absent or unreadable."""
    if not event_path:
        return {}
    path = Path(event_path)
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        LOG.warning("Failed to read event payload %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def _normalize_inputs(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Accept both alias (base-branch) and field (base_branch) keys from YAML."""
    aliases = {field.alias: name for name, field in ActionInputs.model_fields.items() if field.alias}
    return {aliases.get(key, key): value for key, value in raw.items()}


def load_config(config_path: Path | None = None) -> RunConfig:
    """Build the run configuration from YAML file, environment and event payload.

    Args:
        config_path: Optional YAML file; ignored when it does not exist.

    Returns:
        Frozen RunConfig.

    Raises:
        ConfigError: If branches or repository identity are missing, a
            section fails validation or the token file cannot be read.
    """
    raw: dict[str, Any] = {}
    if config_path is not None and config_path.is_file():
        raw = yaml.safe_load(config_path.read_text()) or {}
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")
        raw = _substitute_env(raw, os.environ)

    try:
        inputs = ActionInputs(**{**_normalize_inputs(raw.get("inputs") or {}), **_env_inputs(os.environ)})
        github = GitHubConfig(**(raw.get("github") or {}))
        logging_config = LoggingConfig(**(raw.get("logging") or {}))
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    if not inputs.base_branch.strip() or not inputs.head_branch.strip():
        raise ConfigError("Both base-branch and head-branch inputs are required.")

    event_repo = _load_event(github.event_path).get("repository") or {}
    full_name = event_repo.get("full_name") or github.repository
    if not full_name or "/" not in full_name:
        raise ConfigError("Repository is unknown: set GITHUB_REPOSITORY (owner/repo) or provide an event payload.")
    owner, repo = full_name.split("/", 1)
    default_branch = event_repo.get("default_branch") or github.default_branch or "main"

    token = inputs.github_token.strip() or github.token or _read_secret("GITHUB_TOKEN", "GITHUB_TOKEN_FILE")

    return RunConfig(
        inputs=inputs,
        github=github,
        logging=logging_config,
        owner=owner,
        repo=repo,
        default_branch=str(default_branch),
        token=token,
    )
