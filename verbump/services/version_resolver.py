"""Read the version of a branch from its manifest.

The manifest (package.json by default) is fetched raw from the branch and
decoded by extension: JSON, YAML, or TOML (project.version or
tool.poetry.version). The version string is classified with semver.
"""

import json
import logging
import tomllib
from typing import Any, Dict, List

import semver
import yaml

from verbump.adapters.base import GitPlatformAdapter, GitPlatformError
from verbump.errors import InvalidVersion, ManifestNotFound
from verbump.models import VersionFact, VersionFacts
from verbump.utils import normalize_repo_path

LOG = logging.getLogger("verbump.services.version_resolver")


def _decode_manifest(content: bytes, path: str) -> Any:
    text = content.decode("utf-8-sig")
    lowered = path.lower()
    if lowered.endswith((".yaml", ".yml")):
        return yaml.safe_load(text)
    if lowered.endswith(".toml"):
        return tomllib.loads(text)
    return json.loads(text)


def _version_field(document: Any, path: str) -> Any:
    """Pick the version value out of a decoded manifest (None if absent)."""
    if not isinstance(document, dict):
        return None
    if path.lower().endswith(".toml"):
        project = document.get("project")
        tool = document.get("tool")
        poetry = tool.get("poetry") if isinstance(tool, dict) else None
        for table in (project, poetry):
            if isinstance(table, dict) and table.get("version"):
                return table["version"]
        return None
    return document.get("version")


def prerelease_components(version: str) -> List[str]:
    """Parse version and return its prerelease identifiers.

    A single leading "v" is accepted ("v1.2.3").

    Raises:
        ValueError: If version is not a valid semantic version.
    """
    text = version.strip()
    if text[:1] in ("v", "V"):
        text = text[1:]
    parsed = semver.Version.parse(text)
    return parsed.prerelease.split(".") if parsed.prerelease else []


def classify_version(branch: str, value: Any) -> VersionFact:
    """Build the VersionFact for a raw version value.

    Raises:
        InvalidVersion: If value is missing, not a string or not semver.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidVersion(branch, value, "missing version field")
    try:
        components = prerelease_components(value)
    except ValueError as e:
        raise InvalidVersion(branch, value, str(e)) from e
    return VersionFact(branch=branch, version=value, is_prerelease=len(components) > 0)


def resolve_version(
    adapter: GitPlatformAdapter,
    repo: str,
    branch: str,
    manifest_path: str = "package.json",
) -> VersionFact:
    """Fetch the manifest of branch and read its version.

    Args:
        adapter: Platform adapter used for the raw fetch.
        repo: Repository in format owner/repo.
        branch: Branch to read.
        manifest_path: Manifest path relative to the repository root.

    Returns:
        VersionFact for the branch.

    Raises:
        ManifestNotFound: Non-success status or transport error (incl. timeout).
        InvalidVersion: Manifest undecodable, version missing or not semver.
    """
    path = normalize_repo_path(manifest_path)
    LOG.info("Fetching %s from: %s/%s", path, repo, branch)
    try:
        raw = adapter.fetch_raw_file(repo, branch, path)
    except GitPlatformError as e:
        raise ManifestNotFound(branch, path, str(e)) from e
    if not raw.ok:
        raise ManifestNotFound(branch, path, f"HTTP {raw.status_code}")
    try:
        document = _decode_manifest(raw.content, path)
    except (ValueError, yaml.YAMLError) as e:
        raise InvalidVersion(branch, None, f"cannot decode {path}: {e}") from e
    fact = classify_version(branch, _version_field(document, path))
    LOG.info("Version of %s: %s (prerelease: %s)", branch, fact.version, fact.is_prerelease)
    return fact


def resolve_versions(
    adapter: GitPlatformAdapter,
    repo: str,
    base_branch: str,
    head_branch: str,
    manifest_path: str = "package.json",
) -> VersionFacts:
    """Resolve base then head version; the first failure aborts."""
    base = resolve_version(adapter, repo, base_branch, manifest_path)
    head = resolve_version(adapter, repo, head_branch, manifest_path)
    return VersionFacts(base=base, head=head)


def version_outputs(facts: VersionFacts) -> Dict[str, str]:
    """Run outputs describing the compared versions."""
    return {
        "base-branch": facts.base.branch,
        "base-version": facts.base.version,
        "head-branch": facts.head.branch,
        "head-version": facts.head.version,
        "is-prerelease": "true" if facts.is_prerelease else "false",
    }
