"""${name} placeholders in pull request title and description."""

import re
from enum import Enum
from typing import Dict, Mapping

from verbump.models import Intent, VersionFacts

_TOKEN_RE = re.compile(r"\$\{([A-Za-z0-9_-]+)\}")


class Placeholder(str, Enum):
    """Supported placeholder names."""

    BASE_BRANCH = "base-branch"
    BASE_VERSION = "base-version"
    HEAD_BRANCH = "head-branch"
    HEAD_VERSION = "head-version"
    IS_PRERELEASE = "is-prerelease"


def version_bindings(facts: VersionFacts) -> Dict[str, str]:
    """Bind every Placeholder to its value for this run."""
    return {
        Placeholder.BASE_BRANCH.value: facts.base.branch,
        Placeholder.BASE_VERSION.value: facts.base.version,
        Placeholder.HEAD_BRANCH.value: facts.head.branch,
        Placeholder.HEAD_VERSION.value: facts.head.version,
        Placeholder.IS_PRERELEASE.value: "true" if facts.is_prerelease else "false",
    }


def substitute(text: str, bindings: Mapping[str, str]) -> str:
    """Replace every ${name} with its binding in a single pass.

    Unbound names are left as written. Substituted values are not scanned
    again, so a value containing ${...} is inserted literally.
    """
    if not text:
        return text

    def _replace(match: re.Match) -> str:
        name = match.group(1)
        if name in bindings:
            return bindings[name]
        return match.group(0)

    return _TOKEN_RE.sub(_replace, text)


def render_intent(intent: Intent, bindings: Mapping[str, str]) -> Intent:
    """Intent with placeholders substituted in title and description."""
    return intent.model_copy(
        update={
            "title": substitute(intent.title, bindings),
            "description": substitute(intent.description, bindings),
        }
    )
