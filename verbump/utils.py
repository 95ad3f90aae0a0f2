"""Shared helpers for input lists, flags and raw file locations."""

import posixpath
import re
from typing import Iterable, List, Tuple

_REPEATED_SLASH_RE = re.compile(r"/{2,}")


def split_list(value: str | None) -> Tuple[str, ...]:
    """Split a comma-separated input into names.

    Entries are stripped; empty entries and repeats are dropped; order is kept.

    Args:
        value: Raw input such as "alice, bob,,carol".

    Returns:
        Tuple of names, empty if value is empty or None.
    """
    if not value:
        return ()
    return unique(part.strip() for part in value.split(","))


def unique(items: Iterable[str]) -> Tuple[str, ...]:
    """Drop empty and repeated entries, keeping first-seen order."""
    seen: List[str] = []
    for item in items:
        if item and item not in seen:
            seen.append(item)
    return tuple(seen)


def join_list(items: Iterable[str]) -> str:
    """Comma-join names for a run output ("" when there are none)."""
    return ",".join(items)


def parse_bool(value: str | bool | None) -> bool:
    """Bool-as-string input: only "true" (any case, trimmed) is true."""
    if isinstance(value, bool):
        return value
    return (value or "").strip().lower() == "true"


def normalize_repo_path(path: str) -> str:
    """Normalize a repository-relative path.

    Collapses repeated separators and "." segments and removes the leading
    separator, so "//.github/./templates//pr.yml" becomes
    ".github/templates/pr.yml".
    """
    collapsed = _REPEATED_SLASH_RE.sub("/", path.strip())
    normalized = posixpath.normpath(collapsed) if collapsed else ""
    if normalized == ".":
        return ""
    return normalized.lstrip("/")


def raw_file_url(raw_url: str, repo: str, branch: str, path: str) -> str:
    """Join the raw content base URL with repo, branch and a file path.

    The separator between branch and path is never doubled, whether or not
    path starts with one.
    """
    return f"{raw_url.rstrip('/')}/{repo}/{branch}/{normalize_repo_path(path)}"
