"""Git platform adapters."""

from verbump.adapters.base import GitPlatformAdapter, GitPlatformError, RawFile
from verbump.adapters.github import GitHubAdapter

__all__ = ["GitPlatformAdapter", "GitPlatformError", "GitHubAdapter", "RawFile"]
