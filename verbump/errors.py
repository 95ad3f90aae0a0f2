"""Fatal run errors.

Every error here aborts the run with a single human-readable message.
Adapter failures (HTTP, API) are GitPlatformError from verbump.adapters.
"""


class VerbumpError(Exception):
    """Base class for fatal run errors."""

    pass


class ConfigError(VerbumpError):
    """Raised when required inputs or repository identity are missing."""

    pass


class ManifestNotFound(VerbumpError):
    """Raised when a branch manifest cannot be retrieved."""

    def __init__(self, branch: str, path: str, reason: str = "") -> None:
        self.branch = branch
        self.path = path
        message = f"{path} not found in branch: {branch}."
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidVersion(VerbumpError):
    """Raised when a manifest carries no parsable semantic version."""

    def __init__(self, branch: str, value: object, reason: str = "") -> None:
        self.branch = branch
        self.value = value
        message = f"Invalid version {value!r} in branch: {branch}."
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class TemplateMalformed(VerbumpError):
    """Raised when a fetched pull request template has the wrong shape."""

    def __init__(self, location: str, reason: str) -> None:
        self.location = location
        super().__init__(f"Malformed pull request template at {location}: {reason}")


class DuplicateOpenPullRequest(VerbumpError):
    """Raised when fail-if-exist is set and an open pull request exists."""

    def __init__(self, base: str, head: str, number: int | None = None) -> None:
        self.base = base
        self.head = head
        self.number = number
        super().__init__(
            f"Not allowed to re-issue a pull request to base branch: {base}"
            f" from head branch: {head}. An open pull request is found."
        )
