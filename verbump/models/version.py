"""Version read from a branch manifest."""

from pydantic import BaseModel


class VersionFact(BaseModel):
    """Version string of one branch and whether it is a prerelease."""

    model_config = {"frozen": True}

    branch: str
    version: str
    is_prerelease: bool = False


class VersionFacts(BaseModel):
    """Base and head versions compared by a run."""

    model_config = {"frozen": True}

    base: VersionFact
    head: VersionFact

    @property
    def is_prerelease(self) -> bool:
        """Prerelease flag of the head branch (the one being released)."""
        return self.head.is_prerelease
