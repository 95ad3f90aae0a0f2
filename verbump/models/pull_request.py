"""Pull request as returned by the hosting service."""

from datetime import datetime

from pydantic import BaseModel


class PullRequest(BaseModel):
    """Pull request (read through the API, never cached across runs)."""

    number: int
    url: str = ""
    html_url: str | None = None
    state: str = "open"
    title: str = ""
    body: str = ""
    head_ref: str = ""
    base_ref: str = ""
    draft: bool = False
    updated_at: datetime | None = None

    @property
    def is_open(self) -> bool:
        return self.state == "open"
