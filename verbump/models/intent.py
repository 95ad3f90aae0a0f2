"""Merged description of the pull request a run converges to."""

from typing import Tuple

from pydantic import BaseModel


class Intent(BaseModel):
    """Title, description and collaborators for the version pull request.

    List fields keep the order they were given in and hold no duplicates.
    """

    model_config = {"frozen": True}

    title: str = ""
    description: str = ""
    assignees: Tuple[str, ...] = ()
    reviewers: Tuple[str, ...] = ()
    team_reviewers: Tuple[str, ...] = ()
    labels: Tuple[str, ...] = ()
