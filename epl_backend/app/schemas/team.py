"""
Pydantic models for team data.

``stadium`` is the name of the team's home ground.  It is free text
and is not checked against stadium records.
"""

from pydantic import BaseModel, Field


class TeamPayload(BaseModel):
    """Fields supplied when creating or updating a team."""

    name: str = Field(..., examples=["Arsenal"])
    manager: str = Field(..., examples=["Arteta"])
    stadium: str = Field(..., examples=["Emirates"])


class Team(TeamPayload):
    """A stored team."""

    id: int

    model_config = {
        "from_attributes": True,
    }
