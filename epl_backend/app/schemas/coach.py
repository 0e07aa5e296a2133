"""Pydantic models for coach data."""

from pydantic import BaseModel, Field


class CoachPayload(BaseModel):
    name: str = Field(..., examples=["Mikel Arteta"])
    # Free-text team name, not a reference to a team record.
    team: str = Field(..., examples=["Arsenal"])


class Coach(CoachPayload):
    id: int

    model_config = {
        "from_attributes": True,
    }
