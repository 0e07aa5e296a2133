"""
Pydantic models for match data.

``match_date`` is a Unix timestamp in seconds, decoded as a strict
integer.

The field is narrower than an unsigned 64-bit value on purpose: SQLite
stores signed 64-bit integers, so ``match_date`` accepts ``0`` to
``2**63 - 1`` (a date some 292 billion years out) and anything larger
fails decoding with HTTP 422 instead of overflowing in the store.
"""

from pydantic import BaseModel, Field

TIMESTAMP_MAX = 2**63 - 1


class MatchPayload(BaseModel):
    """Fields supplied when creating or updating a match."""

    home_team: str = Field(..., examples=["Arsenal"])
    away_team: str = Field(..., examples=["Chelsea"])
    venue: str = Field(..., examples=["Emirates"])
    match_date: int = Field(..., strict=True, ge=0, le=TIMESTAMP_MAX, examples=[1724500800])


class Match(MatchPayload):
    """A stored match."""

    id: int

    model_config = {
        "from_attributes": True,
    }
