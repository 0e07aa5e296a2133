"""
Pydantic models for stadium data.

``capacity`` is an unsigned 32-bit count of seats.  It is a strict
integer, so booleans, floats and numeric strings are rejected while
decoding, as are negative or oversized values.  Zero decodes fine and
is rejected by the stadium service instead, so that the caller gets the
same ``EMPTY_FIELDS`` error as for a blank name.
"""

from pydantic import BaseModel, Field

U32_MAX = 2**32 - 1


class StadiumPayload(BaseModel):
    """Fields supplied when creating or updating a stadium."""

    name: str = Field(..., examples=["Old Trafford"])
    location: str = Field(..., examples=["Manchester"])
    capacity: int = Field(..., strict=True, ge=0, le=U32_MAX, examples=[74000])


class Stadium(StadiumPayload):
    """A stored stadium."""

    id: int

    model_config = {
        "from_attributes": True,
    }
