"""
Stadium endpoints for API v1.

A negative or out-of-range ``capacity`` fails request decoding (HTTP
422); a zero capacity is rejected by the service like an empty field
(HTTP 400).
"""

from fastapi import APIRouter, Depends, status

from epl_backend.app.api.deps import get_app_state
from epl_backend.app.core.state import AppState
from epl_backend.app.schemas.stadium import Stadium, StadiumPayload
from epl_backend.app.services.stadium_service import (
    add_stadium,
    delete_stadium,
    get_stadium,
    update_stadium,
)

router = APIRouter()


@router.post("/", response_model=Stadium, status_code=status.HTTP_201_CREATED)
async def create_stadium(
    stadium_in: StadiumPayload,
    state: AppState = Depends(get_app_state),
) -> Stadium:
    """Create a new stadium.

    Returns HTTP 400 if the name or location is empty or the capacity
    is zero.
    """
    return add_stadium(state, stadium_in)


@router.get("/{stadium_id}", response_model=Stadium)
async def read_stadium(stadium_id: int, state: AppState = Depends(get_app_state)) -> Stadium:
    """Retrieve a single stadium by ID, or HTTP 404."""
    return get_stadium(state, stadium_id)


@router.put("/{stadium_id}", response_model=Stadium)
async def replace_stadium(
    stadium_id: int,
    stadium_in: StadiumPayload,
    state: AppState = Depends(get_app_state),
) -> Stadium:
    """Replace every field of an existing stadium except its ID."""
    return update_stadium(state, stadium_id, stadium_in)


@router.delete("/{stadium_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_stadium(stadium_id: int, state: AppState = Depends(get_app_state)) -> None:
    """Delete a stadium.

    Teams whose ``stadium`` names this stadium are left unchanged.
    """
    delete_stadium(state, stadium_id)
    return None
