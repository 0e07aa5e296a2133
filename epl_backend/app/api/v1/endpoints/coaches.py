"""Coach endpoints for API v1."""

from fastapi import APIRouter, Depends, status

from epl_backend.app.api.deps import get_app_state
from epl_backend.app.core.state import AppState
from epl_backend.app.schemas.coach import Coach, CoachPayload
from epl_backend.app.services.coach_service import add_coach, delete_coach, get_coach, update_coach

router = APIRouter()


@router.post("/", response_model=Coach, status_code=status.HTTP_201_CREATED)
async def create_coach(
    coach_in: CoachPayload,
    state: AppState = Depends(get_app_state),
) -> Coach:
    """Create a new coach.

    Returns HTTP 400 if the name or team is empty.
    """
    return add_coach(state, coach_in)


@router.get("/{coach_id}", response_model=Coach)
async def read_coach(coach_id: int, state: AppState = Depends(get_app_state)) -> Coach:
    """Retrieve a single coach by ID, or HTTP 404."""
    return get_coach(state, coach_id)


@router.put("/{coach_id}", response_model=Coach)
async def replace_coach(
    coach_id: int,
    coach_in: CoachPayload,
    state: AppState = Depends(get_app_state),
) -> Coach:
    """Replace the name and team of an existing coach."""
    return update_coach(state, coach_id, coach_in)


@router.delete("/{coach_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_coach(coach_id: int, state: AppState = Depends(get_app_state)) -> None:
    """Delete a coach, or HTTP 404 if it does not exist."""
    delete_coach(state, coach_id)
    return None
