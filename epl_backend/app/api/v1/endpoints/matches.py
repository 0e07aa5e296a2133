"""Match endpoints for API v1."""

from fastapi import APIRouter, Depends, status

from epl_backend.app.api.deps import get_app_state
from epl_backend.app.core.state import AppState
from epl_backend.app.schemas.match import Match, MatchPayload
from epl_backend.app.services.match_service import add_match, delete_match, get_match, update_match

router = APIRouter()


@router.post("/", response_model=Match, status_code=status.HTTP_201_CREATED)
async def create_match(
    match_in: MatchPayload,
    state: AppState = Depends(get_app_state),
) -> Match:
    """Create a new match.

    Returns HTTP 400 if a team or the venue is empty or the date is zero.
    """
    return add_match(state, match_in)


@router.get("/{match_id}", response_model=Match)
async def read_match(match_id: int, state: AppState = Depends(get_app_state)) -> Match:
    """Retrieve a single match by ID, or HTTP 404."""
    return get_match(state, match_id)


@router.put("/{match_id}", response_model=Match)
async def replace_match(
    match_id: int,
    match_in: MatchPayload,
    state: AppState = Depends(get_app_state),
) -> Match:
    """Replace every field of an existing match except its ID."""
    return update_match(state, match_id, match_in)


@router.delete("/{match_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_match(match_id: int, state: AppState = Depends(get_app_state)) -> None:
    """Delete a match, or HTTP 404 if it does not exist."""
    delete_match(state, match_id)
    return None
