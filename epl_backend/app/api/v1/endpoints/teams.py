"""
Team endpoints for API v1.

Updates replace the whole record: clients must resend every field,
including the ones they did not change.
"""

from fastapi import APIRouter, Depends, status

from epl_backend.app.api.deps import get_app_state
from epl_backend.app.core.state import AppState
from epl_backend.app.schemas.team import Team, TeamPayload
from epl_backend.app.services.team_service import add_team, delete_team, get_team, update_team

router = APIRouter()


@router.post("/", response_model=Team, status_code=status.HTTP_201_CREATED)
async def create_team(
    team_in: TeamPayload,
    state: AppState = Depends(get_app_state),
) -> Team:
    """Create a new team.

    Returns HTTP 400 if the name, manager or stadium is empty.
    """
    return add_team(state, team_in)


@router.get("/{team_id}", response_model=Team)
async def read_team(team_id: int, state: AppState = Depends(get_app_state)) -> Team:
    """Retrieve a single team by ID, or HTTP 404."""
    return get_team(state, team_id)


@router.put("/{team_id}", response_model=Team)
async def replace_team(
    team_id: int,
    team_in: TeamPayload,
    state: AppState = Depends(get_app_state),
) -> Team:
    """Replace every field of an existing team except its ID."""
    return update_team(state, team_id, team_in)


@router.delete("/{team_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_team(team_id: int, state: AppState = Depends(get_app_state)) -> None:
    """Delete a team, or HTTP 404 if it does not exist."""
    delete_team(state, team_id)
    return None
