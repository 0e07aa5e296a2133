"""
Health endpoint for API v1.

Reports the last id issued by the allocator.  Reading the counter goes
through the database, so a broken backend shows up here as HTTP 500.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from epl_backend.app.api.deps import get_app_state
from epl_backend.app.core.state import AppState

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def get_health(state: AppState = Depends(get_app_state)) -> Dict[str, Any]:
    """Return ``{"status": "ok", "last_id": <last issued id>}``."""
    return {"status": "ok", "last_id": state.allocator.peek()}
