"""
Top-level router for version 1 of the API.

Aggregates the per-kind routers under a unified prefix.
"""

from fastapi import APIRouter

from .endpoints import coaches, health, matches, stadiums, teams

router = APIRouter()

router.include_router(teams.router, prefix="/teams", tags=["teams"])
router.include_router(coaches.router, prefix="/coaches", tags=["coaches"])
router.include_router(stadiums.router, prefix="/stadiums", tags=["stadiums"])
router.include_router(matches.router, prefix="/matches", tags=["matches"])
router.include_router(health.router, prefix="/health", tags=["health"])
