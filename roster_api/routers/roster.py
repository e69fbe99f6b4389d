"""Join routes (team <-> players) and player search."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Request

from roster_api.services.roster_service import RosterService

router = APIRouter(tags=["roster"])


def _get_roster_service(request: Request) -> RosterService:
    svc = getattr(getattr(request.app, "state", None), "roster_service", None)
    if not svc:
        raise RuntimeError("RosterService not configured")
    return svc


@router.get("/teams/{team_id}/players")
def players_of_team(team_id: str, request: Request):
    return _get_roster_service(request).players_of_team(team_id)


@router.get("/players/{player_id}/team")
def team_of_player(player_id: str, request: Request):
    return _get_roster_service(request).team_of_player(player_id)


@router.get("/players-search")
def search_players(request: Request, name: Optional[str] = None):
    return _get_roster_service(request).search_players(name)
