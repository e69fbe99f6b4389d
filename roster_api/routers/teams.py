from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request, Response

from roster_api.services.team_service import TeamService

router = APIRouter(prefix="/teams", tags=["teams"])


def _get_team_service(request: Request) -> TeamService:
    svc = getattr(getattr(request.app, "state", None), "team_service", None)
    if not svc:
        raise RuntimeError("TeamService not configured")
    return svc


@router.get("")
def list_teams(request: Request):
    return _get_team_service(request).list()


@router.get("/{team_id}")
def get_team(team_id: str, request: Request):
    return _get_team_service(request).get(team_id)


@router.post("", status_code=201)
def create_team(request: Request, payload: Optional[dict] = Body(None)):
    return _get_team_service(request).create(payload)


@router.put("/{team_id}")
def update_team(team_id: str, request: Request, payload: Optional[dict] = Body(None)):
    return _get_team_service(request).update(team_id, payload)


@router.delete("/{team_id}", status_code=204)
def delete_team(team_id: str, request: Request):
    _get_team_service(request).delete(team_id)
    return Response(status_code=204)
