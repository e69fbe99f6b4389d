from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request, Response

from roster_api.services.player_service import PlayerService

router = APIRouter(prefix="/players", tags=["players"])


def _get_player_service(request: Request) -> PlayerService:
    svc = getattr(getattr(request.app, "state", None), "player_service", None)
    if not svc:
        raise RuntimeError("PlayerService not configured")
    return svc


@router.get("")
def list_players(request: Request):
    return _get_player_service(request).list()


@router.get("/{player_id}")
def get_player(player_id: str, request: Request):
    return _get_player_service(request).get(player_id)


@router.post("", status_code=201)
def create_player(request: Request, payload: Optional[dict] = Body(None)):
    return _get_player_service(request).create(payload)


@router.put("/{player_id}")
def update_player(player_id: str, request: Request, payload: Optional[dict] = Body(None)):
    return _get_player_service(request).update(player_id, payload)


@router.delete("/{player_id}", status_code=204)
def delete_player(player_id: str, request: Request):
    _get_player_service(request).delete(player_id)
    return Response(status_code=204)
