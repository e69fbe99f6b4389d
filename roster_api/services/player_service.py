"""Player CRUD over the players collection."""

from __future__ import annotations

from typing import Optional
import logging

from roster_api.core.errors import NotFoundError, ValidationError
from roster_api.repositories.records import Record
from roster_api.services.fields import int_field, is_filled

logger = logging.getLogger(__name__)

PLAYER_FIELDS = ("teamId", "name", "number", "position")
NUMERIC_FIELDS = ("teamId", "number")


def _values(payload: dict) -> dict:
    """Fields present in payload; numeric ones must hold an integer."""
    values = {}
    for field in PLAYER_FIELDS:
        if field not in payload:
            continue
        values[field] = int_field(payload, field) if field in NUMERIC_FIELDS else payload[field]
    return values


class PlayerService:
    def __init__(self, players) -> None:
        self.players = players

    def list(self) -> list[Record]:
        return self.players.read()

    def get(self, player_id: str) -> Record:
        player = self.players.get(player_id)
        if player is None:
            raise NotFoundError("Player not found")
        return player

    def create(self, payload: Optional[dict]) -> Record:
        payload = payload or {}
        if not all(is_filled(payload.get(field)) for field in PLAYER_FIELDS):
            raise ValidationError("teamId, name, number and position required")
        player = self.players.insert(_values(payload))
        logger.info("Created player %s (team %s)", player["id"], player["teamId"])
        return player

    def update(self, player_id: str, payload: Optional[dict]) -> Record:
        payload = payload or {}
        # the id is resolved before the payload is checked: unknown ids are 404
        player = self.players.update(player_id, lambda current: _values(payload))
        if player is None:
            raise NotFoundError("Player not found")
        return player

    def delete(self, player_id: str) -> None:
        if not self.players.delete(player_id):
            raise NotFoundError("Player not found")
        logger.info("Deleted player %s", player_id)
