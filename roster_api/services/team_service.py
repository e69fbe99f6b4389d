"""Team CRUD over the teams collection."""

from __future__ import annotations

from typing import Optional
import logging

from roster_api.core.errors import NotFoundError, ValidationError
from roster_api.repositories.records import Record
from roster_api.services.fields import is_filled

logger = logging.getLogger(__name__)

TEAM_FIELDS = ("name", "country")


class TeamService:
    def __init__(self, teams) -> None:
        self.teams = teams

    def list(self) -> list[Record]:
        return self.teams.read()

    def get(self, team_id: str) -> Record:
        team = self.teams.get(team_id)
        if team is None:
            raise NotFoundError("Team not found")
        return team

    def create(self, payload: Optional[dict]) -> Record:
        payload = payload or {}
        if not all(is_filled(payload.get(field)) for field in TEAM_FIELDS):
            raise ValidationError("name and country required")
        team = self.teams.insert({field: payload[field] for field in TEAM_FIELDS})
        logger.info("Created team %s", team["id"])
        return team

    def update(self, team_id: str, payload: Optional[dict]) -> Record:
        """Overwrite only the fields present in payload; others keep their value."""
        payload = payload or {}
        team = self.teams.update(
            team_id,
            lambda current: {field: payload[field] for field in TEAM_FIELDS if field in payload},
        )
        if team is None:
            raise NotFoundError("Team not found")
        return team

    def delete(self, team_id: str) -> None:
        if not self.teams.delete(team_id):
            raise NotFoundError("Team not found")
        logger.info("Deleted team %s", team_id)
