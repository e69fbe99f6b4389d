"""Read-time joins between teams and players, plus player search."""

from __future__ import annotations

from typing import Optional

from roster_api.core.errors import NotFoundError, ValidationError
from roster_api.repositories.records import Record, as_number


class RosterService:
    """teamId is an advisory reference: it is only resolved here, never on write."""

    def __init__(self, teams, players) -> None:
        self.teams = teams
        self.players = players

    def players_of_team(self, team_id: str) -> list[Record]:
        wanted = as_number(team_id)
        if wanted is None:
            return []
        return [p for p in self.players.read() if as_number(p.get("teamId")) == wanted]

    def team_of_player(self, player_id: str) -> Record:
        player = self.players.get(player_id)
        if player is None:
            raise NotFoundError("Player not found")
        team = self.teams.get(player.get("teamId"))
        if team is None:
            raise NotFoundError("Team not found")
        return team

    def search_players(self, name: Optional[str]) -> list[Record]:
        query = (name or "").strip()
        if not query:
            raise ValidationError("name required")
        needle = query.casefold()
        return [p for p in self.players.read() if needle in str(p.get("name") or "").casefold()]
