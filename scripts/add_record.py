#!/usr/bin/env python3
"""
Add a team or a player directly to the configured storage.

Usage:
  python scripts/add_record.py team --name Reds --country UK
  python scripts/add_record.py player --team-id 1 --name Alice --number 9 --position forward
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# make the package importable when run from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from roster_api.core.config import get_settings  # noqa: E402
from roster_api.core.errors import RosterError  # noqa: E402
from roster_api.repositories import open_collection  # noqa: E402
from roster_api.services.player_service import PlayerService  # noqa: E402
from roster_api.services.team_service import TeamService  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Add a team or player to the roster storage")
    sub = ap.add_subparsers(dest="kind", required=True)

    team = sub.add_parser("team", help="add a team")
    team.add_argument("--name", required=True)
    team.add_argument("--country", required=True)

    player = sub.add_parser("player", help="add a player")
    player.add_argument("--team-id", required=True, help="id of the team (not checked)")
    player.add_argument("--name", required=True)
    player.add_argument("--number", required=True)
    player.add_argument("--position", required=True)

    args = ap.parse_args(argv)
    settings = get_settings()

    try:
        if args.kind == "team":
            svc = TeamService(open_collection("teams", settings))
            record = svc.create({"name": args.name, "country": args.country})
        else:
            svc = PlayerService(open_collection("players", settings))
            record = svc.create(
                {
                    "teamId": args.team_id,
                    "name": args.name,
                    "number": args.number,
                    "position": args.position,
                }
            )
    except RosterError as exc:
        sys.stderr.write(f"error: {exc.message}\n")
        return 1

    print(f"OK: {args.kind} added")
    for key, value in record.items():
        print(f"  {key}: {value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
