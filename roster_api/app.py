from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from roster_api.core.config import Settings, get_settings
from roster_api.core.handlers import register_error_handlers
from roster_api.core.logging import setup_logging
from roster_api.core.middleware import RequestLogMiddleware
from roster_api.repositories import open_collection
from roster_api.routers import players as players_router
from roster_api.routers import roster as roster_router
from roster_api.routers import teams as teams_router
from roster_api.services.player_service import PlayerService
from roster_api.services.roster_service import RosterService
from roster_api.services.team_service import TeamService

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory``)."""
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(title="Roster API")

    allowed_cors = set(settings.cors_origins)
    if settings.app_env != "prod":
        allowed_cors.update({"http://localhost:3000", "http://127.0.0.1:3000"})
    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted(allowed_cors),
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLogMiddleware)
    register_error_handlers(app)

    if settings.storage_backend == "sql":
        from roster_api.db.schema import ensure_schema

        ensure_schema()

    teams = open_collection("teams", settings)
    players = open_collection("players", settings)
    app.state.team_service = TeamService(teams)
    app.state.player_service = PlayerService(players)
    app.state.roster_service = RosterService(teams, players)

    @app.get("/", response_class=PlainTextResponse)
    def health():
        return "API JSON is running"

    app.include_router(roster_router.router)
    app.include_router(teams_router.router)
    app.include_router(players_router.router)

    logger.info("Roster API ready (backend=%s, env=%s)", settings.storage_backend, settings.app_env)
    return app


app = create_app()
