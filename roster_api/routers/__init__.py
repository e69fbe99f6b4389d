"""
FastAPI routers grouped by resource (teams, players, joins/search).

Each module exposes an APIRouter included by roster_api.app.create_app.
"""
