"""
Core utilities shared across the Roster API.

This package hosts configuration (env vars, storage paths), logging setup and
the error taxonomy used by services and routers.
"""
