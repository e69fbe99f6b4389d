"""Roster API: teams and players stored as flat JSON collections."""
