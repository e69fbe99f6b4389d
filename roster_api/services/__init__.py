"""
Use cases for the Roster API.

Services orchestrate collection adapters (read, get, insert, update, delete) and
raise errors from roster_api.core.errors. Routers call these services instead
of touching the storage directly.
"""
