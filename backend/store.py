"""
Process-wide registry shared by the routes and the reaper.
Nothing is persisted: every user and session is gone after a restart.
"""

from registry import Registry

registry = Registry()
