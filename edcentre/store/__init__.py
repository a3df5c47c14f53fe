"""
Store module holding the in-memory roster.
"""

from .roster import RosterRepository

__all__ = [
    "RosterRepository",
]
