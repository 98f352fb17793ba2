from .roster import Roster
from .entry import RosterEntry

__all__ = [
    "Roster",
    "RosterEntry",
]
