"""Errors raised by roster services and handled at the view boundary."""


class RosterError(Exception):
    """Base class for every roster failure shown to the user."""


class IdentifierCreationError(RosterError):
    """Roster entries could not be created; nothing was written."""


class RosterLinkError(RosterError):
    """The user may not be linked to the roster entry."""


class LastRosterEntryError(RosterError):
    """Deleting the entry would take the roster below its minimum size."""


class GoogleClassroomError(RosterError):
    """The Google Classroom API failed or could not be reached."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code
