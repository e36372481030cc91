"""Exceptions raised by the draft engine and the league registry."""


class LeagueError(Exception):
    """Base class for rejected league operations."""


class LeagueActiveError(LeagueError):
    """Raised when a post-draft operation is attempted during the draft."""


class LeagueInactiveError(LeagueError):
    """Raised when a draft operation is attempted on an inactive league."""


class DraftCompleteError(LeagueError):
    """Raised when a finished draft is asked to reopen."""


class InvalidTradeError(LeagueError):
    """Raised when a trade does not involve two different participants."""


class ParticipantNotFoundError(LeagueError):
    """Raised when a participant id is not part of the league."""


class ItemNotFoundError(LeagueError):
    """Raised when a named item is not in the expected pick list or queue."""


class ItemInUseError(LeagueError):
    """Raised when an item has already been picked by someone."""


class PicksEmptyError(LeagueError):
    """Raised when a participant has not locked in any picks yet."""


class QueueEmptyError(LeagueError):
    """Raised when a participant's queue is empty."""


class NoPicksError(LeagueError):
    """Raised when no one in the league has made a pick yet."""


class RegistryError(Exception):
    """Base class for rejected registry operations."""


class LeagueNotFoundError(RegistryError):
    pass


class LeagueNameInUseError(RegistryError):
    pass
