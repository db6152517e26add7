"""
Custom exceptions shared by all layers.

Every exception derives from GameError, so the layers above the domain (service, shell) can catch a single type.
"""

from typing import Any


class GameError(Exception):
    """Top-level exception for anything that goes wrong while playing a game"""


class ConfigurationError(GameError):
    """Environment / settings could not be interpreted"""


class InvalidBoardError(GameError):
    """Board dimensions that cannot host a game"""


class InvalidNotationError(GameError):
    """A persisted state string does not follow the state notation"""


class InvalidActionNotationError(GameError):
    """Text command that cannot be parsed into an action (ex. 'move a b')"""


class GameStateError(GameError):
    """The game is not in a state that allows the request (not started, already finished, seat taken, ...)"""


class NotYourTurnError(GameError):
    """A player tried to act while waiting for the opponent"""


class IllegalActionError(GameError):
    """The rules engine rejected the action. The rejection (reason + message) travels along."""

    def __init__(self, rejection: Any) -> None:
        super().__init__(rejection.message)
        self.rejection = rejection


class InvalidRequestError(GameError):
    """Request model validation failed (raised from the pydantic validators, so it reaches the caller as is)"""


class RepositoryError(GameError):
    """Persistence layer could not find / store the requested record"""
