"""
Custom exceptions shared across layers.

Every exception raised on purpose by the domain/service layers derives from `GameError`,
so the layer above only has to catch a single type if it does not care about the details.
"""


class GameError(Exception):
    """Top-level exception for anything that goes wrong while playing."""


class InvalidNotationError(GameError):
    """Text could not be parsed as a square (ex. 'i9', 'x5', 'a1''')."""


class IllegalMoveError(GameError):
    """The requested move is not part of the legal move set of the piece."""


class NotYourTurnError(IllegalMoveError):
    """A piece of a team other than the active team was asked to move."""


class GameStateError(GameError):
    """The game is not in a state that allows the requested operation."""


class InvalidRequestError(GameError):
    """Boundary layer validation failed."""


class ConfigurationError(GameError):
    """A configuration value (constructor argument or environment variable) is not allowed."""


class SessionNotFoundError(GameError):
    """No game session registered under the given id."""
