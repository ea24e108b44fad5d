from __future__ import annotations


class GameError(Exception):
    """Base class for every recoverable error raised by the poker core."""


class InvalidCardCode(GameError, ValueError):
    """Card code outside [1, 52]."""


class DeckExhausted(GameError):
    """More cards were requested than the deck holds."""


class IndexOutOfRange(GameError, IndexError):
    """Hand index outside [0, 4], or a malformed exchange request."""


class InvalidStateTransition(GameError):
    """Session operation called in the wrong phase."""
