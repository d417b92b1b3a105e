"""Dice engine errors."""

from __future__ import annotations

from collections.abc import Iterable


class DiceError(ValueError):
    """Base class for every error raised by the dice engine."""


class UnknownGame(DiceError):
    def __init__(self, game: str, allowed: Iterable[str]) -> None:
        self.game = game
        self.allowed = tuple(allowed)
        super().__init__(
            f'Unknown game: "{game}". Allowed games are: {", ".join(self.allowed)}.'
        )


class UnknownDieType(DiceError):
    def __init__(self, die_type: str, allowed: Iterable[str]) -> None:
        self.die_type = die_type
        self.allowed = tuple(allowed)
        super().__init__(
            f'Unknown die type: "{die_type}". '
            f'Allowed types are: {", ".join(self.allowed)}.'
        )


class InvalidPoolState(DiceError):
    """Raised when a pool or a dice-quantity mapping is outside its domain."""
