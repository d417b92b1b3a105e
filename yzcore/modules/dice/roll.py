"""Year Zero dice pools — build, roll, push and read the aggregate results."""

from __future__ import annotations

import logging
import random
import uuid
from collections.abc import Mapping

from yzcore.modules.dice.die import Die
from yzcore.modules.dice.errors import InvalidPoolState
from yzcore.modules.dice.types import (
    BANABLE_FAMILIES,
    GAMES,
    check_die_type,
    check_quantity,
    get_game_die_types,
)

logger = logging.getLogger("yz-core.dice")


class YearZeroRoll:
    """An ordered pool of Year Zero dice rolled together.

    The pool is rolled once, may be pushed up to ``max_push`` times, and is
    read-only from the moment it stops being pushable.
    """

    def __init__(
        self,
        game: str,
        dice: list[Die],
        max_push: int = 1,
        roll_id: str | None = None,
    ) -> None:
        get_game_die_types(game)
        if max_push < 0:
            raise InvalidPoolState(f"max_push cannot be negative, got {max_push}")
        self.id = roll_id or uuid.uuid4().hex
        self.game = game
        self.dice = dice
        self.max_push = max_push
        self.push_count = 0
        self.rolled = False

    @classmethod
    def build(
        cls,
        game: str,
        dice: Mapping[str, int],
        max_push: int = 1,
        rng: random.Random | None = None,
    ) -> YearZeroRoll:
        """Create an un-rolled pool from a dice-quantity mapping.

        Every key is validated before any die is created, so a bad mapping
        never yields a partial pool.

        Raises:
            UnknownGame: If ``game`` is not registered.
            UnknownDieType: If a key with a positive quantity is not legal for
                ``game``.
            InvalidPoolState: If a quantity is negative or not an integer.
        """
        get_game_die_types(game)
        wanted = []
        for key, n in dice.items():
            n = check_quantity(key, n)
            if n == 0:
                continue
            wanted.append((check_die_type(game, key), n))
        pool = [Die(die_type, rng) for die_type, n in wanted for _ in range(n)]
        return cls(game, pool, max_push=max_push)

    def __repr__(self) -> str:
        return (
            f"YearZeroRoll(id={self.id!r}, game={self.game!r}, size={self.size}, "
            f"total={self.total}, push_count={self.push_count})"
        )

    # --- Commands ---

    def roll(self) -> YearZeroRoll:
        if self.rolled:
            raise InvalidPoolState(f"Roll {self.id} has already been rolled")
        for die in self.dice:
            die.roll()
        self.rolled = True
        return self

    def push(self) -> YearZeroRoll:
        """Push the pool, following the Year Zero rules.

        Does nothing when the pool is not pushable.
        """
        if not self.pushable:
            return self
        rerolled = sum(die.push() for die in self.dice if die.pushable)
        self.push_count += 1
        logger.debug(
            "Roll %s pushed (%d/%d): %d dice rerolled, total=%d, banes=%d",
            self.id, self.push_count, self.max_push, rerolled,
            self.total, self.bane_count,
        )
        return self

    # --- Queries ---

    def get_dice(self, die_type: str) -> list[Die]:
        return [d for d in self.dice if d.key == die_type]

    def count(self, family: str, value: int | None = None) -> int:
        """Count dice of a family, or their active results equal to ``value``."""
        dice = [d for d in self.dice if d.type.family == family]
        if value is None:
            return len(dice)
        return sum(d.count(value) for d in dice)

    @property
    def size(self) -> int:
        return sum(1 for d in self.dice if d.type.counts_successes)

    @property
    def total(self) -> int:
        return sum(d.total_success() for d in self.dice if d.type.counts_successes)

    @property
    def pushed(self) -> bool:
        return self.push_count > 0

    @property
    def pushable(self) -> bool:
        return (
            self.push_count < self.max_push
            and any(d.pushable for d in self.dice)
            and not self.mishap
        )

    @property
    def bane_count(self) -> int:
        return sum(self.count(family, 1) for family in BANABLE_FAMILIES)

    @property
    def attribute_trauma(self) -> int:
        return self.count("base", 1)

    @property
    def gear_damage(self) -> int:
        return self.count("gear", 1)

    @property
    def stress(self) -> int:
        return self.count("stress")

    @property
    def panic(self) -> int:
        return self.count("stress", 1)

    @property
    def hits(self) -> int:
        return sum(d.hit for d in self.dice if d.type.family == "ammo")

    @property
    def mishap(self) -> bool:
        if self.game != "t2k" or not self.rolled:
            return False
        banes = self.bane_count
        return banes >= 2 or banes >= self.size


def create_roll(
    game: str = GAMES[0],
    dice: Mapping[str, int] | None = None,
    max_push: int = 1,
    rng: random.Random | None = None,
) -> YearZeroRoll:
    """Convenience: build + roll in one call."""
    return YearZeroRoll.build(game, dice or {}, max_push=max_push, rng=rng).roll()
