"""A single Year Zero die and the history of its results."""

from __future__ import annotations

import random
from dataclasses import dataclass

from yzcore.modules.dice.types import DieType, get_die_type


@dataclass
class DieResult:
    value: int
    success_count: int
    label: str
    active: bool = True
    discarded: bool = False
    pushed: bool = False

    @property
    def counted(self) -> bool:
        return self.active and not self.discarded


class Die:
    """One rolled die of a given type.

    Results are never overwritten: a push deactivates the pushable results and
    appends their replacements, so the full push trail stays available.
    """

    def __init__(self, die_type: DieType | str, rng: random.Random | None = None) -> None:
        self.type = get_die_type(die_type) if isinstance(die_type, str) else die_type
        self.results: list[DieResult] = []
        self.push_count = 0
        self._rng = rng or random

    def __repr__(self) -> str:
        return f"Die({self.type.key!r}, values={self.values})"

    @property
    def key(self) -> str:
        return self.type.key

    @property
    def faces(self) -> int:
        return self.type.faces

    @property
    def active_results(self) -> list[DieResult]:
        return [r for r in self.results if r.counted]

    @property
    def values(self) -> list[int]:
        return [r.value for r in self.active_results]

    @property
    def pushable(self) -> bool:
        return any(not self.type.is_locked(r.value) for r in self.active_results)

    @property
    def pushed(self) -> bool:
        return self.push_count > 0

    @property
    def hit(self) -> int:
        return self.count(6)

    def roll(self, pushed: bool = False) -> DieResult:
        """Append one fresh result drawn uniformly from ``[1, faces]``."""
        value = self._rng.randint(1, self.type.faces)
        result = DieResult(
            value=value,
            success_count=self.type.success_for(value),
            label=self.type.label_for(value),
            pushed=pushed,
        )
        self.results.append(result)
        return result

    def push(self) -> int:
        """Reroll every active result that is not locked.

        Returns:
            The number of replacement results rolled (0 when nothing could be
            pushed, in which case the die is left untouched).
        """
        count = 0
        for r in self.active_results:
            if self.type.is_locked(r.value):
                continue
            r.active = False
            r.discarded = True
            r.pushed = True
            count += 1
        for _ in range(count):
            self.roll(pushed=True)
        if count:
            self.push_count += 1
        return count

    def count(self, value: int) -> int:
        return sum(1 for r in self.active_results if r.value == value)

    def total_success(self) -> int:
        return sum(r.success_count for r in self.active_results)
