"""Year Zero die types and the games that use them.

Every die type is a row of data (``DieType``) rather than a subclass: the
denomination, the faces, the values that can never be pushed, how a face
turns into successes and how it is labelled.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal

from yzcore.modules.dice.errors import InvalidPoolState, UnknownDieType, UnknownGame

SuccessRule = Literal["threshold", "table", "none"]

SUCCESS_THRESHOLD = 6

# Indexed by face value; index 0 is never rolled.
ARTIFACT_SUCCESS_TABLE = (0, 0, 0, 0, 0, 0, 1, 1, 2, 2, 3, 3, 4)
TWILIGHT_SUCCESS_TABLE = (0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 2, 2, 2)


@dataclass(frozen=True)
class DieType:
    """Immutable descriptor of one die-type variant."""

    key: str
    denomination: str
    faces: int
    locked_values: frozenset[int]
    family: str
    success_rule: SuccessRule = "threshold"
    success_table: tuple[int, ...] = ()
    sign: int = 1
    labels: Mapping[int, str] = field(default_factory=dict)
    high_label: str | None = None

    @property
    def counts_successes(self) -> bool:
        return self.success_rule != "none"

    def is_locked(self, value: int) -> bool:
        return value in self.locked_values

    def success_for(self, value: int) -> int:
        """Signed number of successes a single face is worth."""
        if self.success_rule == "threshold":
            return self.sign if value >= SUCCESS_THRESHOLD else 0
        if self.success_rule == "table":
            if 0 <= value < len(self.success_table):
                return self.sign * self.success_table[value]
            return 0
        return 0

    def label_for(self, value: int) -> str:
        if value in self.labels:
            return self.labels[value]
        if self.high_label is not None and value >= SUCCESS_THRESHOLD:
            return self.high_label
        return str(value)


def _locked_from_six(faces: int, *extra: int) -> frozenset[int]:
    return frozenset((*extra, *range(SUCCESS_THRESHOLD, faces + 1)))


def _artifact(key: str, faces: int) -> DieType:
    return DieType(
        key=key,
        denomination=str(faces),
        faces=faces,
        locked_values=_locked_from_six(faces),
        family="arto",
        success_rule="table",
        success_table=ARTIFACT_SUCCESS_TABLE,
    )


def _twilight(key: str, faces: int) -> DieType:
    return DieType(
        key=key,
        denomination=f"t{faces}",
        faces=faces,
        locked_values=_locked_from_six(faces, 1),
        family="base",
        success_rule="table",
        success_table=TWILIGHT_SUCCESS_TABLE,
        labels={1: "•"},
    )


_ALL_TYPES = (
    DieType("base", "b", 6, frozenset({1, 6}), "base", labels={1: "☣", 6: "☢"}),
    DieType("skill", "s", 6, frozenset({6}), "skill", high_label="☢"),
    DieType("gear", "g", 6, frozenset({1, 6}), "gear", labels={1: "💥", 6: "☢"}),
    DieType("neg", "n", 6, frozenset({6}), "neg", sign=-1, high_label="☢"),
    DieType(
        "stress", "z", 6, frozenset({1, 6}), "stress",
        labels={1: "⚠️"}, high_label="✔️",
    ),
    _artifact("artoD8", 8),
    _artifact("artoD10", 10),
    _artifact("artoD12", 12),
    _twilight("a", 12),
    _twilight("b", 10),
    _twilight("c", 8),
    _twilight("d", 6),
    DieType("ammo", "m", 6, frozenset(), "ammo", labels={1: "•"}, high_label="🎯"),
    DieType(
        "loc", "l", 6, frozenset(), "loc",
        success_rule="none",
        labels={1: "L", 2: "T", 3: "T", 4: "T", 5: "A", 6: "H"},
    ),
)

DIE_TYPES: Mapping[str, DieType] = MappingProxyType({t.key: t for t in _ALL_TYPES})

DIE_TYPES_MAP: Mapping[str, tuple[str, ...]] = MappingProxyType({
    # Mutant Year Zero
    "myz": ("base", "skill", "gear", "neg"),
    # Forbidden Lands
    "fbl": ("base", "skill", "gear", "neg", "artoD8", "artoD10", "artoD12"),
    # Alien RPG
    "alien": ("skill", "stress"),
    # Tales From the Loop
    "tales": ("skill",),
    # Coriolis
    "cor": ("skill",),
    # Vaesen
    "vae": ("skill",),
    # Twilight 2000
    "t2k": ("a", "b", "c", "d", "ammo", "loc"),
})

GAMES: tuple[str, ...] = tuple(DIE_TYPES_MAP)

# Twilight 2000 die ranks, weakest to strongest.
LADDER: tuple[str, ...] = ("d", "c", "b", "a")

BANABLE_FAMILIES = ("base", "gear", "stress", "ammo")


def get_die_type(key: str) -> DieType:
    """Return the descriptor registered under ``key``.

    Raises:
        UnknownDieType: If ``key`` is not a registered die type.
    """
    try:
        return DIE_TYPES[key]
    except KeyError:
        raise UnknownDieType(key, DIE_TYPES) from None


def get_game_die_types(game: str) -> tuple[str, ...]:
    """Ordered die-type identifiers legal for ``game``.

    Raises:
        UnknownGame: If ``game`` is not one of ``GAMES``.
    """
    try:
        return DIE_TYPES_MAP[game]
    except KeyError:
        raise UnknownGame(game, GAMES) from None


def check_die_type(game: str, key: str) -> DieType:
    """Validate that ``key`` may be rolled in ``game`` and return its descriptor."""
    legal = get_game_die_types(game)
    if key not in legal:
        raise UnknownDieType(key, legal)
    return DIE_TYPES[key]


def check_quantity(key: str, n: object) -> int:
    """Validate one entry of a dice-quantity mapping."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidPoolState(f'Quantity of "{key}" dice must be an integer, got {n!r}')
    if n < 0:
        raise InvalidPoolState(f'Quantity of "{key}" dice cannot be negative, got {n}')
    return n
