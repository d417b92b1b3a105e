"""Difficulty modifiers — turn a bonus or a malus into a new dice-quantity mapping.

Most games simply add the modifier to their skill dice. Twilight 2000 instead
moves dice up and down its die ladder (D6 < D8 < D10 < D12), with at most two
dice per check: a bonus beyond D12 adds an extra die and a malus below D6
drops one.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from yzcore.modules.dice.types import LADDER, check_quantity, get_game_die_types

logger = logging.getLogger("yz-core.dice")

MAX_LADDER_DICE = 2


def modify(game: str, modifier: int, dice: Mapping[str, int]) -> dict[str, int]:
    """Apply a difficulty modifier to a quantity of dice.

    Args:
        game: The game whose rules apply.
        modifier: Signed number of steps (bonus > 0, malus < 0).
        dice: Dice-quantity mapping. It is never mutated.

    Returns:
        A new dice-quantity mapping.

    Raises:
        UnknownGame: If ``game`` is not registered.
        InvalidPoolState: If a quantity is negative or not an integer.
    """
    legal = get_game_die_types(game)
    for key, n in dice.items():
        check_quantity(key, n)

    result = dict(dice)
    if game == "t2k":
        _shift_ladder(result, modifier)
    elif "neg" in legal:
        # Mutant Year Zero & Forbidden Lands: a malus beyond the skill dice
        # turns into negative dice.
        skill = result.get("skill", 0) + modifier
        if skill < 0:
            result["neg"] = result.get("neg", 0) - skill
            skill = 0
        result["skill"] = skill
    else:
        result["skill"] = max(result.get("skill", 0) + modifier, 0)
    return result


def _move(dice: dict[str, int], old: str, new: str) -> None:
    dice[old] -= 1
    dice[new] = dice.get(new, 0) + 1


def _shift_ladder(dice: dict[str, int], modifier: int) -> None:
    """Rewrite the ladder dice of ``dice`` in place, recursing on any excess."""
    pool = [rank for rank in LADDER for _ in range(dice.get(rank, 0))]
    n = len(pool)
    if n > MAX_LADDER_DICE:
        logger.warning(
            "Ladder modifier skipped: %d dice in pool (max %d)", n, MAX_LADDER_DICE
        )
        return
    if n == 0:
        return
    if n == 1 and pool[0] == LADDER[0] and modifier <= 0:
        return

    top = len(LADDER) - 1
    ranks = [LADDER.index(rank) for rank in pool]
    if modifier > 0:
        below_top = [r for r in ranks if r < top]
        if below_top:
            current = max(below_top)
        elif n == 1:
            current = top
        else:
            return
    else:
        current = min(ranks)

    new = min(max(current + modifier, 0), top)
    excess = modifier - (new - current)
    die, new_die = LADDER[current], LADDER[new]

    if excess > 0:
        _move(dice, die, new_die)
        if n < MAX_LADDER_DICE:
            steps = min(excess, len(LADDER))
            extra = LADDER[steps - 1]
            dice[extra] = dice.get(extra, 0) + 1
            if excess > steps:
                _shift_ladder(dice, excess - steps)
        else:
            _shift_ladder(dice, excess)
    elif excess < 0 and n > 1:
        dice[die] -= 1
        # Dropping a die is itself one step of malus.
        _shift_ladder(dice, excess + 1)
    else:
        _move(dice, die, new_die)
