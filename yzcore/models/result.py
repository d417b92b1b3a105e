"""Read model and request schemas for Year Zero rolls."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

from yzcore.infra.config import settings
from yzcore.modules.dice.die import Die, DieResult
from yzcore.modules.dice.roll import YearZeroRoll


class DieResultView(BaseModel):
    value: int
    label: str
    success_count: int
    active: bool
    discarded: bool
    pushed: bool

    @classmethod
    def from_result(cls, result: DieResult) -> DieResultView:
        return cls(
            value=result.value,
            label=result.label,
            success_count=result.success_count,
            active=result.active,
            discarded=result.discarded,
            pushed=result.pushed,
        )


class DieView(BaseModel):
    type: str
    denomination: str
    faces: int
    pushed: bool
    results: list[DieResultView]

    @classmethod
    def from_die(cls, die: Die) -> DieView:
        return cls(
            type=die.key,
            denomination=die.type.denomination,
            faces=die.faces,
            pushed=die.pushed,
            results=[DieResultView.from_result(r) for r in die.results],
        )


class RollView(BaseModel):
    id: str
    game: str
    size: int
    total: int
    push_count: int
    max_push: int
    pushed: bool
    pushable: bool
    mishap: bool
    bane_count: int
    attribute_trauma: int
    gear_damage: int
    stress: int
    panic: int
    hits: int
    dice: list[DieView]

    @classmethod
    def from_roll(cls, roll: YearZeroRoll) -> RollView:
        return cls(
            id=roll.id,
            game=roll.game,
            size=roll.size,
            total=roll.total,
            push_count=roll.push_count,
            max_push=roll.max_push,
            pushed=roll.pushed,
            pushable=roll.pushable,
            mishap=roll.mishap,
            bane_count=roll.bane_count,
            attribute_trauma=roll.attribute_trauma,
            gear_damage=roll.gear_damage,
            stress=roll.stress,
            panic=roll.panic,
            hits=roll.hits,
            dice=[DieView.from_die(d) for d in roll.dice],
        )


class CreateRollRequest(BaseModel):
    game: str = Field(default_factory=lambda: settings.default_game)
    dice: dict[str, Annotated[int, Field(ge=0, le=settings.max_dice_per_type)]] = {}
    max_push: int = Field(default_factory=lambda: settings.default_max_push, ge=0)
    modifier: int = Field(
        default=0, ge=-settings.max_dice_per_type, le=settings.max_dice_per_type
    )


class ModifyRequest(BaseModel):
    game: str
    modifier: int
    dice: dict[str, int] = {}


class ModifyResult(BaseModel):
    game: str
    modifier: int
    dice: dict[str, int]
