"""포켓몬 데이터 모델

카탈로그 엔트리(instance_id=None)와 트레이너 보유 사본(instance_id=UUID)을
같은 타입으로 표현한다. 보유 사본은 항상 owned_copy()로 만든다.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from enum import Enum

from pokedex.core.item.models import Item
from pokedex.core.move.models import Move

MAX_LEVEL = 100
MAX_MOVES = 4
STAT_NAMES = ("hp", "attack", "defense", "speed")

DEFAULT_MOVES: tuple[Move, ...] = (
    Move(
        name="Tackle",
        description="A physical attack in which the user charges and slams into the target.",
        classification="Physical",
        type1="Normal",
    ),
    Move(
        name="Defend",
        description="The user braces itself, raising its Defense.",
        classification="Status",
        type1="Normal",
    ),
)


class EvolutionMethod(str, Enum):
    LEVEL = "level"
    STONE = "stone"
    TRADE = "trade"

    @classmethod
    def parse(cls, value: str | None) -> EvolutionMethod | None:
        """빈 값은 None. 대소문자 무시."""
        if value is None or not value.strip():
            return None
        return cls(value.strip().lower())


def is_default_move(name: str) -> bool:
    key = name.strip().lower()
    return any(m.name.lower() == key for m in DEFAULT_MOVES)


@dataclass
class Pokemon:
    pokedex_number: int
    name: str
    type1: str
    type2: str | None = None
    level: int = 1
    hp: int = 0
    attack: int = 0
    defense: int = 0
    speed: int = 0
    evolves_from: int = 0  # 0 = 없음
    evolves_to: int = 0
    evolution_level: int = 0
    evolution_method: EvolutionMethod | None = None
    evolution_stone_type: str | None = None
    move_set: list[Move] = field(default_factory=list)
    held_item: Item | None = None
    instance_id: str | None = None

    def __post_init__(self) -> None:
        # 기본 기술은 항상 보유
        known = {m.name.lower() for m in self.move_set}
        for move in DEFAULT_MOVES:
            if move.name.lower() not in known:
                self.move_set.append(move)

    @property
    def types(self) -> tuple[str, ...]:
        return tuple(t for t in (self.type1, self.type2) if t)

    @property
    def type_label(self) -> str:
        return "/".join(self.types)

    def find_move(self, name: str) -> Move | None:
        key = name.strip().lower()
        for move in self.move_set:
            if move.name.lower() == key:
                return move
        return None

    def knows_move(self, name: str) -> bool:
        return self.find_move(name) is not None

    def owned_copy(self) -> Pokemon:
        """트레이너 보유용 독립 사본. 기술 목록도 새 리스트."""
        return replace(
            self,
            move_set=list(self.move_set),
            instance_id=str(uuid.uuid4()),
        )

    def cry(self) -> str:
        if "chu" in self.name.lower():
            return f"{self.name} says: Pika pika!"
        return f"{self.name} says: Rawr!"

    def __str__(self) -> str:
        return (
            f"#{self.pokedex_number:03d} {self.name} - Lv.{self.level} "
            f"[{self.type_label}] HP:{self.hp} ATK:{self.attack} "
            f"DEF:{self.defense} SPD:{self.speed}"
        )
