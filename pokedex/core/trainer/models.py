"""트레이너 데이터 모델"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from pokedex.core.errors import InvalidEntryError
from pokedex.core.item.models import InventoryEntry
from pokedex.core.pokemon.models import Pokemon

DEFAULT_STARTING_MONEY = 1_000_000
VALID_SEXES = ("M", "F", "O")


@dataclass
class Trainer:
    trainer_id: int
    name: str
    money: int = DEFAULT_STARTING_MONEY
    birthdate: Optional[str] = None  # YYYY-MM-DD 권장, 형식 검사 없음
    sex: Optional[str] = None
    hometown: Optional[str] = None
    description: Optional[str] = None
    active_team: list[Pokemon] = field(default_factory=list)
    storage: list[Pokemon] = field(default_factory=list)
    inventory: list[InventoryEntry] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidEntryError("Trainer name cannot be empty")
        self.name = self.name.strip()
        if self.sex is not None:
            self.sex = self.sex.strip().upper() or None
        if self.sex is not None and self.sex not in VALID_SEXES:
            raise InvalidEntryError(f"Sex must be one of {'/'.join(VALID_SEXES)}: {self.sex}")

    # === 조회 (사본 반환) ===

    def get_team(self) -> list[Pokemon]:
        return list(self.active_team)

    def get_storage(self) -> list[Pokemon]:
        return list(self.storage)

    def get_inventory(self) -> list[InventoryEntry]:
        return list(self.inventory)

    def all_pokemon(self) -> list[Pokemon]:
        return self.active_team + self.storage

    def find_pokemon(self, instance_id: str) -> Pokemon | None:
        for pokemon in self.all_pokemon():
            if pokemon.instance_id == instance_id:
                return pokemon
        return None

    def __str__(self) -> str:
        return (
            f"[{self.trainer_id}] {self.name} - Money: {self.money} | "
            f"Team: {len(self.active_team)} | Storage: {len(self.storage)}"
        )
