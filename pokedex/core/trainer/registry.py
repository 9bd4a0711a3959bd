"""트레이너 저장소

ID는 1부터 자동 증가, 삭제 후에도 재사용하지 않는다.
이름은 대소문자 무시 유일.
"""

from __future__ import annotations

import logging
from typing import Optional

from pokedex.core.errors import DuplicateEntryError, InvalidEntryError
from pokedex.core.trainer.models import DEFAULT_STARTING_MONEY, Trainer

logger = logging.getLogger(__name__)


class TrainerDatabase:
    def __init__(self) -> None:
        self._trainers: dict[int, Trainer] = {}
        self._last_id = 0

    def add_trainer(
        self,
        name: str,
        *,
        birthdate: Optional[str] = None,
        sex: Optional[str] = None,
        hometown: Optional[str] = None,
        description: Optional[str] = None,
        money: int = DEFAULT_STARTING_MONEY,
    ) -> Trainer:
        if not name or not name.strip():
            raise InvalidEntryError("Trainer name cannot be empty")
        if self.get_by_name(name) is not None:
            raise DuplicateEntryError("Trainer", name.strip())

        trainer = Trainer(
            trainer_id=self._last_id + 1,
            name=name,
            money=money,
            birthdate=birthdate,
            sex=sex,
            hometown=hometown,
            description=description,
        )
        self._last_id = trainer.trainer_id
        self._trainers[trainer.trainer_id] = trainer
        logger.info("Registered trainer %d: %s", trainer.trainer_id, trainer.name)
        return trainer

    def get_by_id(self, trainer_id: int) -> Trainer | None:
        return self._trainers.get(trainer_id)

    def get_by_name(self, name: str) -> Trainer | None:
        key = name.strip().lower()
        for trainer in self._trainers.values():
            if trainer.name.lower() == key:
                return trainer
        return None

    def get_all(self) -> list[Trainer]:
        return list(self._trainers.values())

    def remove(self, trainer_id: int) -> bool:
        if self._trainers.pop(trainer_id, None) is None:
            return False
        logger.info("Removed trainer %d", trainer_id)
        return True

    def count(self) -> int:
        return len(self._trainers)

    def exists(self, trainer_id: int) -> bool:
        return trainer_id in self._trainers

    def search_by_name(self, term: str) -> list[Trainer]:
        key = term.strip().lower()
        if not key:
            return []
        return [t for t in self._trainers.values() if key in t.name.lower()]

    def search_by_pokemon(self, term: str) -> list[Trainer]:
        """팀(보관함 제외)에 이름이 term을 포함하는 포켓몬이 있는 트레이너"""
        key = term.strip().lower()
        if not key:
            return []
        return [
            t
            for t in self._trainers.values()
            if any(key in p.name.lower() for p in t.active_team)
        ]
