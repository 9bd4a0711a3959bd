"""기술 카탈로그 - CSV 로드 + 동적 등록"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from pokedex.core.errors import DuplicateEntryError, InvalidEntryError
from pokedex.core.event_bus import DexEvent, EventBus
from pokedex.core.event_types import EventTypes
from pokedex.core.move.models import Move

logger = logging.getLogger(__name__)


class MoveDatabase:
    """기술 저장소. 이름은 대소문자 무시 유일."""

    def __init__(self, event_bus: Optional[EventBus] = None) -> None:
        self._moves: list[Move] = []
        self._bus = event_bus

    def add(self, move: Move) -> None:
        if not move.name or not move.name.strip():
            raise InvalidEntryError("Move name cannot be empty")
        if self.get(move.name) is not None:
            raise DuplicateEntryError("Move", move.name)

        self._moves.append(move)
        logger.debug("Registered move %s", move.name)
        if self._bus is not None:
            self._bus.emit(
                DexEvent(
                    event_type=EventTypes.MOVE_REGISTERED,
                    data={"name": move.name},
                    source="move_database",
                )
            )

    def load_from_csv(self, path: str | Path) -> int:
        """moves.csv 로드. 반환: 로드된 수량.
        잘못된 행과 중복 행은 경고 후 건너뛴다.
        """
        from pokedex.schemas import MoveRow, iter_csv_rows

        path = Path(path)
        count = 0
        for line_no, cells in iter_csv_rows(path):
            try:
                self.add(MoveRow.from_cells(cells).to_move())
                count += 1
            except (ValidationError, ValueError) as e:
                logger.warning("Skipped move row %d in %s: %s", line_no, path.name, e)

        logger.info("Loaded %d moves from %s", count, path)
        return count

    def get(self, name: str) -> Move | None:
        """정확한 이름(대소문자 무시) 조회. 없으면 None."""
        key = name.strip().lower()
        for move in self._moves:
            if move.name.lower() == key:
                return move
        return None

    def find_by_name(self, name: str) -> Move | None:
        """정확히 일치하는 기술 우선, 없으면 부분 일치 첫 번째."""
        exact = self.get(name)
        if exact is not None:
            return exact
        matches = self.search_by_name(name)
        return matches[0] if matches else None

    def get_all(self) -> list[Move]:
        return list(self._moves)

    def count(self) -> int:
        return len(self._moves)

    def search_by_name(self, term: str) -> list[Move]:
        key = term.strip().lower()
        if not key:
            return []
        return [m for m in self._moves if key in m.name.lower()]

    def search_by_type(self, term: str) -> list[Move]:
        key = term.strip().lower()
        if not key:
            return []
        return [m for m in self._moves if any(key in t.lower() for t in m.types)]

    def search_by_classification(self, term: str) -> list[Move]:
        key = term.strip().lower()
        if not key:
            return []
        return [m for m in self._moves if key in m.classification.lower()]
