"""아이템 카탈로그 - CSV 로드 + 동적 등록"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from pokedex.core.errors import DuplicateEntryError, InvalidEntryError
from pokedex.core.event_bus import DexEvent, EventBus
from pokedex.core.event_types import EventTypes
from pokedex.core.item.models import Item

logger = logging.getLogger(__name__)


class ItemDatabase:
    """아이템 저장소. 이름은 대소문자 무시 유일."""

    def __init__(self, event_bus: Optional[EventBus] = None) -> None:
        self._items: list[Item] = []
        self._bus = event_bus

    def add(self, item: Item) -> None:
        if not item.name or not item.name.strip():
            raise InvalidEntryError("Item name cannot be empty")
        if self.find_by_name(item.name) is not None:
            raise DuplicateEntryError("Item", item.name)

        self._items.append(item)
        logger.debug("Registered item %s", item.name)
        if self._bus is not None:
            self._bus.emit(
                DexEvent(
                    event_type=EventTypes.ITEM_REGISTERED,
                    data={"name": item.name},
                    source="item_database",
                )
            )

    def load_from_csv(self, path: str | Path) -> int:
        """items.csv 로드. 반환: 로드된 수량."""
        from pokedex.schemas import ItemRow, iter_csv_rows

        path = Path(path)
        count = 0
        for line_no, cells in iter_csv_rows(path):
            try:
                self.add(ItemRow.from_cells(cells).to_item())
                count += 1
            except (ValidationError, ValueError) as e:
                logger.warning("Skipped item row %d in %s: %s", line_no, path.name, e)

        logger.info("Loaded %d items from %s", count, path)
        return count

    def find_by_name(self, name: str) -> Item | None:
        """정확한 이름(대소문자 무시) 조회."""
        key = name.strip().lower()
        for item in self._items:
            if item.name.lower() == key:
                return item
        return None

    def get_all(self) -> list[Item]:
        return list(self._items)

    def get_purchasable(self) -> list[Item]:
        """buy_price > 0 인 아이템 (카탈로그 순서)"""
        return [i for i in self._items if i.is_purchasable]

    def count(self) -> int:
        return len(self._items)

    def search_by_name(self, term: str) -> list[Item]:
        key = term.strip().lower()
        if not key:
            return []
        return [i for i in self._items if key in i.name.lower()]

    def search_by_category(self, term: str) -> list[Item]:
        key = term.strip().lower()
        if not key:
            return []
        return [i for i in self._items if key in i.category.lower()]
