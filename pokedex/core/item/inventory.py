"""인벤토리 한도 관리

검사 순서: 수량 → 종류 수 → 총 수량 → 묶음 한도.
이름은 대소문자 무시로 묶는다.
"""

from __future__ import annotations

import logging

from pokedex.core.item.models import InventoryEntry, Item

logger = logging.getLogger(__name__)

MAX_UNIQUE_ITEMS = 10
MAX_TOTAL_ITEMS = 50
MAX_ITEM_STACK = 99


def find_entry(inventory: list[InventoryEntry], name: str) -> InventoryEntry | None:
    for entry in inventory:
        if entry.matches(name):
            return entry
    return None


def total_quantity(inventory: list[InventoryEntry]) -> int:
    return sum(entry.quantity for entry in inventory)


def check_can_add(
    inventory: list[InventoryEntry], item_name: str, quantity: int
) -> str | None:
    """추가 가능하면 None, 불가하면 사유 문자열."""
    if quantity <= 0:
        return "Quantity must be greater than 0."

    existing = find_entry(inventory, item_name)
    if existing is None and len(inventory) >= MAX_UNIQUE_ITEMS:
        return f"Cannot hold more than {MAX_UNIQUE_ITEMS} different items."

    if total_quantity(inventory) + quantity > MAX_TOTAL_ITEMS:
        return f"Cannot hold more than {MAX_TOTAL_ITEMS} items in total."

    if existing is not None and existing.quantity + quantity > MAX_ITEM_STACK:
        return f"Cannot hold more than {MAX_ITEM_STACK} of {existing.name}."

    return None


def stack_item(inventory: list[InventoryEntry], item: Item, quantity: int) -> InventoryEntry:
    """기존 묶음에 합치거나 새 묶음 추가. 한도 검사는 호출 측 책임."""
    existing = find_entry(inventory, item.name)
    if existing is not None:
        existing.quantity += quantity
        return existing

    entry = InventoryEntry(item=item, quantity=quantity)
    inventory.append(entry)
    return entry


def consume(inventory: list[InventoryEntry], entry: InventoryEntry, quantity: int = 1) -> None:
    """수량 차감. 0이 되면 묶음 제거."""
    entry.quantity -= quantity
    if entry.quantity <= 0:
        inventory.remove(entry)
        logger.debug("Removed empty stack %s", entry.name)
