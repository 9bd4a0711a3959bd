"""아이템 데이터 모델

Item: 카탈로그 레코드 (불변)
InventoryEntry: 트레이너가 보유한 아이템 묶음 (수량 가변)
"""

from __future__ import annotations

from dataclasses import dataclass


class ItemCategory:
    """사용 효과가 정해진 카테고리. 그 외 카테고리는 자유 텍스트."""

    VITAMIN = "Vitamin"
    EVOLUTION_STONE = "Evolution Stone"
    LEVELING_ITEM = "Leveling Item"


RARE_CANDY = "Rare Candy"


@dataclass(frozen=True)
class Item:
    name: str
    category: str = ""
    description: str = ""
    effect: str = ""
    buy_price: int = 0  # 0 = 판매하지 않음
    sell_price: int = 0

    @property
    def is_purchasable(self) -> bool:
        return self.buy_price > 0

    def is_category(self, category: str) -> bool:
        return self.category.strip().lower() == category.lower()

    def price_label(self) -> str:
        if not self.is_purchasable:
            return "Not for sale"
        return f"Buy: {self.buy_price} / Sell: {self.sell_price}"

    def __str__(self) -> str:
        return f"{self.name} ({self.category}) - {self.effect} [{self.price_label()}]"


@dataclass
class InventoryEntry:
    """보유 아이템 묶음. 같은 이름(대소문자 무시)은 하나로 합친다."""

    item: Item
    quantity: int = 1

    @property
    def name(self) -> str:
        return self.item.name

    def matches(self, name: str) -> bool:
        return self.item.name.lower() == name.strip().lower()

    def __str__(self) -> str:
        return f"{self.item.name} x{self.quantity}"
