"""아이템 시스템 Core - 순수 Python"""

from .catalog import ItemDatabase
from .models import InventoryEntry, Item, ItemCategory

__all__ = ["InventoryEntry", "Item", "ItemCategory", "ItemDatabase"]
