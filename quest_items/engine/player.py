"""Player state and item collections seen by quest resources."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List
import logging

from quest_items.models.items import QuestItem

logger = logging.getLogger(__name__)


class ItemCollection:
    """Ordered item container keyed by item uid."""

    def __init__(self) -> None:
        self._items: Dict[str, QuestItem] = {}

    def add_item(self, item: QuestItem) -> None:
        self._items[item.uid] = item

    def remove_item(self, item: QuestItem) -> bool:
        """Remove item if present. Returns False when it was not in the collection."""
        if item.uid not in self._items:
            return False
        del self._items[item.uid]
        logger.debug("Removed item %s from collection", item.uid)
        return True

    def contains(self, item: QuestItem) -> bool:
        return item.uid in self._items

    def quest_items(self, quest_uid: int) -> List[QuestItem]:
        return [item for item in self._items.values() if item.is_quest_item and item.quest_uid == quest_uid]

    def __iter__(self) -> Iterator[QuestItem]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class PlayerState:
    level: int = 1
    region_price_adjustments: Dict[int, int] = field(default_factory=dict)
    current_region_index: int = 0
    items: ItemCollection = field(default_factory=ItemCollection)

    @property
    def current_region_price_adjustment(self) -> int:
        return int(self.region_price_adjustments.get(self.current_region_index, 0))
