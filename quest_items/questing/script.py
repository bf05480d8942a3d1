"""Load item resources from the declaration lines of a quest script."""
from __future__ import annotations

from typing import Iterable, List
import logging
import re

from quest_items.questing.item import Item
from quest_items.questing.quest import Quest

logger = logging.getLogger(__name__)

_ITEM_LINE_RE = re.compile(r"^\s*(?:Item|item)\s")


def is_item_declaration(line: str) -> bool:
    return _ITEM_LINE_RE.match(line) is not None


def load_item_resources(quest: Quest, lines: Iterable[str]) -> List[Item]:
    """Create and register an Item for each `Item` line; other lines are skipped."""
    created: List[Item] = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not is_item_declaration(line):
            continue
        item = Item(quest, line.strip())
        quest.add_resource(item)
        created.append(item)
    logger.info("Loaded %d item resources into quest %s", len(created), quest.uid)
    return created
