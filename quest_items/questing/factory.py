"""Item creation strategies for quest item declarations."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import logging

from quest_items.config import AppConfig
from quest_items.engine.player import PlayerState
from quest_items.engine.random_source import RandomSource
from quest_items.models.items import ItemGroups, QuestItem
from quest_items.questing.declaration import UNSPECIFIED, ByClass, ByName, Gold, ItemSource
from quest_items.questing.errors import InvalidClassError, ItemLookupError
from quest_items.world.content.item_templates import variant_count
from quest_items.world.items_table import ItemsTable

logger = logging.getLogger(__name__)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def gold_amount(
    player: PlayerState,
    rng: RandomSource,
    *,
    range_low: Optional[int] = None,
    range_high: Optional[int] = None,
    player_mod_cap: int = 10,
    faction_mod: int = 50,
) -> int:
    """Gold reward: a declared range, otherwise scaled by player level and region prices.

    Never returns less than 1.
    """
    if range_low is not None and range_high is not None:
        amount = rng.uniform_int(range_low, range_high)
    else:
        player_mod = min(player_mod_cap, _trunc_div(player.level, 2) + 1)
        region_mod = _trunc_div(player.current_region_price_adjustment, 2)
        amount = rng.uniform_int(150 * player_mod, 200 * player_mod)
        amount = _trunc_div(amount * (region_mod + 500), 1000)
        amount = _trunc_div(amount * (faction_mod + 50), 100)
    return max(1, amount)


@dataclass
class ItemFactory:
    config: AppConfig
    items_table: ItemsTable
    rng: RandomSource
    player: PlayerState

    def create(self, source: ItemSource, quest_uid: int, symbol: str) -> QuestItem:
        """Run exactly one creation strategy and link the result to (quest_uid, symbol)."""
        if isinstance(source, ByName):
            item = self.create_by_name(source.name)
        elif isinstance(source, ByClass):
            item = self.create_by_class(source.item_class, source.item_subclass)
        elif isinstance(source, Gold):
            item = self.create_gold(source.range_low, source.range_high)
        else:
            raise TypeError(f"Unknown item source: {source!r}")
        item.link_quest_item(quest_uid, symbol)
        logger.info(
            "Created quest item %s for quest %s: group=%d index=%d stack=%d",
            symbol,
            quest_uid,
            int(item.item_group),
            item.group_index,
            item.stack_count,
        )
        return item

    def create_by_name(self, name: str) -> QuestItem:
        # p1 and p2 of the items table are the item group and group index
        if not self.items_table.has_entry(name):
            raise ItemLookupError(name)
        p1 = self.items_table.get_param("p1", name)
        p2 = self.items_table.get_param("p2", name)
        return self.create_by_class(p1, p2)

    def create_by_class(self, item_class: int, item_subclass: int = UNSPECIFIED) -> QuestItem:
        if item_class == UNSPECIFIED:
            raise InvalidClassError(item_class)
        try:
            group = ItemGroups(item_class)
        except ValueError as exc:
            raise InvalidClassError(item_class) from exc

        items_cfg = self.config.items
        is_magic_item = False
        if int(group) == items_cfg.magic_items_class and item_subclass == UNSPECIFIED:
            redirects = items_cfg.magic_redirect_classes
            group = ItemGroups(redirects[self.rng.uniform_int(0, len(redirects) - 1)])
            is_magic_item = True

        count = variant_count(group)
        if item_subclass == UNSPECIFIED:
            if count == 0:
                raise InvalidClassError(int(group))
            item_subclass = self.rng.uniform_int(0, count - 1)
        elif not 0 <= item_subclass < count:
            raise InvalidClassError(int(group), item_subclass)

        item = QuestItem(item_group=group, group_index=item_subclass)
        if is_magic_item:
            # Placeholder effects mark the item enchanted until real effects exist.
            item.legacy_magic = list(items_cfg.placeholder_enchantment)
        return item

    def create_gold(self, range_low: Optional[int] = None, range_high: Optional[int] = None) -> QuestItem:
        amount = gold_amount(
            self.player,
            self.rng,
            range_low=range_low,
            range_high=range_high,
            player_mod_cap=self.config.gold.player_mod_cap,
            faction_mod=self.config.gold.faction_mod,
        )
        logger.debug("Gold amount %d (range %s to %s)", amount, range_low, range_high)
        return QuestItem(item_group=ItemGroups.CURRENCY, group_index=0, stack_count=amount)
