"""Quest item resource: an inventory item granted or used by a quest."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Literal, Optional, Union
import logging

from pydantic import BaseModel, ConfigDict

from quest_items.models.items import ItemData, QuestItem
from quest_items.questing.declaration import parse_item_declaration
from quest_items.questing.errors import UnsupportedMacroError
from quest_items.questing.factory import ItemFactory
from quest_items.questing.macros import MacroTypes
from quest_items.questing.resource import QuestResource
from quest_items.questing.talk import QuestInfoResourceType

if TYPE_CHECKING:
    from quest_items.questing.quest import Quest

logger = logging.getLogger(__name__)

_DISPLAY_MACROS = {MacroTypes.NAME_MACRO_1, MacroTypes.DETAILS_MACRO}


class ItemSaveData(BaseModel):
    model_config = ConfigDict(extra="forbid")

    version: Literal["v1"] = "v1"
    artifact: bool = False
    use_clicked: bool = False
    action_watching: bool = False
    player_dropped: bool = False
    item: ItemData


class Item(QuestResource):
    """A quest item wrapping exactly one QuestItem.

    Flags set by other systems:
    - use_clicked: player clicked "Use" on the item in inventory; consumed once by quest actions.
    - action_watching: a quest action watches this item and handles its use first.
    - player_dropped: the item was dropped from inventory.
    """

    def __init__(self, quest: "Quest", line: Optional[str] = None) -> None:
        super().__init__(quest)
        self.artifact = False
        self.use_clicked = False
        self.action_watching = False
        self.player_dropped = False
        self._item: Optional[QuestItem] = None
        self._disposed = False
        if line is not None:
            self.set_resource(line)

    @property
    def inventory_item(self) -> QuestItem:
        if self._item is None:
            raise RuntimeError(f"Item resource {self.symbol or '?'} has no item")
        return self._item

    def set_resource(self, line: str) -> None:
        super().set_resource(line)

        cfg = self.machine.config
        declaration = parse_item_declaration(line, gold_keyword=cfg.items.gold_keyword)

        # Reject a duplicate before any item or dialogue topic exists for it.
        quest = self.parent_quest
        if quest is not None and quest.has_resource(declaration.symbol):
            raise ValueError(f"Duplicate resource symbol in quest {quest.uid}: {declaration.symbol}")

        # Symbol first: the new item is linked to (quest uid, symbol).
        self.symbol = declaration.symbol
        factory = ItemFactory(
            config=cfg,
            items_table=self.machine.items_table,
            rng=self.machine.random,
            player=self.machine.player,
        )
        self._item = factory.create(declaration.source, self.quest_uid, self.symbol)
        self.artifact = declaration.artifact

        self.add_conversation_topics()

    def expand_macro(self, macro: MacroTypes) -> str:
        if macro not in _DISPLAY_MACROS:
            raise UnsupportedMacroError(macro, self.symbol)
        item = self.inventory_item
        if self.artifact:
            return item.short_name
        if item.is_gold_pieces:
            return str(item.stack_count)
        return item.long_name

    def add_conversation_topics(self) -> None:
        """Expose the item as a dialogue topic when it carries an anyInfo message."""
        if self.info_message_id == -1:
            return
        quest = self.parent_quest
        if quest is None:
            logger.warning("Item %s has no registered quest %s; skipping topics", self.symbol, self.quest_uid)
            return
        info_answers = self._message_variants(quest, self.info_message_id)
        rumor_answers = self._message_variants(quest, self.rumors_message_id)
        self.machine.talk.add_quest_topic_with_info_and_rumors(
            self.quest_uid,
            self,
            self.inventory_item.item_name,
            QuestInfoResourceType.THING,
            info_answers,
            rumor_answers,
        )

    @staticmethod
    def _message_variants(quest: "Quest", message_id: int) -> List[List[str]]:
        # Macros stay unexpanded until the topic is spoken.
        message = quest.get_message(message_id)
        if message is None:
            return []
        return [message.get_text_tokens_by_variant(i) for i in range(message.variant_count)]

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        item = self._item
        # A quest-tagged item must not outlive its quest in the player's inventory.
        if item is not None and item.is_quest_item:
            removed = self.machine.player.items.remove_item(item)
            logger.debug("Dispose item %s: removed from inventory=%s", self.symbol, removed)

    def get_save_data(self) -> ItemSaveData:
        return ItemSaveData(
            artifact=self.artifact,
            use_clicked=self.use_clicked,
            action_watching=self.action_watching,
            player_dropped=self.player_dropped,
            item=self.inventory_item.get_save_data(),
        )

    def restore_save_data(self, data: Union[ItemSaveData, Dict[str, Any], None]) -> None:
        if data is None:
            return
        if not isinstance(data, ItemSaveData):
            data = ItemSaveData.model_validate(data)
        self.artifact = data.artifact
        self.use_clicked = data.use_clicked
        self.action_watching = data.action_watching
        self.player_dropped = data.player_dropped
        self._item = QuestItem.from_save_data(data.item)
        if not self.symbol and data.item.quest_symbol:
            self.symbol = data.item.quest_symbol
        self._disposed = False
