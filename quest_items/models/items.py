"""Inventory item contracts: item groups, quest items, and their save payload."""
from __future__ import annotations

from enum import IntEnum
from typing import List, Literal, Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from quest_items.world.content.item_templates import variant_count, variant_name


class ItemGroups(IntEnum):
    DRUGS = 0
    USELESS_ITEMS_1 = 1
    ARMOR = 2
    WEAPONS = 3
    MAGIC_ITEMS = 4
    ARTIFACTS = 5
    MENS_CLOTHING = 6
    BOOKS = 7
    FURNITURE = 8
    USELESS_ITEMS_2 = 9
    RELIGIOUS_ITEMS = 10
    MAPS = 11
    WOMENS_CLOTHING = 12
    PAINTINGS = 13
    GEMS = 14
    PLANT_INGREDIENTS_1 = 15
    PLANT_INGREDIENTS_2 = 16
    CREATURE_INGREDIENTS_1 = 17
    CREATURE_INGREDIENTS_2 = 18
    CREATURE_INGREDIENTS_3 = 19
    MISC_INGREDIENTS_1 = 20
    METAL_INGREDIENTS = 21
    MISC_INGREDIENTS_2 = 22
    TRANSPORTATION = 23
    DEEDS = 24
    JEWELLERY = 25
    QUEST_ITEMS = 26
    MISC_ITEMS = 27
    CURRENCY = 28


def _new_item_uid() -> str:
    return uuid.uuid4().hex[:12]


class ItemData(BaseModel):
    """Versioned save payload of a single item."""

    model_config = ConfigDict(extra="forbid")

    version: Literal["v1"] = "v1"
    uid: str
    item_group: int
    group_index: int
    stack_count: int = Field(1, ge=1)
    legacy_magic: Optional[List[int]] = None
    quest_item: bool = False
    quest_uid: Optional[int] = None
    quest_symbol: Optional[str] = None


class QuestItem(BaseModel):
    """Concrete inventory object, optionally tagged with a (quest_uid, symbol) link."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    uid: str = Field(default_factory=_new_item_uid)
    item_group: ItemGroups
    group_index: int = Field(..., ge=0)
    stack_count: int = Field(1, ge=1)
    legacy_magic: Optional[List[int]] = None
    quest_item: bool = False
    quest_uid: Optional[int] = None
    quest_symbol: Optional[str] = None

    @field_validator("legacy_magic", mode="before")
    @classmethod
    def _copy_magic(cls, value):
        if value is None:
            return None
        return [int(v) for v in value]

    @model_validator(mode="after")
    def _validate_variant(self) -> "QuestItem":
        if self.group_index >= variant_count(self.item_group):
            raise ValueError(
                f"group_index {self.group_index} out of range for item group {int(self.item_group)}"
            )
        return self

    @property
    def is_quest_item(self) -> bool:
        return self.quest_item

    @property
    def is_enchanted(self) -> bool:
        return bool(self.legacy_magic)

    @property
    def is_gold_pieces(self) -> bool:
        return self.item_group == ItemGroups.CURRENCY and self.group_index == 0

    @property
    def short_name(self) -> str:
        return variant_name(self.item_group, self.group_index)

    @property
    def long_name(self) -> str:
        if self.is_enchanted:
            return f"Magic {self.short_name}"
        return self.short_name

    @property
    def item_name(self) -> str:
        return self.long_name

    def link_quest_item(self, quest_uid: int, symbol: str) -> None:
        self.quest_item = True
        self.quest_uid = int(quest_uid)
        self.quest_symbol = symbol

    def unlink_quest_item(self) -> None:
        """Clear the quest marker, e.g. when a quest hands the item over for good."""
        self.quest_item = False
        self.quest_uid = None
        self.quest_symbol = None

    def get_save_data(self) -> ItemData:
        return ItemData(
            uid=self.uid,
            item_group=int(self.item_group),
            group_index=self.group_index,
            stack_count=self.stack_count,
            legacy_magic=list(self.legacy_magic) if self.legacy_magic is not None else None,
            quest_item=self.quest_item,
            quest_uid=self.quest_uid,
            quest_symbol=self.quest_symbol,
        )

    @classmethod
    def from_save_data(cls, data: ItemData) -> "QuestItem":
        return cls(
            uid=data.uid,
            item_group=ItemGroups(data.item_group),
            group_index=data.group_index,
            stack_count=data.stack_count,
            legacy_magic=data.legacy_magic,
            quest_item=data.quest_item,
            quest_uid=data.quest_uid,
            quest_symbol=data.quest_symbol,
        )
