"""Quests, their messages, and the machine context shared by quest resources."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional
import logging

from quest_items.config import AppConfig, default_config
from quest_items.engine.player import PlayerState
from quest_items.engine.random_source import RandomSource, SeededRandom
from quest_items.questing.errors import UnsupportedMacroError
from quest_items.questing.macros import MacroTypes, replace_macros, symbol_base_name
from quest_items.questing.talk import TalkManager
from quest_items.world.items_table import ItemsTable, load_items_table

if TYPE_CHECKING:
    from quest_items.questing.resource import QuestResource

logger = logging.getLogger(__name__)


@dataclass
class Message:
    """Quest message with one or more alternative text variants (token lists)."""

    message_id: int
    variants: List[List[str]] = field(default_factory=list)

    @property
    def variant_count(self) -> int:
        return len(self.variants)

    def get_text_tokens_by_variant(self, index: int) -> List[str]:
        return list(self.variants[index])


class Quest:
    def __init__(self, uid: int, name: str, machine: "QuestMachine") -> None:
        self.uid = uid
        self.name = name
        self.machine = machine
        self.messages: Dict[int, Message] = {}
        self._resources: Dict[str, "QuestResource"] = {}
        self.disposed = False

    def add_message(self, message_id: int, variants: List[List[str]]) -> Message:
        message = Message(message_id=message_id, variants=[list(v) for v in variants])
        self.messages[message_id] = message
        return message

    def get_message(self, message_id: int) -> Optional[Message]:
        return self.messages.get(message_id)

    def add_resource(self, resource: "QuestResource") -> None:
        if not resource.symbol:
            raise ValueError("Quest resource has no symbol")
        if resource.symbol in self._resources:
            raise ValueError(f"Duplicate resource symbol in quest {self.uid}: {resource.symbol}")
        self._resources[resource.symbol] = resource

    def has_resource(self, symbol: str) -> bool:
        return symbol in self._resources

    def get_resource(self, symbol: str) -> Optional["QuestResource"]:
        resource = self._resources.get(symbol)
        if resource is not None:
            return resource
        base = symbol_base_name(symbol)
        for candidate in self._resources.values():
            if symbol_base_name(candidate.symbol) == base:
                return candidate
        return None

    def resources(self) -> Iterator["QuestResource"]:
        return iter(list(self._resources.values()))

    def expand_text(self, text: str) -> str:
        """Expand resource macros; unknown symbols and unsupported macros stay as written."""

        def _render(macro: MacroTypes, base_name: str) -> Optional[str]:
            resource = self.get_resource(base_name)
            if resource is None:
                return None
            try:
                return resource.expand_macro(macro)
            except UnsupportedMacroError:
                logger.debug("Macro %s not supported by %s", macro.value, resource.symbol)
                return None

        return replace_macros(text, _render)

    def render_message(self, message_id: int, variant: int = 0) -> str:
        message = self.get_message(message_id)
        if message is None:
            raise KeyError(f"Quest {self.uid} has no message {message_id}")
        return self.expand_text(" ".join(message.get_text_tokens_by_variant(variant)))

    def dispose(self) -> None:
        if self.disposed:
            return
        for resource in self.resources():
            resource.dispose()
        removed = self.machine.talk.remove_quest_topics(self.uid)
        self.disposed = True
        logger.info("Disposed quest %s (%s), removed %d topics", self.uid, self.name, removed)


class QuestRegistry:
    """Quest lookup by uid; resources refer to quests through it."""

    def __init__(self) -> None:
        self._quests: Dict[int, Quest] = {}
        self._next_uid = 1

    def next_uid(self) -> int:
        uid = self._next_uid
        self._next_uid += 1
        return uid

    def register(self, quest: Quest) -> None:
        if quest.uid in self._quests:
            raise ValueError(f"Quest uid already registered: {quest.uid}")
        self._quests[quest.uid] = quest
        self._next_uid = max(self._next_uid, quest.uid + 1)

    def get(self, uid: int) -> Optional[Quest]:
        return self._quests.get(uid)

    def remove(self, uid: int) -> Optional[Quest]:
        return self._quests.pop(uid, None)

    def __len__(self) -> int:
        return len(self._quests)


@dataclass
class QuestMachine:
    config: AppConfig
    items_table: ItemsTable
    random: RandomSource
    player: PlayerState = field(default_factory=PlayerState)
    talk: TalkManager = field(default_factory=TalkManager)
    registry: QuestRegistry = field(default_factory=QuestRegistry)

    @classmethod
    def from_config(
        cls,
        cfg: Optional[AppConfig] = None,
        *,
        seed: Optional[int] = None,
        player: Optional[PlayerState] = None,
    ) -> "QuestMachine":
        cfg = cfg or default_config()
        return cls(
            config=cfg,
            items_table=load_items_table(cfg.items.items_table_path),
            random=SeededRandom(seed),
            player=player or PlayerState(),
        )

    def create_quest(self, name: str, uid: Optional[int] = None) -> Quest:
        quest = Quest(uid if uid is not None else self.registry.next_uid(), name, self)
        self.registry.register(quest)
        return quest

    def tear_down_quest(self, uid: int) -> None:
        quest = self.registry.remove(uid)
        if quest is not None:
            quest.dispose()
