"""Base class for resources declared in a quest script."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Tuple
import re

from quest_items.questing.errors import UnsupportedMacroError
from quest_items.questing.macros import MacroTypes

if TYPE_CHECKING:
    from quest_items.questing.quest import Quest, QuestMachine

_TAGS_RE = re.compile(r"\b(?P<tag>anyInfo|rumors|used) (?P<id>\d+)")


class QuestResource:
    """Shared state of every quest resource.

    A resource refers back to its quest only through ``quest_uid``; the quest
    itself is looked up in the machine's registry when needed.
    """

    def __init__(self, quest: "Quest") -> None:
        self.machine: "QuestMachine" = quest.machine
        self.quest_uid: int = quest.uid
        self.symbol: str = ""
        self.info_message_id = -1
        self.rumors_message_id = -1
        self.used_message_id = -1

    @property
    def parent_quest(self) -> Optional["Quest"]:
        return self.machine.registry.get(self.quest_uid)

    def set_resource(self, line: str) -> None:
        """Read the message tags every resource type accepts."""
        for match in _TAGS_RE.finditer(line):
            message_id = int(match.group("id"))
            tag = match.group("tag")
            if tag == "anyInfo":
                self.info_message_id = message_id
            elif tag == "rumors":
                self.rumors_message_id = message_id
            else:
                self.used_message_id = message_id

    def expand_macro(self, macro: MacroTypes) -> str:
        raise UnsupportedMacroError(macro, self.symbol)

    def try_expand_macro(self, macro: MacroTypes) -> Tuple[bool, str]:
        try:
            return True, self.expand_macro(macro)
        except UnsupportedMacroError:
            return False, ""

    def dispose(self) -> None:
        pass

    def get_save_data(self) -> Any:
        return None

    def restore_save_data(self, data: Any) -> None:
        pass
