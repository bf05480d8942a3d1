"""Dialogue topics registered by quest resources."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple
import logging

if TYPE_CHECKING:
    from quest_items.questing.resource import QuestResource

logger = logging.getLogger(__name__)


class QuestInfoResourceType(str, Enum):
    THING = "thing"
    PERSON = "person"
    LOCATION = "location"


@dataclass
class QuestTopic:
    quest_uid: int
    symbol: str
    display_name: str
    kind: QuestInfoResourceType
    # Raw token variants; macros are expanded when the topic is spoken.
    info_variants: List[List[str]] = field(default_factory=list)
    rumor_variants: List[List[str]] = field(default_factory=list)


class TalkManager:
    def __init__(self) -> None:
        self._topics: Dict[Tuple[int, str], QuestTopic] = {}

    def add_quest_topic_with_info_and_rumors(
        self,
        quest_uid: int,
        resource: "QuestResource",
        display_name: str,
        kind: QuestInfoResourceType,
        info_variants: List[List[str]],
        rumor_variants: List[List[str]],
    ) -> QuestTopic:
        topic = QuestTopic(
            quest_uid=quest_uid,
            symbol=resource.symbol,
            display_name=display_name,
            kind=kind,
            info_variants=[list(v) for v in info_variants],
            rumor_variants=[list(v) for v in rumor_variants],
        )
        self._topics[(quest_uid, resource.symbol)] = topic
        logger.debug(
            "Registered %s topic %r for quest %s (%d info, %d rumors)",
            kind.value,
            display_name,
            quest_uid,
            len(topic.info_variants),
            len(topic.rumor_variants),
        )
        return topic

    def get_topic(self, quest_uid: int, symbol: str) -> Optional[QuestTopic]:
        return self._topics.get((quest_uid, symbol))

    def topics_for_quest(self, quest_uid: int) -> List[QuestTopic]:
        return [topic for (uid, _symbol), topic in self._topics.items() if uid == quest_uid]

    def remove_quest_topics(self, quest_uid: int) -> int:
        keys = [key for key in self._topics if key[0] == quest_uid]
        for key in keys:
            del self._topics[key]
        return len(keys)
