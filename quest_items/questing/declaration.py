"""Parser for `Item` declaration lines in quest scripts.

Examples:

    Item _gold_ gold
    Item _gold1_ gold range 5 to 25
    Item talisman talisman
    Item _book_ book2 anyInfo 1014 used 1014
    Item _artifact_ artifact Ring_of_Khajiit anyInfo 1014
    Item _I.06_ item class 17 subclass -1
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union
import logging
import re

from quest_items.questing.errors import ParseError

logger = logging.getLogger(__name__)

# Item group or index value meaning "pick one at random".
UNSPECIFIED = -1

_TOKEN = r"[a-zA-Z0-9_.-]+"

# First alternative wins, so the artifact form must come first.
_DECLARATION_PATTERNS = (
    re.compile(rf"(?:Item|item) (?P<symbol>{_TOKEN}) (?P<artifact>artifact) (?P<item_name>{_TOKEN})"),
    re.compile(rf"(?:Item|item) (?P<symbol>{_TOKEN}) (?P<item_name>{_TOKEN})"),
)

_OPTIONS_RE = re.compile(
    r"range (?P<range_low>\d+) to (?P<range_high>\d+)"
    r"|item class (?P<item_class>-?\d+) subclass (?P<item_subclass>-?\d+)"
)


@dataclass(frozen=True)
class ByName:
    name: str


@dataclass(frozen=True)
class ByClass:
    item_class: int
    item_subclass: int = UNSPECIFIED


@dataclass(frozen=True)
class Gold:
    range_low: Optional[int] = None
    range_high: Optional[int] = None

    @property
    def has_range(self) -> bool:
        return self.range_low is not None and self.range_high is not None


ItemSource = Union[ByName, ByClass, Gold]


@dataclass(frozen=True)
class ItemDeclaration:
    symbol: str
    artifact: bool
    source: ItemSource
    line: str


def parse_item_declaration(line: str, gold_keyword: str = "gold") -> ItemDeclaration:
    """Parse one declaration line into an ItemDeclaration or raise ParseError."""
    match = None
    for pattern in _DECLARATION_PATTERNS:
        match = pattern.search(line)
        if match:
            break
    if match is None:
        raise ParseError(line)

    symbol = match.group("symbol")
    item_name = match.group("item_name")
    artifact = bool(match.groupdict().get("artifact"))
    is_gold = item_name == gold_keyword

    range_low: Optional[int] = None
    range_high: Optional[int] = None
    item_class = UNSPECIFIED
    item_subclass = UNSPECIFIED
    class_clause_at_name = False

    # Scan from the name token: in `item class 17 subclass -1` the name starts the clause.
    options_start = match.start("item_name")
    for option in _OPTIONS_RE.finditer(line[options_start:]):
        if option.group("range_low") is not None:
            range_low = int(option.group("range_low"))
        if option.group("range_high") is not None:
            range_high = int(option.group("range_high"))
        # Class and subclass only ever appear together in one clause, led by the name token.
        if option.group("item_class") is not None and option.start() == 0:
            class_clause_at_name = True
            item_class = int(option.group("item_class"))
            item_subclass = int(option.group("item_subclass"))

    if range_low is not None and range_high is not None and range_low > range_high:
        raise ParseError(line, f"range {range_low} to {range_high} is empty")

    source: ItemSource
    if is_gold:
        source = Gold(range_low, range_high)
    elif class_clause_at_name:
        source = ByClass(item_class, item_subclass)
    elif item_name:
        source = ByName(item_name)
    else:
        raise ParseError(line, "no item name, class, or gold amount")

    logger.debug("Parsed item declaration %s -> %s", symbol, source)
    return ItemDeclaration(symbol=symbol, artifact=artifact, source=source, line=line)
