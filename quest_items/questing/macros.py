"""Macro tokens embedded in quest text, e.g. `_gold_` or `=artifact_`."""
from __future__ import annotations

from enum import Enum
import re


class MacroTypes(str, Enum):
    NAME_MACRO_1 = "name1"
    NAME_MACRO_2 = "name2"
    NAME_MACRO_3 = "name3"
    NAME_MACRO_4 = "name4"
    DETAILS_MACRO = "details"
    FACTION_MACRO = "faction"


_PREFIX_TO_MACRO = {
    "_": MacroTypes.NAME_MACRO_1,
    "__": MacroTypes.NAME_MACRO_2,
    "___": MacroTypes.NAME_MACRO_3,
    "____": MacroTypes.NAME_MACRO_4,
    "=": MacroTypes.DETAILS_MACRO,
    "==": MacroTypes.FACTION_MACRO,
}

_MACRO_RE = re.compile(
    r"(?<![A-Za-z0-9_=.])(?P<prefix>_{1,4}|={1,2})(?P<name>[A-Za-z0-9][A-Za-z0-9_.-]*?)_(?![A-Za-z0-9])"
)


def symbol_base_name(symbol: str) -> str:
    """Strip macro decoration: `_gold1_` -> `gold1`."""
    return symbol.strip("_=")


def replace_macros(text: str, render) -> str:
    """Replace macro tokens using render(macro, base_name) -> str | None; None keeps the token."""

    def _sub(match: re.Match) -> str:
        macro = _PREFIX_TO_MACRO[match.group("prefix")]
        rendered = render(macro, match.group("name"))
        return match.group(0) if rendered is None else rendered

    return _MACRO_RE.sub(_sub, text)
