"""Errors raised while building and rendering quest resources."""
from __future__ import annotations

from typing import Optional


class QuestResourceError(Exception):
    pass


class ParseError(QuestResourceError):
    def __init__(self, line: str, reason: str = "no declaration pattern matched") -> None:
        self.line = line
        super().__init__(f"Could not create Item from line {line!r}: {reason}")


class ItemLookupError(QuestResourceError, LookupError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Could not find Item name {name} in items table")


class InvalidClassError(QuestResourceError):
    def __init__(self, item_class: int, item_subclass: Optional[int] = None) -> None:
        self.item_class = item_class
        self.item_subclass = item_subclass
        if item_subclass is None:
            super().__init__(f"Tried to create Item with class {item_class}")
        else:
            super().__init__(f"Tried to create Item with class {item_class} subclass {item_subclass}")


class UnsupportedMacroError(QuestResourceError):
    """Not fatal: the resource has no text for this macro."""

    def __init__(self, macro: object, symbol: str = "") -> None:
        self.macro = macro
        self.symbol = symbol
        super().__init__(f"Macro {macro} not supported by resource {symbol or '?'}")
