"""CLI: build quest item resources from declaration lines and print them."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from quest_items.config import AppConfig, default_config, load_config
from quest_items.engine.player import PlayerState
from quest_items.logging_utils import configure_logging
from quest_items.persistence.store import default_saves_root, save_quest_resources
from quest_items.questing.errors import QuestResourceError
from quest_items.questing.item import Item
from quest_items.questing.macros import MacroTypes
from quest_items.questing.quest import QuestMachine
from quest_items.questing.script import load_item_resources


def _describe(item: Item) -> str:
    quest_item = item.inventory_item
    ok, name = item.try_expand_macro(MacroTypes.NAME_MACRO_1)
    return (
        f"{item.symbol}: class={int(quest_item.item_group)} subclass={quest_item.group_index} "
        f"stack={quest_item.stack_count} name={name if ok else quest_item.item_name}"
        + (" artifact" if item.artifact else "")
        + (" enchanted" if quest_item.is_enchanted else "")
    )


def _load_cfg(path: Optional[str]) -> AppConfig:
    if path and Path(path).exists():
        return load_config(path)
    return default_config()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="quest-items")
    parser.add_argument("--config", default="configs/config.yaml")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--level", type=int, default=1)
    parser.add_argument("--region-price", type=int, default=0)
    parser.add_argument("--line", action="append", default=[])
    parser.add_argument("--script", default=None)
    parser.add_argument("--quest-name", default="cli")
    parser.add_argument("--save", default=None, metavar="SESSION")
    args = parser.parse_args(argv)

    cfg = _load_cfg(args.config)
    configure_logging(cfg)

    player = PlayerState(level=args.level, region_price_adjustments={0: args.region_price})
    machine = QuestMachine.from_config(cfg, seed=args.seed, player=player)
    quest = machine.create_quest(args.quest_name)

    lines = list(args.line)
    if args.script:
        lines.extend(Path(args.script).read_text(encoding="utf-8").splitlines())
    if not lines:
        parser.error("provide --line or --script")

    try:
        items = load_item_resources(quest, lines)
    except QuestResourceError as exc:
        print(f"error: {exc}")
        return 1

    for item in items:
        print(_describe(item))

    if args.save:
        path = save_quest_resources(args.save, quest, default_saves_root(cfg))
        print(f"saved: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
