from pathlib import Path

import pytest
from pydantic import ValidationError

from quest_items.models.items import ItemGroups, QuestItem
from quest_items.world.items_table import ItemsTable, load_items_table


def test_quest_item_names_and_flags():
    gold = QuestItem(item_group=ItemGroups.CURRENCY, group_index=0, stack_count=30)
    assert gold.is_gold_pieces is True
    assert gold.short_name == "Gold Pieces"
    assert gold.is_quest_item is False
    credit = QuestItem(item_group=ItemGroups.CURRENCY, group_index=1)
    assert credit.is_gold_pieces is False


def test_link_and_unlink():
    item = QuestItem(item_group=ItemGroups.GEMS, group_index=0)
    item.link_quest_item(5, "_ruby_")
    assert (item.is_quest_item, item.quest_uid, item.quest_symbol) == (True, 5, "_ruby_")
    item.unlink_quest_item()
    assert (item.is_quest_item, item.quest_uid, item.quest_symbol) == (False, None, None)


def test_invalid_variant_and_stack_rejected():
    with pytest.raises(ValidationError):
        QuestItem(item_group=ItemGroups.CURRENCY, group_index=9)
    item = QuestItem(item_group=ItemGroups.CURRENCY, group_index=0)
    with pytest.raises(ValidationError):
        item.stack_count = 0


def test_items_table_lookup():
    table = ItemsTable({"talisman": {"p1": 9, "p2": "3"}})
    assert table.has_entry("talisman")
    assert not table.has_entry("Talisman")
    assert table.get_param("p1", "talisman") == 9
    assert table.get_param("p2", "talisman") == 3
    with pytest.raises(KeyError):
        table.get_param("p3", "talisman")
    with pytest.raises(KeyError):
        table.get_param("p1", "missing")


def test_items_table_rejects_bad_rows():
    with pytest.raises(ValueError):
        ItemsTable({"x": {"p1": 1}})
    with pytest.raises(ValueError):
        ItemsTable({"x": {"p1": "one", "p2": 2}})


def test_load_items_table(tmp_path: Path):
    path = tmp_path / "items.yaml"
    path.write_text("items:\n  ruby: {p1: 14, p2: 0}\n", encoding="utf-8")
    table = load_items_table(path)
    assert len(table) == 1
    assert table.get_param("p1", "ruby") == 14
    path.write_text("rows: []\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_items_table(path)
