from pathlib import Path

import pytest

from quest_items.config import DEFAULT_ITEMS_TABLE, default_config, load_config


def test_load_project_config():
    cfg = load_config("configs/config.yaml")
    assert cfg.items.gold_keyword == "gold"
    assert cfg.items.magic_items_class == 4
    assert cfg.items.magic_redirect_classes == (2, 3, 10, 14)
    assert cfg.items.placeholder_enchantment[:2] == (1, 87)
    assert len(cfg.items.placeholder_enchantment) == 10
    assert cfg.items.items_table_path == DEFAULT_ITEMS_TABLE
    assert cfg.gold.player_mod_cap == 10
    assert cfg.gold.faction_mod == 50


def test_default_config_matches_yaml_defaults():
    assert default_config().items == load_config("configs/config.yaml").items


def test_missing_section_raises(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("app: {}\nitems: {}\ngold: {}\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_bad_redirect_list_raises(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "app: {}\nitems:\n  magic_redirect_classes: []\ngold: {}\nlogging: {}\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError):
        load_config(str(path))


def test_env_overrides(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("QUEST_ITEMS_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("QUEST_ITEMS_SAVES_DIR", str(tmp_path / "saves"))
    cfg = default_config()
    assert cfg.logging.level == "DEBUG"
    assert cfg.app.saves_dir == tmp_path / "saves"


def test_resolve_paths(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "app:\n  saves_dir: saves\nitems:\n  items_table_path: tables/items.yaml\ngold: {}\nlogging: {}\n",
        encoding="utf-8",
    )
    cfg = load_config(str(path)).resolve_paths(tmp_path)
    assert cfg.app.saves_dir == (tmp_path / "saves").resolve()
    assert cfg.items.items_table_path == (tmp_path / "tables/items.yaml").resolve()
