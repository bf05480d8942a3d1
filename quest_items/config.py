"""Configuration loader and typed config objects."""
from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Tuple
import os
import yaml


DEFAULT_ITEMS_TABLE = Path(__file__).resolve().parent / "data" / "items_table.yaml"

# Stand-ins until quests can request real magic items.
DEFAULT_MAGIC_REDIRECT_CLASSES = (2, 3, 10, 14)
DEFAULT_PLACEHOLDER_ENCHANTMENT = (1, 87, 65535, 65535, 65535, 65535, 65535, 65535, 65535, 65535)


@dataclass(frozen=True)
class AppSection:
    name: str
    env: str
    data_dir: Path
    saves_dir: Path


@dataclass(frozen=True)
class ItemsSection:
    items_table_path: Path
    gold_keyword: str
    magic_items_class: int
    magic_redirect_classes: Tuple[int, ...]
    placeholder_enchantment: Tuple[int, ...]


@dataclass(frozen=True)
class GoldSection:
    player_mod_cap: int
    faction_mod: int


@dataclass(frozen=True)
class LoggingSection:
    level: str
    fmt: str


@dataclass(frozen=True)
class AppConfig:
    app: AppSection
    items: ItemsSection
    gold: GoldSection
    logging: LoggingSection

    def resolve_paths(self, project_root: Path) -> "AppConfig":
        """Return a copy with app and table paths resolved to absolute paths."""
        app = self.app
        resolved = replace(
            app,
            data_dir=(project_root / app.data_dir).resolve() if not app.data_dir.is_absolute() else app.data_dir,
            saves_dir=(project_root / app.saves_dir).resolve() if not app.saves_dir.is_absolute() else app.saves_dir,
        )
        table = self.items.items_table_path
        items = replace(
            self.items,
            items_table_path=(project_root / table).resolve() if not table.is_absolute() else table,
        )
        return replace(self, app=resolved, items=items)


def default_config() -> AppConfig:
    """Config with built-in defaults, used when no YAML file is given."""
    return _build_config({"app": {}, "items": {}, "gold": {}, "logging": {}})


def _load_env() -> None:
    """Load .env if python-dotenv is available. No-op if missing."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    if Path(".env").exists():
        load_dotenv(dotenv_path=Path(".env"), override=False)


def _require_section(cfg: Dict[str, Any], key: str) -> Dict[str, Any]:
    if key not in cfg or not isinstance(cfg[key], dict):
        raise ValueError(f"Missing or invalid config section: {key}")
    return cfg[key]


def _int_tuple(value: Any, default: Tuple[int, ...], key: str) -> Tuple[int, ...]:
    if value is None:
        return default
    if not isinstance(value, (list, tuple)) or not value:
        raise ValueError(f"Config value {key} must be a non-empty list of integers")
    return tuple(int(v) for v in value)


def load_config(config_path: str = "configs/config.yaml") -> AppConfig:
    """Load YAML config, apply env overrides, return typed AppConfig."""
    _load_env()

    path = Path(config_path)
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping")

    sections = {key: _require_section(data, key) for key in ("app", "items", "gold", "logging")}
    return _build_config(sections)


def _build_config(data: Dict[str, Dict[str, Any]]) -> AppConfig:
    app_cfg = data["app"]
    items_cfg = data["items"]
    gold_cfg = data["gold"]
    logging_cfg = data["logging"]

    # Environment overrides
    env_saves_dir = os.getenv("QUEST_ITEMS_SAVES_DIR", "")
    env_log_level = os.getenv("QUEST_ITEMS_LOG_LEVEL", "")

    app = AppSection(
        name=str(app_cfg.get("name", "quest_items")),
        env=str(app_cfg.get("env", "dev")),
        data_dir=Path(str(app_cfg.get("data_dir", "data"))),
        saves_dir=Path(env_saves_dir or str(app_cfg.get("saves_dir", "data/saves"))),
    )

    table_path = items_cfg.get("items_table_path")
    items = ItemsSection(
        items_table_path=Path(str(table_path)) if table_path else DEFAULT_ITEMS_TABLE,
        gold_keyword=str(items_cfg.get("gold_keyword", "gold")),
        magic_items_class=int(items_cfg.get("magic_items_class", 4)),
        magic_redirect_classes=_int_tuple(
            items_cfg.get("magic_redirect_classes"),
            DEFAULT_MAGIC_REDIRECT_CLASSES,
            "items.magic_redirect_classes",
        ),
        placeholder_enchantment=_int_tuple(
            items_cfg.get("placeholder_enchantment"),
            DEFAULT_PLACEHOLDER_ENCHANTMENT,
            "items.placeholder_enchantment",
        ),
    )

    gold = GoldSection(
        player_mod_cap=int(gold_cfg.get("player_mod_cap", 10)),
        faction_mod=int(gold_cfg.get("faction_mod", 50)),
    )

    logging = LoggingSection(
        level=env_log_level or str(logging_cfg.get("level", "INFO")),
        fmt=str(logging_cfg.get("fmt", "%(asctime)s %(levelname)s %(name)s: %(message)s")),
    )

    return AppConfig(app=app, items=items, gold=gold, logging=logging)
