"""Persistence helpers for quest item resources in save sessions."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional
import json
import logging
import os
import re
from datetime import datetime, timezone
import secrets

from quest_items.config import AppConfig
from quest_items.questing.item import Item, ItemSaveData
from quest_items.questing.quest import Quest

logger = logging.getLogger(__name__)

SAVE_VERSION = "v1"

_SAFE_SESSION_RE = re.compile(r"^[A-Za-z0-9_-]+$")


def validate_session_id(session_id: str) -> None:
    """Validate session_id to prevent path traversal."""
    if not session_id:
        raise ValueError("session_id must not be empty")
    if "/" in session_id or "\\" in session_id:
        raise ValueError("session_id must not contain path separators")
    if ".." in session_id:
        raise ValueError("session_id must not contain '..'")
    if not _SAFE_SESSION_RE.match(session_id):
        raise ValueError("session_id contains invalid characters")


def generate_session_id() -> str:
    """Generate a filesystem-safe session id: YYYYMMDD_HHMMSS_<8hex>."""
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    suffix = secrets.token_hex(4)
    return f"{timestamp}_{suffix}"


def default_saves_root(config: Optional[AppConfig]) -> Path:
    """Resolve saves root from config or return data/saves."""
    if config is None:
        return Path("data/saves")
    return config.app.saves_dir


def get_session_dir(session_id: str, saves_root: Path) -> Path:
    validate_session_id(session_id)
    return saves_root / session_id


def ensure_session_dir(session_id: str, saves_root: Path) -> Path:
    validate_session_id(session_id)
    path = get_session_dir(session_id, saves_root)
    path.mkdir(parents=True, exist_ok=True)
    return path


def quest_save_path(session_id: str, quest_uid: int, saves_root: Path) -> Path:
    return get_session_dir(session_id, saves_root) / f"quest_{int(quest_uid)}.json"


def build_quest_record(quest: Quest) -> Dict[str, Any]:
    resources: Dict[str, Any] = {}
    for resource in quest.resources():
        if not isinstance(resource, Item):
            continue
        resources[resource.symbol] = {"type": "item", "data": resource.get_save_data().model_dump()}
    return {
        "version": SAVE_VERSION,
        "quest_uid": quest.uid,
        "quest_name": quest.name,
        "resources": resources,
    }


def save_quest_resources(session_id: str, quest: Quest, saves_root: Path) -> Path:
    """Atomically write the quest's item resources to quest_<uid>.json and return its path."""
    session_dir = ensure_session_dir(session_id, saves_root)
    target = quest_save_path(session_id, quest.uid, saves_root)
    tmp = session_dir / f"{target.name}.tmp"
    record = build_quest_record(quest)
    tmp.write_text(json.dumps(record, ensure_ascii=False, indent=2), encoding="utf-8")
    os.replace(tmp, target)
    logger.info("Saved %d resources of quest %s to %s", len(record["resources"]), quest.uid, target)
    return target


def restore_quest_record(quest: Quest, record: Any) -> List[Item]:
    """Rebuild item resources from a saved record; the declaration parser is not used."""
    if not isinstance(record, dict):
        raise ValueError(f"Quest save record must be a JSON object, got {type(record).__name__}")
    if record.get("version") != SAVE_VERSION:
        raise ValueError(f"Unsupported quest save version: {record.get('version')}")
    resources = record.get("resources")
    if not isinstance(resources, dict):
        raise ValueError("Quest save record has no resources mapping")
    restored: List[Item] = []
    for symbol, entry in resources.items():
        if not isinstance(entry, dict) or entry.get("type") != "item":
            logger.warning("Skipping unsupported saved resource %s", symbol)
            continue
        data = entry.get("data")
        if data is None:
            logger.warning("Skipping saved resource %s with no data", symbol)
            continue
        # A bad payload must leave the quest unchanged.
        payload = ItemSaveData.model_validate(data)
        resource = quest.get_resource(symbol)
        if resource is None:
            resource = Item(quest)
            resource.symbol = symbol
            quest.add_resource(resource)
        if not isinstance(resource, Item):
            raise ValueError(f"Saved resource {symbol} is not an item in quest {quest.uid}")
        resource.restore_save_data(payload)
        restored.append(resource)
    return restored


def load_quest_resources(session_id: str, quest: Quest, saves_root: Path) -> List[Item]:
    """Restore item resources of `quest` from quest_<uid>.json. Raise FileNotFoundError if missing."""
    path = quest_save_path(session_id, quest.uid, saves_root)
    if not path.exists():
        raise FileNotFoundError(f"quest save not found for session_id={session_id} quest={quest.uid}")
    try:
        record = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path.name} is invalid JSON for session_id={session_id}") from exc
    restored = restore_quest_record(quest, record)
    logger.info("Restored %d resources of quest %s", len(restored), quest.uid)
    return restored
