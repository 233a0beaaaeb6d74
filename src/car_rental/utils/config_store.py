"""Shared JSON configuration storage."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from car_rental.config import DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class StoreSettings:
    """Persisted settings for the record store."""

    database_path: Optional[Path] = None
    log_level: str = DEFAULT_LOG_LEVEL


def load_config_data(config_path: Path) -> dict[str, Any]:
    """Load configuration JSON data from disk."""
    if not config_path.exists():
        return {}
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return {}
    if isinstance(data, dict):
        return data
    return {}


def save_config_data(config_path: Path, data: dict[str, Any]) -> None:
    """Persist configuration JSON data to disk."""
    config_path.write_text(
        json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8"
    )


def load_store_settings(config_path: Path) -> StoreSettings:
    """Load store settings from disk, falling back to defaults."""
    data = load_config_data(config_path)
    raw_path = data.get("database_path")
    raw_level = data.get("log_level")
    return StoreSettings(
        database_path=Path(raw_path) if isinstance(raw_path, str) and raw_path else None,
        log_level=raw_level if isinstance(raw_level, str) and raw_level else DEFAULT_LOG_LEVEL,
    )


def save_store_settings(config_path: Path, settings: StoreSettings) -> None:
    """Save store settings to disk, keeping unrelated keys."""
    payload = load_config_data(config_path)
    payload["database_path"] = (
        str(settings.database_path) if settings.database_path else None
    )
    payload["log_level"] = settings.log_level
    save_config_data(config_path, payload)
