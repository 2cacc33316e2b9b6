"""Persistent JSON config helpers.

Stores custom root names, the last opened catalog, and raw values written
through ``ConfigStore`` (search history).
Malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from loguru import logger
from platformdirs import user_config_dir

from ..tree_model.normalize import normalize

APP_NAME = "archivenav"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except Exception as exc:
        logger.warning("Ignoring unreadable config {}: {}", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is logged and ignored to keep runtime
    behavior non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    except Exception as exc:
        logger.warning("Could not write config {}: {}", CONFIG_PATH, exc)


def load_custom_roots() -> list[str]:
    """Load custom root names, dropping blanks and case/accent duplicates."""
    value = load_config().get("custom_roots")
    if not isinstance(value, list):
        return []
    names: list[str] = []
    seen: set[str] = set()
    for raw in value:
        if not isinstance(raw, str):
            continue
        name = raw.strip()
        key = normalize(name)
        if not name or key in seen:
            continue
        seen.add(key)
        names.append(name)
    return names


def save_custom_roots(names: list[str]) -> None:
    config = load_config()
    config["custom_roots"] = [str(name).strip() for name in names if str(name).strip()]
    save_config(config)


def load_catalog_path() -> Path | None:
    """Load the last opened catalog path, returning ``None`` when unset/invalid."""
    value = load_config().get("catalog_path")
    if not isinstance(value, str) or not value.strip():
        return None
    return Path(value.strip())


def save_catalog_path(path: Path) -> None:
    config = load_config()
    config["catalog_path"] = str(path)
    save_config(config)


class ConfigStore:
    """Key-value adapter over the config file for runtime collaborators."""

    def get(self, key: str) -> object | None:
        return load_config().get(key)

    def set(self, key: str, value: object) -> None:
        config = load_config()
        config[key] = value
        save_config(config)
