"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

_DEFAULT_TURN_LOG_MODE = "full"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "MiniRPG"
        return Path.home() / "MiniRPG"
    return Path.home() / ".config" / "minirpg"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def get_history_path() -> Path:
    """Return the per-user ranked history file."""
    return get_user_data_dir() / "history.json"


def _normalize_turn_log_mode(value: object) -> str:
    return "summary" if value == "summary" else _DEFAULT_TURN_LOG_MODE


def load_config(path: Path | None = None) -> Dict[str, str]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {"turn_log_mode": _DEFAULT_TURN_LOG_MODE}
    except (OSError, ValueError):
        return {"turn_log_mode": _DEFAULT_TURN_LOG_MODE}
    if not isinstance(raw, dict):
        return {"turn_log_mode": _DEFAULT_TURN_LOG_MODE}
    return {"turn_log_mode": _normalize_turn_log_mode(raw.get("turn_log_mode"))}


def save_config(config: Dict[str, str], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"turn_log_mode": _normalize_turn_log_mode(config.get("turn_log_mode"))}
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
