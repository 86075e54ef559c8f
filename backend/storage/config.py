"""Global app configuration (narrative language, CORS origins, starting stats)."""

import json
from pathlib import Path
from typing import Any

from .core import data_dir

_CONFIG_DEFAULTS: dict[str, Any] = {
    "narrative_language": "pt",
    "cors_origins": ["*"],
    "starting_area": "Vila Costeira",
    "starting_health": 100,
}


def _config_path() -> Path:
    return data_dir() / "config.json"


def get_config() -> dict[str, Any]:
    """Read config, returning defaults merged with stored values."""
    config: dict[str, Any] = {
        "narrative_language": _CONFIG_DEFAULTS["narrative_language"],
        "cors_origins": list(_CONFIG_DEFAULTS["cors_origins"]),
        "starting_area": _CONFIG_DEFAULTS["starting_area"],
        "starting_health": _CONFIG_DEFAULTS["starting_health"],
    }
    path = _config_path()
    if path.is_file():
        stored = json.loads(path.read_text(encoding="utf-8"))
        for key in _CONFIG_DEFAULTS:
            if key in stored:
                config[key] = stored[key]
    return config


def update_config(fields: dict[str, Any]) -> dict[str, Any]:
    """Merge known fields into config and persist. Unknown keys are dropped. Returns full config."""
    config = get_config()
    for key, value in fields.items():
        if key in _CONFIG_DEFAULTS:
            config[key] = value
    _config_path().write_text(json.dumps(config, indent=2, ensure_ascii=False), encoding="utf-8")
    return config
