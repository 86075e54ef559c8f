"""Tests for config storage: defaults, partial merge, unknown keys."""

import json

from backend import storage


def test_get_config_empty():
    """Returns defaults when no config file exists."""
    config = storage.get_config()
    assert config == {
        "narrative_language": "pt",
        "cors_origins": ["*"],
        "starting_area": "Vila Costeira",
        "starting_health": 100,
    }


def test_update_config_partial():
    """Updating one key keeps the others."""
    storage.update_config({"narrative_language": "en"})
    storage.update_config({"starting_health": 120})

    config = storage.get_config()
    assert config["narrative_language"] == "en"
    assert config["starting_health"] == 120
    assert config["cors_origins"] == ["*"]


def test_update_config_ignores_unknown_keys():
    result = storage.update_config({"difficulty": "hard"})
    assert "difficulty" not in result
    stored = json.loads((storage.data_dir() / "config.json").read_text())
    assert "difficulty" not in stored


def test_stored_values_override_defaults():
    (storage.data_dir() / "config.json").write_text(
        json.dumps({"cors_origins": ["http://localhost:5173"]})
    )
    config = storage.get_config()
    assert config["cors_origins"] == ["http://localhost:5173"]
    assert config["narrative_language"] == "pt"


def test_defaults_not_shared_between_calls():
    storage.get_config()["cors_origins"].append("http://evil")
    assert storage.get_config()["cors_origins"] == ["*"]
