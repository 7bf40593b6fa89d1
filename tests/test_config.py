import json

import pytest

from pwforge.config import DEFAULTS, config_path, load_config
from pwforge.exceptions import ConfigError


def test_missing_file_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv("PWFORGE_CONFIG", str(tmp_path / "nope.json"))
    assert load_config() == DEFAULTS


def test_user_values_merged_over_defaults(tmp_path, monkeypatch):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"length": 20, "uppercase": True, "bogus": 1}), encoding="utf-8")
    monkeypatch.setenv("PWFORGE_CONFIG", str(p))
    cfg = load_config()
    assert cfg["length"] == 20
    assert cfg["uppercase"] is True
    assert cfg["digits"] is False
    assert "bogus" not in cfg


def test_invalid_json_raises(tmp_path, monkeypatch):
    p = tmp_path / "config.json"
    p.write_text("{not json", encoding="utf-8")
    monkeypatch.setenv("PWFORGE_CONFIG", str(p))
    with pytest.raises(ConfigError):
        load_config()


def test_non_object_raises(tmp_path, monkeypatch):
    p = tmp_path / "config.json"
    p.write_text("[1, 2]", encoding="utf-8")
    monkeypatch.setenv("PWFORGE_CONFIG", str(p))
    with pytest.raises(ConfigError):
        load_config()


def test_default_location(tmp_path, monkeypatch):
    monkeypatch.delenv("PWFORGE_CONFIG", raising=False)
    monkeypatch.setenv("APPDATA", str(tmp_path))
    assert config_path() == str(tmp_path / "pwforge" / "config.json")


@pytest.mark.parametrize(
    "settings",
    [
        {"copies": None},
        {"length": 12.5},
        {"length": [1]},
        {"length": True},
        {"uppercase": "yes"},
        {"banner": 1},
    ],
)
def test_wrong_value_types_raise(settings, tmp_path, monkeypatch):
    p = tmp_path / "config.json"
    p.write_text(json.dumps(settings), encoding="utf-8")
    monkeypatch.setenv("PWFORGE_CONFIG", str(p))
    with pytest.raises(ConfigError):
        load_config()
