# pwforge/config.py
"""
Settings for pwforge: defaults for the CLI flags.
Read from $PWFORGE_CONFIG, or %APPDATA%/pwforge/config.json (Windows),
or ~/.pwforge/config.json (fallback). The file is never written.
"""

import os
import json
from typing import Dict, Any

from .exceptions import ConfigError

DEFAULTS: Dict[str, Any] = {
    "length": 16,
    "uppercase": False,
    "digits": False,
    "special": False,
    "copies": 1,
    "banner": True,
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "pwforge")
    return os.path.join(os.path.expanduser("~"), ".pwforge")

def config_path() -> str:
    override = os.getenv("PWFORGE_CONFIG")
    if override:
        return override
    return os.path.join(_appdata_dir(), "config.json")

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"Error loading config file {p}: {e}") from e
    if data is not None and not isinstance(data, dict):
        raise ConfigError(f"Config file {p} must contain a JSON object")
    # merge defaults, ignoring keys we don't know
    out = DEFAULTS.copy()
    for key, value in (data or {}).items():
        if key not in DEFAULTS:
            continue
        _check_type(p, key, value)
        out[key] = value
    return out

def _check_type(path: str, key: str, value: Any) -> None:
    expected = type(DEFAULTS[key])
    # bool is a subclass of int, so compare exact types
    if type(value) is not expected:
        raise ConfigError(
            f"Config file {path}: '{key}' must be {expected.__name__}, got {type(value).__name__}"
        )
