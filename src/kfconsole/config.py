"""
Configuration loading for kfconsole.

Reads ~/.kfconsole/config.yaml (or $KFCONSOLE_DIR/config.yaml). A missing
or malformed file is treated as empty so the console always starts with
defaults.
"""

import os
from pathlib import Path
from typing import Optional

import yaml


def get_kfconsole_dir() -> Path:
    """Base directory for config, records and logs."""
    override = os.environ.get("KFCONSOLE_DIR")
    if override:
        return Path(override)
    return Path.home() / ".kfconsole"


CONFIG_PATH = get_kfconsole_dir() / "config.yaml"

DEFAULT_KUBECTL = "kubectl"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_REFRESH_SECONDS = 2.0


def load_config() -> dict:
    """Load the config file.

    Returns:
        Config dict, or {} if the file is missing, invalid, or not a mapping
    """
    if not CONFIG_PATH.exists():
        return {}
    try:
        with open(CONFIG_PATH) as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, OSError):
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def save_config(data: dict) -> None:
    """Write the config dict as YAML, creating parent directories."""
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    with open(CONFIG_PATH, "w") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)


def get_store_path() -> Path:
    """Path of the JSON record store."""
    configured = load_config().get("store_path")
    if configured:
        return Path(os.path.expanduser(str(configured)))
    return CONFIG_PATH.parent / "records.json"


def get_kubectl_command() -> str:
    return str(load_config().get("kubectl") or DEFAULT_KUBECTL)


def get_log_level() -> str:
    return str(load_config().get("log_level") or DEFAULT_LOG_LEVEL).upper()


def get_log_file() -> Optional[Path]:
    """Optional file the TUI also writes its log to."""
    configured = load_config().get("log_file")
    if not configured:
        return None
    return Path(os.path.expanduser(str(configured)))


def get_refresh_seconds() -> float:
    """How often the TUI reloads records and forward states."""
    value = load_config().get("refresh_seconds", DEFAULT_REFRESH_SECONDS)
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        return DEFAULT_REFRESH_SECONDS
    return seconds if seconds > 0 else DEFAULT_REFRESH_SECONDS
