import json
import os

from chart_model import LINE, VARIANTS

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "termchart")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
DEFAULT_VARIANT = LINE
LOG_FILE_DEFAULT = None
LOG_LEVEL_DEFAULT = "WARNING"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def load_config():
    cfg = {
        "DEFAULT_VARIANT": DEFAULT_VARIANT,
        "LOG_FILE": LOG_FILE_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return cfg
    if not isinstance(data, dict):
        return cfg

    variant = data.get("default_variant")
    if variant in VARIANTS:
        cfg["DEFAULT_VARIANT"] = variant

    log_file = data.get("log_file")
    if isinstance(log_file, str) and log_file.strip():
        cfg["LOG_FILE"] = os.path.expanduser(log_file.strip())

    level = data.get("log_level")
    if isinstance(level, str) and level.upper() in _LOG_LEVELS:
        cfg["LOG_LEVEL"] = level.upper()

    return cfg
