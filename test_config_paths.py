import json
import tempfile
from pathlib import Path

import config_paths


def _with_config_json(cfg_path, fn):
    orig_dir = config_paths.CONFIG_DIR
    orig_json = config_paths.CONFIG_JSON
    try:
        config_paths.CONFIG_DIR = str(cfg_path.parent)
        config_paths.CONFIG_JSON = str(cfg_path)
        return fn()
    finally:
        config_paths.CONFIG_DIR = orig_dir
        config_paths.CONFIG_JSON = orig_json


def test_load_config_defaults_without_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_path = Path(tmp) / "termchart" / "config.json"
        cfg = _with_config_json(cfg_path, config_paths.load_config)
        assert cfg["DEFAULT_VARIANT"] == "line"
        assert cfg["LOG_FILE"] is None
        assert cfg["LOG_LEVEL"] == "WARNING"
        # reading config never creates files
        assert not cfg_path.parent.exists()


def test_load_config_reads_json_overrides():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "termchart"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        cfg_path = cfg_dir / "config.json"
        cfg_path.write_text(
            json.dumps(
                {
                    "default_variant": "bars",
                    "log_file": "  /tmp/termchart.log ",
                    "log_level": "debug",
                }
            )
        )
        cfg = _with_config_json(cfg_path, config_paths.load_config)
        assert cfg["DEFAULT_VARIANT"] == "bars"
        assert cfg["LOG_FILE"] == "/tmp/termchart.log"
        assert cfg["LOG_LEVEL"] == "DEBUG"


def test_load_config_ignores_bad_values():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "termchart"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        cfg_path = cfg_dir / "config.json"
        cfg_path.write_text(
            json.dumps({"default_variant": "pie", "log_file": 3, "log_level": "LOUD"})
        )
        cfg = _with_config_json(cfg_path, config_paths.load_config)
        assert cfg["DEFAULT_VARIANT"] == "line"
        assert cfg["LOG_FILE"] is None
        assert cfg["LOG_LEVEL"] == "WARNING"


def test_load_config_survives_malformed_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "termchart"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        cfg_path = cfg_dir / "config.json"
        cfg_path.write_text("{not json")
        cfg = _with_config_json(cfg_path, config_paths.load_config)
        assert cfg["DEFAULT_VARIANT"] == "line"
