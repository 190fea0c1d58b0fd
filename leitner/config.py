"""Configuration helpers: data directory discovery and settings."""

import logging
import os
import pathlib

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {"strategy": "doubling", "log_level": "WARNING"}


def get_leitner_dir() -> pathlib.Path:
    env_dir = os.environ.get("LEITNER_DIR")
    if env_dir:
        return pathlib.Path(env_dir)
    config_path = pathlib.Path.home() / ".config" / "leitner" / "config"
    if config_path.exists():
        for line in config_path.read_text().splitlines():
            line = line.strip()
            if line.startswith("DIR="):
                return pathlib.Path(line[4:].strip())
    return pathlib.Path.home() / ".local" / "share" / "leitner"


def load_settings(leitner_dir: pathlib.Path) -> dict:
    settings_path = leitner_dir / "settings.toml"
    settings = dict(DEFAULT_SETTINGS)
    if settings_path.exists():
        try:
            settings.update(_parse_toml_simple(settings_path.read_text()))
        except OSError as e:
            logger.warning("cannot read %s: %s", settings_path, e)
    return settings


def _parse_toml_simple(text: str) -> dict:
    """Minimal TOML parser for flat key=value files."""
    result = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" in line:
            k, v = line.split("=", 1)
            k = k.strip()
            v = v.strip()
            if v.startswith('"') and v.endswith('"'):
                v = v[1:-1]
            elif v.isdigit():
                v = int(v)
            elif v == "true":
                v = True
            elif v == "false":
                v = False
            result[k] = v
    return result
