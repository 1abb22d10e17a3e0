"""Configuration: optional YAML file naming the data files and log level."""

import logging
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "files": {
        "questions": "questions.txt",
        "high_scores": "high_scores.txt",
    },
    "logging": {
        "level": "WARNING",
    },
}


def load_config(path="config.yaml") -> dict:
    """Read ``path`` over the defaults. A missing file yields the defaults."""
    config = {section: dict(values) for section, values in DEFAULT_CONFIG.items()}
    config_path = Path(path)
    if not config_path.exists():
        return config

    with open(config_path, encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    for section, values in loaded.items():
        if section not in config:
            logger.debug(f"Ignoring unknown config section: {section}")
            continue
        if isinstance(values, dict):
            config[section].update(values)
    return config
