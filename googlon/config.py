"""
Googlon Parser - Configuration Files

Configurations are stored as JSON objects with the keys of
GooglonConfig.to_dict(). Missing keys take their canonical values.

Example:
    {"alphabet": "abc", "foo_letters": "a", "pad_symbol": "a",
     "forbidden_letter": "c"}
"""
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Union

from .types import GooglonConfig

logger = logging.getLogger(__name__)


def load_config(path: Union[str, Path]) -> GooglonConfig:
    """
    Load a configuration from a JSON file.

    Raises:
        FileNotFoundError: path does not exist
        ValueError: file is not a JSON object or holds an invalid config
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config file {path}: expected a JSON object")
    config = GooglonConfig.from_dict(data)
    logger.info(f"Loaded config from {path}: alphabet={config.alphabet}, base={config.numeral_base}")
    return config


def save_config(config: GooglonConfig, path: Union[str, Path]) -> Path:
    """Write a configuration to a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
        f.write("\n")
    return path
