import json
from pathlib import Path

from loguru import logger

import detect_desktop_environment.constants as cnst
from detect_desktop_environment.schemas.config_struct import Config


def generate_default_config() -> Path:
    cnst.APP_CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    with open(cnst.APP_CONFIG_FILE, "w", encoding="utf-8") as f:
        json.dump(
            obj=cnst.DEFAULT_CONFIG,
            fp=f,
            indent=4,
        )
    return cnst.APP_CONFIG_FILE


def load_config(path: Path) -> Config:
    if not path.exists():
        logger.debug(f"The config file '{path}' was not found. Using default config.")
        return Config(**cnst.DEFAULT_CONFIG)

    try:
        with open(path, encoding="utf-8") as f:
            config_dict = json.load(f)
        return Config(**config_dict)
    except (OSError, ValueError, TypeError):
        logger.warning(
            f"Warning: The config file '{path}' is invalid. Using default config."
        )
        return Config(**cnst.DEFAULT_CONFIG)
