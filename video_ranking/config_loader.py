"""
Configuration loading

Loads RecommendationConfig from a JSON file. The file is taken from the
explicit path argument, else from the VIDEO_RANKING_CONFIG environment
variable (a .env file in the working directory is honoured via python-dotenv).
With neither, the built-in defaults are used.

Example config.json:

    {
        "home": {"limit": 25, "subscription_bonus": 40},
        "trending": {"limit": 10},
        "similar": {"same_channel": 20}
    }
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv

from .models.config import DEFAULT_CONFIG, RecommendationConfig

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "VIDEO_RANKING_CONFIG"


def resolve_config_path(path: Union[str, Path, None] = None) -> Optional[Path]:
    """Explicit path, else $VIDEO_RANKING_CONFIG (after loading .env), else None."""
    if path:
        return Path(path)
    load_dotenv(find_dotenv(usecwd=True))
    env_path = os.getenv(CONFIG_PATH_ENV, "").strip()
    return Path(env_path) if env_path else None


def load_config(path: Union[str, Path, None] = None) -> RecommendationConfig:
    """
    Load a RecommendationConfig.

    Raises FileNotFoundError when the resolved file does not exist, and
    pydantic.ValidationError when its values are out of range.
    """
    config_path = resolve_config_path(path)
    if config_path is None:
        logger.info("[config] DEFAULTS no config path given and %s unset", CONFIG_PATH_ENV)
        return DEFAULT_CONFIG.model_copy(deep=True)
    if not config_path.exists():
        raise FileNotFoundError(f"Ranking config not found: {config_path}")
    with open(config_path) as f:
        data = json.load(f)
    logger.info("[config] LOADED path=%s sections=%s", config_path, sorted(data))
    return RecommendationConfig.from_dict(data)
