import logging
import os
from typing import Optional

from .config import load_config

LOG_LEVEL_ENV = "POSTSYNC_LOG_LEVEL"
DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def _level_from_name(name, default: int = logging.INFO) -> int:
    if isinstance(name, int) and not isinstance(name, bool):
        return name
    if not isinstance(name, str):
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def resolve_log_level(cfg: Optional[dict] = None) -> int:
    """
    Pick the log level: POSTSYNC_LOG_LEVEL first, then the config file's
    {"logging": {"level": ...}}, then INFO. Unknown names fall back to INFO.
    """
    env_level = os.getenv(LOG_LEVEL_ENV)
    if env_level:
        return _level_from_name(env_level)

    if cfg is None:
        cfg = load_config()
    section = cfg.get("logging")
    if not isinstance(section, dict):
        return logging.INFO
    return _level_from_name(section.get("level", "INFO"))


def configure_logging(level: Optional[int] = None) -> None:
    resolved = level if level is not None else resolve_log_level()
    logging.basicConfig(level=resolved, format=DEFAULT_LOG_FORMAT)
