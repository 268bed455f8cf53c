import json
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.getenv(
    "POSTSYNC_CONFIG",
    "/data/postsync.config",
)

PROJECT_ENV = "FIRESTORE_PROJECT"
EMULATOR_HOST_ENV = "FIRESTORE_EMULATOR_HOST"
DEFAULT_COLLECTION = "posts"


def load_config() -> dict:
    """
    Load the optional postsync configuration file from disk.

    A missing or unreadable file is not fatal; an empty dict is returned.
    """
    try:
        with open(DEFAULT_CONFIG_PATH, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        log.debug("Config file not found: %s", DEFAULT_CONFIG_PATH)
        return {}
    except (OSError, ValueError):
        log.exception("Failed to load config")
        return {}

    if not isinstance(data, dict):
        log.error("Config file %s must hold a JSON object", DEFAULT_CONFIG_PATH)
        return {}
    return data


@dataclass(frozen=True)
class StoreConfig:
    """Settings for the Firestore writer, passed in explicitly."""
    project: Optional[str] = None
    emulator_host: Optional[str] = None
    collection: str = DEFAULT_COLLECTION


def _non_empty(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def store_config_from_env(environ: Optional[Mapping[str, str]] = None) -> StoreConfig:
    env = os.environ if environ is None else environ
    return StoreConfig(
        project=_non_empty(env.get(PROJECT_ENV)),
        emulator_host=_non_empty(env.get(EMULATOR_HOST_ENV)),
    )
