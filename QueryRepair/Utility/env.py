"""Environment helpers (.env loading and typed settings)"""
import os
import logging
from typing import List

logger = logging.getLogger(__name__)

DEFAULT_REPO_UPDATER_URL = "http://localhost:3182"
DEFAULT_REPO_UPDATER_TIMEOUT = 10.0
DEFAULT_MAX_QUERY_LENGTH = 1000


def load_env_file(filepath: str = ".env") -> None:
    """Copy KEY=VALUE pairs from `filepath` into os.environ without overriding existing variables."""
    if not os.path.exists(filepath):
        logger.debug(".env file not found: %s", filepath)
        return
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except OSError as e:
        logger.warning("Could not read %s: %s", filepath, e)
        return
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export "):]
        key, sep, val = line.partition("=")
        if not sep:
            continue
        key, val = key.strip(), val.strip()
        if len(val) >= 2 and val[0] == val[-1] and val[0] in ("'", '"'):
            val = val[1:-1]
        os.environ.setdefault(key, val)


def get_repo_updater_url() -> str:
    return os.environ.get("REPO_UPDATER_URL", DEFAULT_REPO_UPDATER_URL).rstrip("/")


def get_repo_updater_timeout() -> float:
    raw = os.environ.get("REPO_UPDATER_TIMEOUT")
    if not raw:
        return DEFAULT_REPO_UPDATER_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid REPO_UPDATER_TIMEOUT %r, using %s", raw, DEFAULT_REPO_UPDATER_TIMEOUT)
        return DEFAULT_REPO_UPDATER_TIMEOUT


def get_max_query_length() -> int:
    raw = os.environ.get("MAX_QUERY_LENGTH")
    if not raw:
        return DEFAULT_MAX_QUERY_LENGTH
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid MAX_QUERY_LENGTH %r, using %s", raw, DEFAULT_MAX_QUERY_LENGTH)
        return DEFAULT_MAX_QUERY_LENGTH


def get_site_admin_tokens() -> List[str]:
    raw = os.environ.get("SITE_ADMIN_TOKENS", "")
    return [t.strip() for t in raw.split(",") if t.strip()]
