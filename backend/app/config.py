"""Runtime settings read from the environment (optionally backend/.env)."""

import logging
import os
import secrets
from pathlib import Path

from dotenv import load_dotenv

APP_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = APP_DIR / "templates"
STATIC_DIR = APP_DIR / "static"

load_dotenv(APP_DIR.parent / ".env")

logger = logging.getLogger(__name__)

DEFAULT_SESSION_MAX_AGE = 30 * 60
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 4567
DEFAULT_LOG_LEVEL = "INFO"


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("[config] %s=%r is not an integer; using %d", name, raw, default)
        return default


def get_session_secret() -> str:
    """Cookie signing key. Without one, sessions only last as long as the process."""
    secret = os.environ.get("WEBCHECKERS_SESSION_SECRET", "").strip()
    if not secret:
        logger.warning("[config] WEBCHECKERS_SESSION_SECRET not set; using a random per-process key.")
        secret = secrets.token_urlsafe(32)
    return secret


def get_session_max_age() -> int:
    return _int_from_env("WEBCHECKERS_SESSION_MAX_AGE", DEFAULT_SESSION_MAX_AGE)


def get_host() -> str:
    return os.environ.get("WEBCHECKERS_HOST", "").strip() or DEFAULT_HOST


def get_port() -> int:
    return _int_from_env("WEBCHECKERS_PORT", DEFAULT_PORT)


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
