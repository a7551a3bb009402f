"""Startup validation and configuration checks."""

from deps import logging

from .config import ENV_FILE, get_log_level, get_together_api_key

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Apply LOG_LEVEL to the root logger."""
    level = getattr(logging, get_log_level(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)


def validate_config() -> None:
    """Validate config at startup and warn if .env or TOGETHER_API_KEY missing."""
    env_exists = ENV_FILE.exists()
    key_set = bool(get_together_api_key())
    if not env_exists and not key_set:
        logger.warning(".env file not found. The external analyzer will be disabled.")
        logger.warning("Create .env from .env.example and set TOGETHER_API_KEY to enable /analyze.")
    elif not key_set:
        logger.warning("TOGETHER_API_KEY not set. The external analyzer will be disabled.")
        logger.warning("Rule-based scanning (/scan, /simulate, /fix) stays available.")
