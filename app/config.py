"""Configuration from environment."""

from deps import load_dotenv, logging, os, Path

from deprecation_engine import DEFAULT_POLICY, ScoringPolicy

load_dotenv()

logger = logging.getLogger(__name__)

ENV_FILE = Path(".env")


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer; using %d", name, raw, default)
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("%s=%r is not a number; using %s", name, raw, default)
        return default


def get_together_api_key() -> str:
    """Together.ai API key (required for the external analyzer)."""
    return os.environ.get("TOGETHER_API_KEY", "").strip()


def get_together_model() -> str:
    """Together.ai model. Default: deepseek-ai/DeepSeek-V3.1."""
    return os.environ.get("TOGETHER_MODEL", "deepseek-ai/DeepSeek-V3.1").strip()


def get_together_base_url() -> str:
    return os.environ.get("TOGETHER_BASE_URL", "https://api.together.xyz/v1").strip()


def get_analyzer_timeout() -> float:
    """Seconds before an analyzer request is abandoned."""
    return _float_env("DEPRECHECK_ANALYZER_TIMEOUT", 60.0)


def get_default_profile_id() -> str:
    """Profile used when a request names none. Empty = registry default."""
    return os.environ.get("DEPRECHECK_DEFAULT_PROFILE", "").strip()


def get_scoring_policy(base: ScoringPolicy = DEFAULT_POLICY) -> ScoringPolicy:
    """Per-severity penalties on top of base, overridable one by one."""
    return ScoringPolicy(
        critical=max(0, _int_env("DEPRECHECK_PENALTY_CRITICAL", base.critical)),
        warning=max(0, _int_env("DEPRECHECK_PENALTY_WARNING", base.warning)),
        info=max(0, _int_env("DEPRECHECK_PENALTY_INFO", base.info)),
    )


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def get_host() -> str:
    return os.environ.get("DEPRECHECK_HOST", "127.0.0.1").strip() or "127.0.0.1"


def get_port() -> int:
    return _int_env("DEPRECHECK_PORT", 8000)
