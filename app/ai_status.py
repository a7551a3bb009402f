"""External analyzer status checking."""

from deps import Any, Dict, Optional, time

from deprecation_engine import errors
from .config import get_together_api_key, get_together_model
from .services.ai import classify_error, default_client

STATUS_TTL = 30.0

_PLACEHOLDER_PREFIX = "your_api_key"

_cached: Optional[Dict[str, Any]] = None
_cached_at = 0.0


def reset_cache() -> None:
    global _cached, _cached_at
    _cached = None
    _cached_at = 0.0


def _key_problem(key: str) -> Optional[Dict[str, str]]:
    """Category and reason when the configured key cannot work, else None."""
    if not key:
        return {"category": errors.UNAVAILABLE, "reason": "TOGETHER_API_KEY is not set"}
    if key.startswith(_PLACEHOLDER_PREFIX):
        return {"category": errors.AUTH, "reason": "TOGETHER_API_KEY still holds the .env.example placeholder"}
    if len(key) < 10:
        return {"category": errors.AUTH, "reason": "TOGETHER_API_KEY is too short to be valid"}
    return None


def _probe(model: str) -> Optional[Dict[str, str]]:
    """Send a one-token completion; category and reason on failure."""
    try:
        default_client().chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": "ping"}],
            max_tokens=1,
            timeout=5.0,
        )
    except Exception as e:
        err = classify_error(e)
        return {"category": err.category, "reason": err.message}
    return None


def get_ai_status(probe: bool = True) -> Dict[str, Any]:
    """Whether /analyze can be served right now.

    Key problems are reported without contacting the provider. With
    probe=False a plausible key counts as available; probed results are
    cached for STATUS_TTL seconds.
    """
    global _cached, _cached_at

    if probe and _cached is not None and time.time() - _cached_at < STATUS_TTL:
        return _cached

    key = get_together_api_key()
    model = get_together_model()
    status: Dict[str, Any] = {
        "available": False,
        "api_key_set": bool(key),
        "model": model,
        "category": None,
        "reason": "",
    }

    problem = _key_problem(key)
    if problem is None and probe:
        problem = _probe(model)
    if problem is not None:
        status.update(problem)
    else:
        status["available"] = True
        status["reason"] = "Analyzer reachable" if probe else "API key configured (not probed)"

    if probe:
        _cached = status
        _cached_at = time.time()
    return status
