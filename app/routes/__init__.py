"""Route handlers."""

from .analyze import router as analyze_router
from .fix import router as fix_router
from .health import router as health_router
from .profiles import router as profiles_router
from .root import router as root_router
from .scan import router as scan_router

__all__ = [
    "root_router",
    "health_router",
    "profiles_router",
    "scan_router",
    "fix_router",
    "analyze_router",
]
