"""FastAPI app: /health, /profiles, /scan, /simulate, /report, /fix, /fix-all, /analyze."""

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import (
    analyze_router,
    fix_router,
    health_router,
    profiles_router,
    root_router,
    scan_router,
)
from .config import get_host, get_port
from .startup import configure_logging, validate_config

app = FastAPI(
    title="DepreCheck Future Compatibility API",
    description="Rule-based deprecation scanning, scoring and migration rewrites, plus an optional AI analyzer.",
    version="0.1.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(profiles_router)
app.include_router(scan_router)
app.include_router(fix_router)
app.include_router(analyze_router)


@app.on_event("startup")
def _validate_config() -> None:
    """Configure logging and warn if .env or TOGETHER_API_KEY is missing."""
    configure_logging()
    validate_config()


def run() -> None:
    """Serve the API with uvicorn (the `deprecheck` console script)."""
    uvicorn.run(app, host=get_host(), port=get_port())
