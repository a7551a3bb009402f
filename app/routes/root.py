"""Root route."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

_ROOT_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>DepreCheck API</title>
</head>
<body>
  <h1>DepreCheck: future compatibility scanner</h1>
  <ul>
    <li><a href="/docs">/docs</a> (Swagger UI)</li>
    <li><a href="/profiles">/profiles</a> (target platforms)</li>
    <li><a href="/health">/health</a> (liveness)</li>
    <li><a href="/health/ai">/health/ai</a> (external analyzer status)</li>
    <li>POST /scan, /simulate, /report, /fix, /fix-all, /analyze</li>
  </ul>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
def root() -> str:
    """Root: welcome page with clickable links."""
    return _ROOT_HTML
