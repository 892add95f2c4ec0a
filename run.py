"""
chartkit — API runner.

Usage:
    python run.py          → FastAPI on API_HOST:API_PORT
"""

import uvicorn

from chartkit.core.config import settings


def run_fastapi() -> None:
    """Start the chart API."""
    print(f"🚀 FastAPI → http://localhost:{settings.API_PORT}")
    if settings.DEBUG:
        print(f"📄 Docs    → http://localhost:{settings.API_PORT}/api/docs")
    uvicorn.run(
        "chartkit.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run_fastapi()
