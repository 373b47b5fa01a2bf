"""
Blog Posts API — FastAPI Application Entry Point

Builds the app and serves it with uvicorn.
"""

import logging

import uvicorn

from app.application import create_app
from app.config import get_settings

# ── Logging ───────────────────────────────────────────────────
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s",
)
logger = logging.getLogger(__name__)

app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)
