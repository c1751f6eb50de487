"""
FastAPI application for the portfolio site.

Config is loaded once at startup and stored on ``app.state``; each request
builds its own GitHub fetcher from it.
"""

from typing import Optional

from fastapi import FastAPI

from models.config_models import Config
from utils.config_loader import load_config
from utils.logger import setup_logger
from backend.routes import router


def create_app(config: Optional[Config] = None) -> FastAPI:
    """
    Create the FastAPI app.

    Args:
        config: Validated configuration (loaded from .env when omitted)

    Returns:
        FastAPI: Configured application
    """
    if config is None:
        config = load_config()

    logger = setup_logger(config.log_level, name=__name__)

    app = FastAPI(
        title="Portfolio Site",
        description="Personal portfolio with pinned GitHub repositories",
        version="1.0.0"
    )
    app.state.config = config
    app.include_router(router)

    logger.info(f"FastAPI app initialized for {config.credentials.github_username}")
    return app
