"""Logging setup for the site CLI and server."""

import logging
import sys

# HTTP client libraries log every connection at DEBUG
NOISY_LOGGERS = ("urllib3", "httpx", "httpcore")


def setup_logger(log_level: str = "INFO", name: str = "portfolio_site") -> logging.Logger:
    """
    Configure logging and return the named logger.

    Module loggers (``logging.getLogger(__name__)``) inherit the root
    configuration set here. HTTP client libraries stay at WARNING so DEBUG
    output shows the site's own messages, such as rate-limit info from the
    GitHub fetcher.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            unknown values fall back to INFO
        name: Logger name (default: portfolio_site)

    Returns:
        logging.Logger: Configured logger instance
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stdout,
        force=True,  # Re-running (e.g. after config load) replaces the handler
    )

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(max(numeric_level, logging.WARNING))

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    return logger
