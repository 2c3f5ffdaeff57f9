"""
Logging utilities.

Domain modules never log; use cases and infrastructure adapters do.
"""
import logging

from order_core.settings import get_settings


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance.

    Args:
        name: Logger name (usually module name)

    Returns:
        Logger instance with a stream handler configured from settings
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        settings = get_settings()
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(settings.log_format))
        logger.addHandler(handler)
        logger.setLevel(settings.log_level.upper())
    return logger
