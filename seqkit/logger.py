"""Global logger configuration for seqkit."""

import logging
import os
import sys

__all__ = ["logger", "setup_logger"]


def _resolve_level(level: str) -> int:
    """numeric level for a name such as "debug"; unknown names fall back to INFO"""
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logger(
    name: str = "seqkit",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name, children such as "seqkit.random" share its handler
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv("LOG_LEVEL", "INFO")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured, the package NullHandler does not count
    if all(isinstance(h, logging.NullHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(_resolve_level(level))
        logger.propagate = False

    return logger


# Package logger. silent until the host application configures logging
# or opts into setup_logger()
logger = logging.getLogger("seqkit")
logger.addHandler(logging.NullHandler())
