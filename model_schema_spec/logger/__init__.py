"""Centralized logging configuration for the model schema generator.

This module provides a configured logger instance that can be imported and used
throughout the package. The library itself only logs at debug level and never
configures handlers; a host application calls ``setup_logger`` to apply the
console and queue handlers from logging_config.json.

Usage:
    from model_schema_spec.logger import logger, setup_logger

    setup_logger()
    logger.debug("Generated schema for %s", model.name)
"""

from .logger import logger, setup_logger

__all__ = ["logger", "setup_logger"]
