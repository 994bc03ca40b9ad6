"""Centralized logging configuration for the schematic command line tool.

This module provides a configured logger instance that can be imported and used
throughout the application. The logger writes bare messages to stderr using
settings from logging_config.json.

Usage:
    from schematic.logger import logger

    logger.debug("This is a debug message")
    logger.critical("This is the fatal diagnostic")
"""

from .logger import logger, setup_logger

__all__ = ["logger", "setup_logger"]
