"""
Utility module.

This module provides logging configuration and the logging helpers the
browser actions report through. Main features include test-run logging
configuration, caller-grouped debug logs and operation error records.
"""

from __future__ import annotations

import inspect
import logging
import os
import sys
import traceback
from typing import Any, Union

from . import constants

logger = logging.getLogger(__name__)


def setup_logging(level: str | None = None) -> None:
    """
    Configure test-run logging.

    Args:
        level: Log level name; defaults to the LOG_LEVEL environment variable,
            then LOG_LEVEL in constants.py
    """
    root_logger = logging.getLogger()

    # Remove all existing handlers (to prevent duplicate configuration)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Configure log level
    is_ci = os.environ.get("CI", "false").lower() == "true"
    log_level_name = (level or os.environ.get("LOG_LEVEL", constants.LOG_LEVEL)).upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    # Always use INFO level or higher in CI environment
    if is_ci and log_level > logging.INFO:
        log_level = logging.INFO

    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if is_ci:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )
    console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)

    root_logger.info("Log level set to %s", logging.getLevelName(log_level))


def add_debug_log(
    msg: Union[str, Exception],
    group: str | None = None,
    level: str = "DEBUG",
) -> None:
    """
    Record a log message under a group name using the standard logger.

    Args:
        msg: Log message (string or exception)
        group: Log group name (uses caller function name if not specified)
        level: Log level ("DEBUG", "INFO", "WARNING", "ERROR")
    """

    # Get caller function name
    if group is None:
        frame = None
        try:
            frame = inspect.currentframe()
            if frame and frame.f_back:
                group = frame.f_back.f_code.co_name
            else:
                group = "Unknown"
        except (AttributeError, ValueError):
            group = "Unknown"
        finally:
            del frame

    if isinstance(msg, Exception):
        message = f"Error: {msg}\n{traceback.format_exc()}"
    else:
        message = str(msg)

    log_level_int = getattr(logging, level.upper(), logging.DEBUG)
    logger.log(log_level_int, "[%s] %s", group, message)


def log_operation_error(
    operation_type: str,
    error_msg: str,
    details: dict[str, Any] | None = None,
) -> None:
    """
    Log browser operation errors. Always logs at INFO level or higher regardless of log level.

    Args:
        operation_type: Type of operation ("find_and_select_option", "click_link_inside_row", etc.)
        error_msg: Error message
        details: Error details (selector, value, etc.)
    """
    details_str = ""
    if details:
        try:
            details_list = [f"{k}={v}" for k, v in details.items()]
            details_str = f" ({', '.join(details_list)})"
        except (TypeError, ValueError):
            details_str = f" ({details})"

    logger.info("Operation error - %s: %s%s", operation_type, error_msg, details_str)
