"""Centralized logging configuration for the application."""

from __future__ import annotations

import logging
import sys

_HANDLER_NAME = "fieldroute-console"


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Attach a single stdout handler to the root logger.

    Safe to call more than once (e.g. one ``create_app`` per test); the
    handler is only added the first time and the level is always refreshed.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    if not any(handler.get_name() == _HANDLER_NAME for handler in root_logger.handlers):
        formatter = logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.set_name(_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    # Request lines from the HTTP client carry API keys in the query string.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return root_logger
