from __future__ import annotations

import logging
import os
from typing import Callable, Dict, Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "CATALOG_BROWSER_LOG_FORMAT"
LOG_PATTERN = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_LOG_FORMAT = "json"

FORMATTERS: Dict[str, Callable[[], logging.Formatter]] = {
    "json": lambda: jsonlogger.JsonFormatter(LOG_PATTERN),
    "plain": lambda: logging.Formatter(LOG_PATTERN),
}


def _format_name(force_format: Optional[str]) -> str:
    if force_format is not None:
        return force_format.strip().lower()
    return os.getenv(LOG_FORMAT_ENV, DEFAULT_LOG_FORMAT).strip().lower()


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
) -> str:
    """
    Install a single stream handler on the root logger.

    The format name comes from force_format, else CATALOG_BROWSER_LOG_FORMAT,
    else "json". An unknown name falls back to "json" and is reported once the
    handler is in place.

    :return: the format name actually used
    """
    requested = _format_name(force_format)
    name = requested if requested in FORMATTERS else DEFAULT_LOG_FORMAT

    handler = logging.StreamHandler()
    handler.setFormatter(FORMATTERS[name]())

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers[:] = [handler]

    if name != requested:
        logging.getLogger(__name__).warning(
            "Unknown log format, using %s",
            name,
            extra={"requested_format": requested, "choices": sorted(FORMATTERS)},
        )
    return name
