from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "PATENT_BROWSER_LOG_FORMAT"

_JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"
_PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def build_formatter(mode: str) -> logging.Formatter:
    """'plain' gives a human-readable line; anything else is JSON."""
    if mode.lower() == "plain":
        return logging.Formatter(_PLAIN_FORMAT)
    # extra={...} fields passed by the pipeline become JSON keys
    return jsonlogger.JsonFormatter(_JSON_FIELDS)


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
) -> None:
    """
    Install a single stream handler on the root logger.

    The format comes from force_format, then $PATENT_BROWSER_LOG_FORMAT,
    then defaults to JSON. Per-request werkzeug lines are kept at WARNING
    since every filter change fires several Dash callbacks.
    """
    mode = force_format or os.getenv(LOG_FORMAT_ENV, "json")

    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(mode))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    logging.getLogger("werkzeug").setLevel(max(level, logging.WARNING))
