#!/usr/bin/env python3
# ip_globe/logging_conf.py
"""
Central logging setup for the IP globe.

The UI owns the whole terminal, so nothing is ever logged to the console.
Records go to a rotating file when logging.file is set and are dropped
otherwise.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler

from ip_globe.config import Config

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _is_console(handler: logging.Handler) -> bool:
    stream = getattr(handler, "stream", None)
    return stream is not None and stream in (
        sys.stderr, sys.stdout, sys.__stderr__, sys.__stdout__,
    )


def setup_logging(cfg: Config) -> None:
    level_name = cfg["logging"].get("level", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)

    # Anything writing to the terminal would land on top of the map.
    for handler in list(root.handlers):
        if isinstance(handler, logging.StreamHandler) and _is_console(handler):
            root.removeHandler(handler)

    log_file = cfg["logging"].get("file")
    if log_file:
        handler = RotatingFileHandler(
            log_file,
            maxBytes=int(cfg["logging"].get("rotate_bytes", 5 * 1024 * 1024)),
            backupCount=int(cfg["logging"].get("rotate_keep", 3)),
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(_FORMAT))
    else:
        handler = logging.NullHandler()
    root.addHandler(handler)

    if cfg["logging"].get("http_debug"):
        logging.getLogger("urllib3").setLevel(logging.DEBUG)
        logging.getLogger("requests").setLevel(logging.DEBUG)
