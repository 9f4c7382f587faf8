"""
Basic logging configuration for the application.

``setup_logging`` configures the root logger with a console handler and
an optional file handler, then quiets the MongoDB driver, whose DEBUG
output (connection pool and server monitoring events) would otherwise
drown the request logs.  Logging is set up exactly once; repeated calls
are no‑ops.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DRIVER_LOGGERS = ("pymongo", "pymongo.connection", "pymongo.serverSelection", "pymongo.topology")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives the same records as the console.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    # Driver chatter stays at WARNING unless the app itself runs at DEBUG.
    driver_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in DRIVER_LOGGERS:
        logging.getLogger(name).setLevel(driver_level)
