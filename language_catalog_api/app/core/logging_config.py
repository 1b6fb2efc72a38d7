"""
Logging setup shared by the API server and the command line tools.

Everything logs through module level ``logging.getLogger(__name__)``
loggers; this module only decides where records go.  Query timings
are emitted at ``DEBUG`` so they stay silent unless ``LOG_LEVEL`` asks
for them.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console (and optionally file) handlers to the root logger.

    Does nothing when the root logger already has handlers, which is
    the case under pytest's log capture or when ``create_app`` runs
    more than once in a process.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; unknown names fall back to
        ``INFO``.
    logfile : Optional[str]
        Extra file to append records to.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
