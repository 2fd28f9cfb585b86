"""
Logging configuration for the services.

``run.py`` can host the catalog, info and rating servers in one
process, so every log line carries a label naming the service(s) the
process runs.  Uvicorn's own server and access logs are routed through
the same root handlers, which gives one uniform stream instead of
uvicorn's separate default handlers.  Configuration happens once per
process; later calls (e.g. one per ``create_app``) are no‑ops unless
they pass ``force``, which ``run.py`` does to relabel the stream.
"""

import logging
from pathlib import Path
from typing import Optional

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def build_formatter(label: str) -> logging.Formatter:
    """Return the formatter used by every handler, stamped with ``label``."""
    return logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] " + label.replace("%", "%%") + " %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def route_uvicorn_logs(level: int) -> None:
    """Make uvicorn's loggers propagate to the root handlers at ``level``."""
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
        uvicorn_logger.setLevel(level)


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    label: str = "movie-catalog",
    force: bool = False,
) -> None:
    """Configure the root logger unless it already has handlers (or ``force``).

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``), case
        insensitive.  Also applied to uvicorn's loggers.
    logfile : Optional[str]
        Path of an additional log file.  If omitted, only the console
        handler is attached.
    label : str
        Service label written into every line, e.g. ``"catalog-service"``
        or ``"catalog+info+rating"``.
    force : bool
        Replace handlers attached by an earlier call, as
        ``logging.basicConfig(force=True)`` does.
    """
    root = logging.getLogger()
    if force:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)
    route_uvicorn_logs(numeric_level)

    formatter = build_formatter(label)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
