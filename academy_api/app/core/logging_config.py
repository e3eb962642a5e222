"""
Logging setup driven by :class:`Settings`.

Locally (``APP_ENV`` other than ``production``) records go to the
console with a timestamp and, when ``LOG_FILE`` is set, to that file as
well.  In production the app runs on a serverless platform whose
filesystem is read-only and which timestamps every captured line
itself, so only a stderr handler with a shorter format is installed
and ``LOG_FILE`` is ignored.
"""

import logging
from pathlib import Path
from typing import List

from .config import Settings

LOCAL_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
PLATFORM_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Loggers of the HTTP clients underneath the supabase and cloudinary SDKs;
# they log every request at INFO.
NOISY_LOGGERS = ("httpx", "httpcore", "hpack", "urllib3")


def level_from_name(name: str) -> int:
    """Numeric level for a name such as ``"debug"``; unknown names give INFO."""
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else logging.INFO


def build_handlers(settings: Settings) -> List[logging.Handler]:
    """Handlers for the current deployment mode, already formatted."""
    if not settings.serve_locally:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(PLATFORM_FORMAT))
        return [handler]

    formatter = logging.Formatter(fmt=LOCAL_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        log_path = Path(settings.log_file).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(settings: Settings) -> None:
    """Configure the root logger once per process.

    A root logger that already has handlers (pytest's capture, uvicorn
    reload, a second ``create_app``) is left alone apart from its level.
    """
    numeric_level = level_from_name(settings.log_level)
    root = logging.getLogger()
    root.setLevel(numeric_level)
    if not root.handlers:
        for handler in build_handlers(settings):
            root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
