"""
Logging for the ActionTrack service.

All app loggers live under "actiontrack" (actiontrack.api.auth, actiontrack.services.event_ledger, ...).
Signup/signin lines carry the email only; passwords and tokens are never logged.
"""
import logging
import sys

from backend.app.core.config import settings

APP_LOGGER = "actiontrack"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# third-party loggers kept at WARNING unless the app itself runs at DEBUG
_NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "httpx")


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure stdout logging once at startup. Returns the app logger."""
    level_val = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    logging.basicConfig(
        level=level_val,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.setLevel(level_val)
    if level_val > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    return app_logger


def get_logger(name: str) -> logging.Logger:
    """Logger for one area of the app, e.g. get_logger("api.activity")."""
    return logging.getLogger(f"{APP_LOGGER}.{name}")
