"""
Logging configuration for the application.

Only the ``graphql_http`` logger tree and the libraries serving it are
configured, so ``create_app`` can be mounted inside a host application
without replacing its root logging setup.
Logging must not change program behavior.
Never logs query variables, response bodies or other raw payloads.
"""

import logging
import logging.config

PACKAGE_LOGGER = "graphql_http"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# slowapi logs every rejected request; the 429 handler already reports it.
QUIET_LOGGERS = ("slowapi",)
ACCESS_LOGGER = "uvicorn.access"


def build_logging_config(level: str = "INFO", access_log: bool = False) -> dict:
    """Build the ``dictConfig`` mapping for the service loggers.

    Args:
        level: Level for the ``graphql_http`` loggers. Unknown names fall
            back to INFO.
        access_log: Keep uvicorn's per-request access log at INFO.

    Returns:
        A configuration accepted by :func:`logging.config.dictConfig`.
    """
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"

    loggers = {
        PACKAGE_LOGGER: {"handlers": ["stdout"], "level": level, "propagate": False},
        ACCESS_LOGGER: {"level": "INFO" if access_log else "WARNING"},
    }
    for name in QUIET_LOGGERS:
        loggers[name] = {"level": "WARNING"}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT, "datefmt": LOG_DATE_FORMAT},
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": loggers,
    }


def configure_logging(level: str = "INFO", access_log: bool = False) -> None:
    """Configure the service loggers.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        access_log: Keep uvicorn's per-request access log.
    """
    logging.config.dictConfig(build_logging_config(level, access_log))
