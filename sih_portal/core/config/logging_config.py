import logging
import logging.config
import os

APP_LOGGER = "sih_portal"
ERROR_LOGGER = "sih_portal.errors"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


def _rotating_file(path: str, level: str = "NOTSET") -> dict:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "formatter": "json",
        "filename": path,
        "maxBytes": MAX_LOG_BYTES,
        "backupCount": LOG_BACKUPS,
        "encoding": "utf-8",
        "level": level,
    }


def build_logging_config(log_dir: str, level: str = "INFO") -> dict:
    """
    Console output for operators, JSON files for shipping.

    app.log receives everything the portal logs at `level`; error.log only
    collects ERROR records, including storage failures from the routers.
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "fmt": "%(asctime)s %(name)s %(levelname)s %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
            "app_file": _rotating_file(os.path.join(log_dir, "app.log")),
            "error_file": _rotating_file(os.path.join(log_dir, "error.log"), "ERROR"),
        },
        "root": {"handlers": ["console"], "level": "WARNING"},
        "loggers": {
            APP_LOGGER: {
                "handlers": ["console", "app_file", "error_file"],
                "level": level.upper(),
                "propagate": False,
            },
            # ERROR only, never app.log
            ERROR_LOGGER: {
                "handlers": ["console", "error_file"],
                "level": "ERROR",
                "propagate": False,
            },
            "uvicorn.access": {"handlers": ["console", "app_file"], "level": level.upper(), "propagate": False},
        },
    }


def setup_logging(log_dir: str = "logs", level: str = "INFO") -> logging.Logger:
    """Apply the portal's logging config and return the application logger"""
    os.makedirs(log_dir, exist_ok=True)
    logging.config.dictConfig(build_logging_config(log_dir, level))
    return logging.getLogger(APP_LOGGER)
