# logging_config.py
"""
Logging setup for the dormitory backend.

Console output only; LOG_FORMAT=json switches to structured lines
produced by python-json-logger.
"""
import logging
import logging.config

import config


LOGGING_CONFIG = {
     "version": 1,
     "disable_existing_loggers": False,
     "formatters": {
          "standard": {
               "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
          },
          "json": {
               "()": "pythonjsonlogger.json.JsonFormatter",
               "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s",
          },
     },
     "handlers": {
          "console": {
               "class": "logging.StreamHandler",
               "formatter": "standard",
               "stream": "ext://sys.stdout",
          },
     },
     "root": {
          "handlers": ["console"],
          "level": "INFO",
     },
     "loggers": {
          "sqlalchemy.engine": {"level": "WARNING", "propagate": True},
          "uvicorn.access": {"level": "WARNING", "propagate": True},
     },
}


def setup_logging(level: str = None, fmt: str = None) -> None:
     """Apply LOGGING_CONFIG with the configured level and formatter."""
     level = (level or config.LOG_LEVEL).upper()
     fmt = fmt or config.LOG_FORMAT

     logging_config = dict(LOGGING_CONFIG)
     logging_config["handlers"] = {
          "console": dict(LOGGING_CONFIG["handlers"]["console"], formatter=fmt if fmt == "json" else "standard")
     }
     logging_config["root"] = dict(LOGGING_CONFIG["root"], level=level)

     logging.config.dictConfig(logging_config)
     logging.getLogger(__name__).debug("Logging configured (level=%s, format=%s)", level, fmt)
