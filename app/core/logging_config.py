"""
Structured logging for the assessment API.

JSON lines in production (one object per record, tagged with the service
name), plain text in development. Called once from main.py.
"""

import logging
import sys
from typing import Any, Dict
from datetime import datetime, timezone
from pythonjsonlogger import jsonlogger

from app.core.config import settings

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FORMAT = "%(timestamp)s %(level)s %(logger)s %(module)s %(funcName)s %(message)s"

# Loggers raised to WARNING regardless of LOG_LEVEL
QUIET_LOGGERS = ("httpx", "httpcore", "openai", "sqlalchemy.engine", "passlib")


class AssessmentJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter adding timestamp, level, logger, source location and
    service name to every record. Fields passed via `extra=` are kept as-is.
    """

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['service'] = settings.PROJECT_NAME

        # Source location only where someone will go looking for it
        if record.levelno >= logging.WARNING:
            log_record['line'] = record.lineno
            log_record['pathname'] = record.pathname


def build_formatter(json_logs: bool) -> logging.Formatter:
    if json_logs:
        return AssessmentJsonFormatter(JSON_FORMAT)
    return logging.Formatter(PLAIN_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')


def setup_logging(log_level: str = "INFO", json_logs: bool = True) -> None:
    """
    Route all logging (including uvicorn's) through one stdout handler.

    Args:
        log_level: Root level name; unknown names fall back to INFO
        json_logs: JSON output for production, plain text for development
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(build_formatter(json_logs))

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root_logger.addHandler(console_handler)

    # uvicorn installs its own handlers; send its records to the root handler
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
