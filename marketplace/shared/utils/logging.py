# 📄 File: marketplace/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# Sets up the logging system that records what the marketplace data layer does, in a structured
# way, so saves, failures and money movements can be traced later.

# 🧪 Purpose (Technical Summary):
# Structured logging with JSON formatting (python-json-logger), contextual request/user/correlation
# identifiers carried in contextvars, and a one-shot setup function driven by settings.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: embedding applications at startup, repositories and services (via logging.getLogger),
# tests

import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from marketplace.shared.config.settings import get_settings

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')
user_id_var: ContextVar[str] = ContextVar('user_id', default='')
correlation_id_var: ContextVar[str] = ContextVar('correlation_id', default='')

SERVICE_NAME = 'marketplace'

_logging_configured = False


def _hostname() -> str:
    return os.uname().nodename if hasattr(os, 'uname') else 'unknown'


class ContextFilter(logging.Filter):
    """
    Attaches contextual identifiers to every record passing through a handler.
    """

    def __init__(self, name: str = ''):
        super().__init__(name)
        self.hostname = _hostname()

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get('')
        record.user_id = user_id_var.get('')
        record.correlation_id = correlation_id_var.get('')
        record.hostname = self.hostname
        record.service = SERVICE_NAME
        return True


class ContextualFormatter(logging.Formatter):
    """
    Plain-text formatter with an ISO-8601 UTC timestamp and the request id.
    """

    def format(self, record: logging.LogRecord) -> str:
        record.timestamp = datetime.now(timezone.utc).isoformat()
        if not hasattr(record, 'request_id'):
            record.request_id = request_id_var.get('')
        return super().format(record)


class MarketplaceJsonFormatter(JsonFormatter):
    """
    JSON formatter for structured logging.

    Emits one JSON object per record with a consistent set of keys for
    log aggregation tools; empty context identifiers are dropped.
    """

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any]
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno
        log_record['service'] = getattr(record, 'service', SERVICE_NAME)

        for key in ('request_id', 'user_id', 'correlation_id'):
            if not log_record.get(key):
                log_record.pop(key, None)


def build_formatter(log_format: str) -> logging.Formatter:
    if log_format.lower() == 'json':
        return MarketplaceJsonFormatter()
    return ContextualFormatter('%(timestamp)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s')


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_file: Optional[str] = None,
    enable_console: bool = True,
    force: bool = False
) -> logging.Logger:
    """
    Setup application logging configuration.

    Args:
        log_level: Level name, defaults to settings.LOG_LEVEL
        log_format: 'json' or 'text', defaults to settings.LOG_FORMAT
        log_file: Optional file path, defaults to settings.LOG_FILE
        enable_console: Attach a stdout handler
        force: Reconfigure even if logging was already set up

    Returns:
        The 'startup' logger
    """
    global _logging_configured

    if _logging_configured and not force:
        return logging.getLogger('startup')

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT
    log_file = log_file or settings.LOG_FILE

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    formatter = build_formatter(log_format)
    context_filter = ContextFilter()

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(context_filter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(context_filter)
        root_logger.addHandler(file_handler)

    logging.getLogger('sqlalchemy.engine').setLevel(
        logging.INFO if settings.DB_ECHO else logging.WARNING
    )
    logging.getLogger('asyncio').setLevel(logging.WARNING)
    logging.getLogger('passlib').setLevel(logging.ERROR)

    _logging_configured = True
    return logging.getLogger('startup')


@contextmanager
def log_context(
    request_id: Optional[str] = None,
    user_id: Optional[str] = None,
    correlation_id: Optional[str] = None
):
    """
    Context manager for adding contextual information to logs.

    Args:
        request_id: Request identifier (generated when omitted)
        user_id: User identifier
        correlation_id: Correlation identifier for distributed tracing
    """
    if request_id is None:
        request_id = str(uuid4())

    request_token = request_id_var.set(request_id)
    user_token = user_id_var.set(user_id or '')
    correlation_token = correlation_id_var.set(correlation_id or '')

    try:
        yield {
            'request_id': request_id,
            'user_id': user_id,
            'correlation_id': correlation_id
        }
    finally:
        request_id_var.reset(request_token)
        user_id_var.reset(user_token)
        correlation_id_var.reset(correlation_token)
