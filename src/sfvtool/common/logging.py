"""Diagnostic logging setup.

Report lines (OK/FAILED, warnings, the generated manifest) are written to
the output streams by the drivers; this module only configures the
diagnostic log, which goes to stderr and optionally to a rotating file.

Structured fields reach a record two ways: per call through
``extra={"extra_fields": {...}}`` and per scope through ``LogContext``.
Every formatter renders both; per-call fields win on a name clash.
"""

import logging
import logging.handlers
import json
import sys
from typing import Any, Dict, Optional, TextIO
from datetime import datetime, timezone
from pathlib import Path


def record_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Structured fields attached to ``record``."""
    fields = dict(getattr(record, "context_fields", {}))
    fields.update(getattr(record, "extra_fields", {}))
    return fields


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, structured fields at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }

        log_data.update(record_fields(record))
        return json.dumps(log_data, default=str)


class _FieldsFormatter(logging.Formatter):
    """Text formatter that appends structured fields as ``key=value``."""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        fields = record_fields(record)
        if not fields:
            return text

        rendered = " ".join(f"{key}={value!r}" for key, value in fields.items())
        head, newline, tail = text.partition("\n")
        # Keep the fields on the message line, ahead of any traceback
        return f"{head} | {rendered}{newline}{tail}"


class DetailedFormatter(_FieldsFormatter):
    """Timestamped text with the emitting function and line."""

    def __init__(self) -> None:
        fmt = (
            "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | "
            "%(message)s"
        )
        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")


class SimpleFormatter(_FieldsFormatter):
    """Level, logger and message."""

    def __init__(self) -> None:
        super().__init__(fmt="%(levelname)-8s | %(name)s | %(message)s")


_FORMATTERS = {
    "json": StructuredFormatter,
    "detailed": DetailedFormatter,
    "simple": SimpleFormatter,
}


def setup_logging(
    level: str = "WARNING",
    format: str = "simple",
    log_file: Optional[Path] = None,
    max_file_size_mb: int = 10,
    backup_count: int = 5,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure the root logger for sfvtool diagnostics.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format: Console format (simple, detailed, json)
        log_file: Optional log file, always written as JSON
        max_file_size_mb: Size at which the log file rotates
        backup_count: Number of rotated files to keep
        stream: Console stream, defaults to sys.stderr
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setFormatter(_FORMATTERS.get(format, SimpleFormatter)())
    root_logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class LogContext:
    """Attach fields to every record created while the context is active.

    Contexts nest; inner fields shadow outer ones of the same name.
    """

    def __init__(self, logger: logging.Logger, **fields: Any) -> None:
        self.logger = logger
        self.fields = fields
        self.old_factory = None

    def __enter__(self) -> "LogContext":
        self.old_factory = logging.getLogRecordFactory()

        def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
            record = self.old_factory(*args, **kwargs)
            context = dict(getattr(record, "context_fields", {}))
            context.update(self.fields)
            record.context_fields = context
            return record

        logging.setLogRecordFactory(record_factory)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        logging.setLogRecordFactory(self.old_factory)
