"""
Structured JSON logging for the sky-culture catalog.

Provides consistent, structured logging with build context
(resource paths, record counts, skipped lines) for observability.
"""

import json
import logging
import time
from typing import Dict, Any, Optional
from datetime import datetime, timezone


_STANDARD_ATTRS = {
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
    'filename', 'module', 'lineno', 'funcName', 'created',
    'msecs', 'relativeCreated', 'thread', 'threadName',
    'processName', 'process', 'getMessage', 'exc_info',
    'exc_text', 'stack_info', 'taskName'
}


class JsonFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs logs in a consistent JSON format with:
    - Standard fields: timestamp, level, logger, message
    - Build context: resource, culture, line_number, etc.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and not key.startswith('_'):
                log_entry[key] = value

        return json.dumps(log_entry, ensure_ascii=False, separators=(',', ':'), default=str)


class StructuredLogger:
    """
    Structured logger with catalog-build context support.

    Provides methods for logging the ingestion steps with
    consistent structure.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def resource_loaded(self, path: str, size_bytes: int):
        """Log a raw resource fetched from the asset provider."""
        self.logger.debug(
            f"Resource loaded: {path}",
            extra={
                "operation": "resource_loaded",
                "resource": path,
                "size_bytes": size_bytes
            }
        )

    def record_skipped(self, resource: str, line_number: int, reason: str, line: str = ""):
        """Log a recoverable, dropped input line."""
        self.logger.warning(
            f"Skipping {resource} line {line_number}: {reason}",
            extra={
                "operation": "record_skipped",
                "resource": resource,
                "line_number": line_number,
                "reason": reason,
                "line": line
            }
        )

    def capacity_exceeded(self, kind: str, constellation_id: str, capacity: int):
        """Log a line/edge dropped because its constellation is full."""
        self.logger.error(
            f"Too many {kind} in constellation {constellation_id}",
            extra={
                "operation": "capacity_exceeded",
                "kind": kind,
                "constellation": constellation_id,
                "capacity": capacity
            }
        )

    def catalog_built(
        self,
        culture: str,
        star_names: int,
        constellations: int,
        lines: int,
        edges: int,
        duration_ms: float
    ):
        """Log a successfully built catalog."""
        self.logger.info(
            "Sky culture catalog built",
            extra={
                "operation": "catalog_built",
                "culture": culture,
                "star_name_count": star_names,
                "constellation_count": constellations,
                "line_count": lines,
                "edge_count": edges,
                "duration_ms": round(duration_ms, 2)
            }
        )

    def startup_event(
        self,
        component: str,
        status: str,  # "starting", "ready", "error"
        duration_ms: Optional[float] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """Log application startup events."""
        level = logging.ERROR if status == "error" else logging.INFO
        self.logger.log(
            level,
            f"Startup: {component} {status}",
            extra={
                "operation": "startup",
                "component": component,
                "status": status,
                "duration_ms": round(duration_ms, 2) if duration_ms else None,
                **(details or {})
            }
        )


def setup_logging(level: str = "INFO", enable_json: bool = True) -> None:
    """
    Setup structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        enable_json: Whether to use JSON formatting
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[],
        force=True
    )

    console_handler = logging.StreamHandler()

    if enable_json:
        console_handler.setFormatter(JsonFormatter())
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


class TimedOperation:
    """Context manager for timing operations with automatic logging."""

    def __init__(self, logger: StructuredLogger, operation_name: str, **context):
        self.logger = logger
        self.operation_name = operation_name
        self.context = context
        self.start_time = None
        self.duration_ms = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration_ms = (time.perf_counter() - self.start_time) * 1000

        if exc_type is None:
            self.logger.logger.debug(
                f"Operation completed: {self.operation_name}",
                extra={
                    "operation": self.operation_name,
                    "duration_ms": round(self.duration_ms, 2),
                    **self.context
                }
            )
        else:
            self.logger.logger.error(
                f"Operation failed: {self.operation_name}",
                extra={
                    "operation": self.operation_name,
                    "duration_ms": round(self.duration_ms, 2),
                    "error_type": exc_type.__name__,
                    "error_message": str(exc_val) if exc_val else None,
                    **self.context
                }
            )

        return False
