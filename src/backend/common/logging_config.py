# SPDX-FileCopyrightText: 2025 backend-api
#
# SPDX-License-Identifier: MIT
"""Process-wide logging setup shared by the backend API entry points."""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from opentelemetry import _logs, trace
from opentelemetry.exporter.otlp.proto.http._log_exporter import OTLPLogExporter
from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor
from opentelemetry.sdk.resources import Resource
from opentelemetry.semconv.resource import ResourceAttributes

_configured = False

# Attributes every LogRecord carries; anything else was passed via ``extra=``.
_RECORD_ATTRIBUTES: frozenset[str] = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


def _timestamp(record: logging.LogRecord) -> str:
    return datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()


def _trace_fields() -> dict[str, str]:
    """Return trace/span ids of the active span, if there is one."""
    span_ctx = trace.get_current_span().get_span_context()
    if not span_ctx or not span_ctx.is_valid:
        return {}
    return {
        "trace_id": format(span_ctx.trace_id, "032x"),
        "span_id": format(span_ctx.span_id, "016x"),
    }


def _extra_fields(record: logging.LogRecord, taken: dict[str, Any]) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRIBUTES and key not in taken
    }


class JsonFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def __init__(self, service_name: str, environment: str) -> None:
        super().__init__()
        self.service_name = service_name
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": _timestamp(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "environment": self.environment,
        }
        payload.update(_trace_fields())
        payload.update(_extra_fields(record, payload))

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=True, default=str)


class PrettyFormatter(logging.Formatter):
    """Human-readable, single-line log formatter."""

    def __init__(self, service_name: str, environment: str) -> None:
        super().__init__()
        self.service_name = service_name
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        extras: dict[str, Any] = {
            "service": self.service_name,
            "env": self.environment,
        }
        extras.update(_trace_fields())
        extras.update(_extra_fields(record, extras))

        line = " ".join(
            [
                _timestamp(record),
                f"{record.levelname:<7}",
                f"[{record.name}]",
                record.getMessage(),
                " ".join(f"{k}={v}" for k, v in extras.items()),
            ]
        )
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def _attach_otlp_exporter(logger_provider: LoggerProvider) -> None:
    endpoint = os.getenv("OTEL_EXPORTER_OTLP_LOGS_ENDPOINT") or os.getenv(
        "OTEL_EXPORTER_OTLP_ENDPOINT"
    )
    if not endpoint:
        return
    try:
        exporter = OTLPLogExporter(endpoint=endpoint)
        logger_provider.add_log_record_processor(BatchLogRecordProcessor(exporter))
    except Exception as err:  # pragma: no cover
        logging.getLogger(__name__).warning(
            "OTLP exporter setup failed; console logging only",
            extra={"error": str(err)},
        )


def configure_logging(
    service_name: str,
    service_version: str | None = None,
    environment: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    Configure root logging for the process.

    Console output goes to ``stream`` (stdout by default) as JSON, or as
    single plain lines when ``LOG_FORMAT=pretty``. Records are also bridged
    into an OpenTelemetry logger provider, which exports over OTLP/HTTP only
    when ``OTEL_EXPORTER_OTLP_LOGS_ENDPOINT`` or
    ``OTEL_EXPORTER_OTLP_ENDPOINT`` is set. ``LOG_LEVEL`` and
    ``ENVIRONMENT`` are honoured. Calling this more than once is a no-op.
    """
    global _configured
    if _configured:
        return

    log_level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    env = (
        environment
        if environment is not None
        else os.getenv("ENVIRONMENT", "development")
    )
    formatter_cls = (
        PrettyFormatter
        if os.getenv("LOG_FORMAT", "json").lower() == "pretty"
        else JsonFormatter
    )

    resource = Resource.create(
        {
            ResourceAttributes.SERVICE_NAME: service_name,
            ResourceAttributes.SERVICE_VERSION: service_version or "unknown",
            ResourceAttributes.DEPLOYMENT_ENVIRONMENT: env,
        }
    )
    logger_provider = LoggerProvider(resource=resource)
    _logs.set_logger_provider(logger_provider)
    _attach_otlp_exporter(logger_provider)

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter_cls(service_name, env))

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers.clear()
    root.addHandler(console_handler)
    root.addHandler(LoggingHandler(level=log_level, logger_provider=logger_provider))

    _configured = True
