"""Structured logging with per-operation correlation ids."""
import logging
import sys
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

import structlog

operation_id_var: ContextVar[str] = ContextVar("operation_id", default="")


def get_operation_id() -> str:
    return operation_id_var.get() or ""


@contextmanager
def operation_context(operation_id: str | None = None) -> Iterator[str]:
    """Bind an operation id for the duration of one client exchange."""
    oid = operation_id or uuid.uuid4().hex
    token = operation_id_var.set(oid)
    try:
        yield oid
    finally:
        operation_id_var.reset(token)


def add_operation_context(
    logger: Any,
    method: str,
    event: dict[str, Any],
) -> dict[str, Any]:
    """Processor to inject operation_id into log events."""
    oid = get_operation_id()
    if oid:
        event.setdefault("operation_id", oid)
    return event


def configure_logging(json_logs: bool = True, level: str = "INFO") -> None:
    """Configure structlog for JSON or console output with operation correlation."""
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        add_operation_context,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_logs:
        shared_processors.append(structlog.processors.JSONRenderer())
    else:
        shared_processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping()[level.upper()]
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
