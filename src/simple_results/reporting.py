"""
Reporting — structured logging of Result and ObjectResult failures.

A thin layer over the core: nothing in failure.py, result.py or
object_result.py imports this module. Each failure becomes one structlog
event, so a consumer can hand any result to log_failures() at the edge
of an operation:

    result = validate(cmd).merge_in(enrich(cmd))
    log_failures(result, operation="create_order")

Event names:
  - result.error    — one per error, at settings.error_level
  - result.warning  — one per warning, at settings.warning_level
  - result.success  — once, at debug, when there is nothing to report
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import structlog

from simple_results.config import ReportingSettings
from simple_results.failure import Failure
from simple_results.object_result import ObjectResult
from simple_results.result import Result

R = TypeVar("R", Result, ObjectResult)


def configure_structlog(settings: ReportingSettings | None = None) -> None:
    """
    Configure structlog from ReportingSettings.

    JSON lines when settings.json_logs is set, colored console output
    otherwise. An unknown level name falls back to INFO.
    """
    settings = settings or ReportingSettings()
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if settings.json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def failure_fields(failure: Failure, include_description: bool = True) -> dict[str, str]:
    """Log fields for one failure; description only when present and wanted."""
    fields = {
        "code": failure.code,
        "kind": failure.kind.value,
        "message": failure.message,
    }
    if include_description and failure.description is not None:
        fields["description"] = failure.description
    return fields


def log_failures(
    result: R,
    logger: Any = None,
    settings: ReportingSettings | None = None,
    **context: Any,
) -> R:
    """
    Emit one event per failure of result, errors first.

    Extra keyword arguments are bound to every event. Returns result
    unchanged so the call can sit inside a chain.
    """
    settings = settings or ReportingSettings()
    log = (logger or structlog.get_logger()).bind(**context)

    if result.is_success:
        log.debug("result.success")
        return result

    emit_error = getattr(log, settings.error_level)
    for failure in result.errors:
        emit_error("result.error", **failure_fields(failure, settings.include_description))

    emit_warning = getattr(log, settings.warning_level)
    for failure in result.warnings:
        emit_warning("result.warning", **failure_fields(failure, settings.include_description))

    return result
