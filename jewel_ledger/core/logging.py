"""structlog configuration shared by the API and the calculators."""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable, Dict

import structlog

EventDict = Dict[str, Any]


def service_context(service: str, env: str) -> Callable[[Any, str, EventDict], EventDict]:
    """Processor stamping every event with the service name and environment.

    Values already bound on the event take precedence.
    """

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service)
        event_dict.setdefault("env", env)
        return event_dict

    return processor


def setup_logging(
    log_level: str = "INFO",
    json_logs: bool = True,
    service: str = "jewel-ledger",
    env: str = "development",
) -> None:
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, stream=sys.stdout, format="%(message)s")

    processors = [
        structlog.contextvars.merge_contextvars,
        service_context(service, env),
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="ts"),
        structlog.processors.format_exc_info,
    ]
    processors.append(
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
