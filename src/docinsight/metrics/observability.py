"""Observability helpers for DocInsight."""

from __future__ import annotations

import logging
import time

import structlog
from prometheus_client import Counter, Histogram

_logger_configured = False


def configure_logging(level: int = logging.INFO) -> None:
    global _logger_configured  # noqa: PLW0603 - module-level guard
    if _logger_configured:
        return
    logging.basicConfig(level=level, format="%(message)s")
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _logger_configured = True


def bind_correlation_id(correlation_id: str) -> None:
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def clear_correlation_id() -> None:
    structlog.contextvars.clear_contextvars()


def get_logger(name: str = "docinsight") -> structlog.BoundLogger:
    configure_logging()
    return structlog.get_logger(name)


class PipelineMetrics:
    """Prometheus metrics for the query and summary pipeline."""

    model_call_latency = Histogram(
        "docinsight_model_call_duration_seconds",
        "Time spent waiting on the generative backend.",
        buckets=(0.1, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0),
    )
    model_call_failures = Counter(
        "docinsight_model_call_failures_total",
        "Generative backend calls that produced no usable text.",
        ["kind"],
    )
    fallback_responses = Counter(
        "docinsight_fallback_total",
        "Responses synthesized without the generative backend.",
        ["operation", "reason"],
    )
    results_returned = Histogram(
        "docinsight_results_returned",
        "Per-document results returned for a query.",
        buckets=(0, 1, 2, 3, 4, 6, 8),
    )

    @classmethod
    def observe_model_call(cls, duration_seconds: float) -> None:
        cls.model_call_latency.observe(duration_seconds)

    @classmethod
    def observe_model_failure(cls, kind: str) -> None:
        cls.model_call_failures.labels(kind=kind).inc()

    @classmethod
    def observe_fallback(cls, operation: str, reason: str) -> None:
        cls.fallback_responses.labels(operation=operation, reason=reason).inc()

    @classmethod
    def observe_results(cls, count: int) -> None:
        cls.results_returned.observe(count)


class TimedSection:
    """Context manager capturing elapsed time for metrics."""

    def __init__(self, callback) -> None:
        self._callback = callback
        self._start = 0.0

    def __enter__(self) -> "TimedSection":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: D401
        duration = time.perf_counter() - self._start
        self._callback(duration)


__all__ = [
    "PipelineMetrics",
    "TimedSection",
    "bind_correlation_id",
    "clear_correlation_id",
    "configure_logging",
    "get_logger",
]
