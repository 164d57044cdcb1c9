# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

from portfolio.shared.config import load_config

REQUEST_LATENCY = Histogram(
    "portfolio_request_latency_seconds",
    "Request latency",
    buckets=(0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10),
)
REQUEST_COUNTER = Counter(
    "portfolio_requests_total",
    "Number of processed requests",
    labelnames=("endpoint", "status"),
)
AUTH_REJECTIONS = Counter(
    "portfolio_auth_rejections_total",
    "Protected requests refused by the bearer-token gate",
)


def metrics_enabled() -> bool:
    return load_config().observability.metrics_enabled


def observe_request(endpoint: str, status: int, duration_seconds: float) -> None:
    if not metrics_enabled():
        return
    REQUEST_LATENCY.observe(duration_seconds)
    REQUEST_COUNTER.labels(endpoint=endpoint, status=str(status)).inc()


def record_auth_rejection() -> None:
    if metrics_enabled():
        AUTH_REJECTIONS.inc()


def render_latest() -> tuple[bytes, str]:
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "AUTH_REJECTIONS",
    "REQUEST_COUNTER",
    "REQUEST_LATENCY",
    "observe_request",
    "record_auth_rejection",
    "render_latest",
]
