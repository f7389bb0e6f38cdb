"""Prometheus metrics for the Navitas Gateway service.

Metrics are organized into two categories:

Business Metrics (for Partner Operations):
- navitas_submission_total: Application submissions by channel and outcome
- navitas_locality_lookup_total: Locality lookups by outcome

Technical Metrics (for Engineering/SRE):
- navitas_upstream_latency_seconds: Signed upstream call latency
- navitas_upstream_requests_total: Signed upstream calls by method and outcome
- navitas_auth_rejections_total: Partner authentication rejections by reason
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

submission_total = Counter(
    "navitas_submission_total",
    "Total number of credit application submissions",
    ["channel", "outcome"],  # outcome: success, failure
)

locality_lookup_total = Counter(
    "navitas_locality_lookup_total",
    "Total number of locality lookups",
    ["outcome"],
)


# =============================================================================
# Technical Metrics
# =============================================================================

upstream_latency = Histogram(
    "navitas_upstream_latency_seconds",
    "Signed Navitas API call latency in seconds",
    ["method"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

upstream_requests_total = Counter(
    "navitas_upstream_requests_total",
    "Total number of signed Navitas API calls",
    ["method", "outcome"],  # success, http_error, blocked, network_error
)

auth_rejections_total = Counter(
    "navitas_auth_rejections_total",
    "Total number of rejected partner requests",
    ["reason"],  # missing, invalid, misconfigured
)


# =============================================================================
# Helper Functions
# =============================================================================

@contextmanager
def track_upstream_latency(method: str) -> Generator[None, None, None]:
    """Context manager to track signed upstream call latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        upstream_latency.labels(method=method).observe(duration)


def record_upstream_request(method: str, outcome: str) -> None:
    """Record the outcome of a signed upstream call."""
    upstream_requests_total.labels(method=method, outcome=outcome).inc()


def record_auth_rejection(reason: str) -> None:
    """Record a rejected partner request."""
    auth_rejections_total.labels(reason=reason).inc()


def record_submission(channel: str, success: bool) -> None:
    """Record an application submission."""
    outcome = "success" if success else "failure"
    submission_total.labels(channel=channel, outcome=outcome).inc()


def record_locality_lookup(success: bool) -> None:
    """Record a locality lookup."""
    outcome = "success" if success else "failure"
    locality_lookup_total.labels(outcome=outcome).inc()


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
