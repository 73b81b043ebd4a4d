"""Prometheus collectors for HTTP traffic, job writes and auth attempts.

Scraped from ``/metrics`` (see ``jobtracker.api.health``). Path labels are
normalized so that ``/jobs/17`` and ``/jobs/18`` share one series.
"""

import time

from fastapi import Request
from prometheus_client import Counter, Gauge, Histogram, Info

APP_INFO = Info("jobtracker_app", "Job Tracker application information")

HTTP_REQUESTS_TOTAL = Counter(
    "jobtracker_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "jobtracker_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

HTTP_REQUESTS_IN_PROGRESS = Gauge(
    "jobtracker_http_requests_in_progress",
    "Number of HTTP requests currently in progress",
    ["method", "endpoint"],
)

JOB_MUTATIONS_TOTAL = Counter(
    "jobtracker_jobs_mutations_total",
    "Job records created, updated or deleted",
    ["operation"],  # create, update, delete
)

AUTH_ATTEMPTS_TOTAL = Counter(
    "jobtracker_auth_attempts_total",
    "Register and login attempts",
    ["action", "status"],  # action: register, login; status: success, failure
)


def set_app_info(version: str, environment: str) -> None:
    """Set application info metric."""
    APP_INFO.info({"version": version, "environment": environment})


def record_job_mutation(operation: str) -> None:
    JOB_MUTATIONS_TOTAL.labels(operation=operation).inc()


def record_auth_attempt(action: str, success: bool) -> None:
    """Record a register/login attempt.

    Args:
        action: "register" or "login".
        success: Whether the attempt succeeded.
    """
    AUTH_ATTEMPTS_TOTAL.labels(action=action, status="success" if success else "failure").inc()


def normalize_endpoint(path: str) -> str:
    """Replace numeric path segments with ``{id}`` to bound label cardinality."""
    return "/".join("{id}" if part.isdigit() else part for part in path.split("/"))


async def track_http_requests(request: Request, call_next):
    """HTTP middleware recording count, latency and in-flight requests per route shape."""
    if request.url.path == "/metrics":
        return await call_next(request)

    labels = {"method": request.method, "endpoint": normalize_endpoint(request.url.path)}
    in_progress = HTTP_REQUESTS_IN_PROGRESS.labels(**labels)
    in_progress.inc()
    started = time.perf_counter()
    status_code = "500"
    try:
        response = await call_next(request)
        status_code = str(response.status_code)
        return response
    finally:
        in_progress.dec()
        HTTP_REQUEST_DURATION_SECONDS.labels(**labels).observe(time.perf_counter() - started)
        HTTP_REQUESTS_TOTAL.labels(**labels, status_code=status_code).inc()
