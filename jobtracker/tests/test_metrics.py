"""Tests for Prometheus metrics."""

import pytest
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY

from jobtracker.core.metrics import (
    normalize_endpoint,
    record_auth_attempt,
    record_job_mutation,
    set_app_info,
)


def _sample(name: str, labels: dict) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0


class TestMetricsEndpoint:
    def test_prometheus_text_format(self, client: TestClient) -> None:
        response = client.get("/metrics")
        assert response.status_code == 200
        assert "text/plain" in response.headers["content-type"]

    def test_contains_app_info(self, client: TestClient) -> None:
        assert "jobtracker_app_info" in client.get("/metrics").text

    def test_contains_http_metrics(self, client: TestClient) -> None:
        client.get("/health")

        content = client.get("/metrics").text

        assert "jobtracker_http_requests_total" in content
        assert "jobtracker_http_request_duration_seconds" in content

    def test_requests_are_labelled_by_route_shape(self, client, auth_headers) -> None:
        labels = {"method": "GET", "endpoint": "/api/v1/jobs/{id}", "status_code": "404"}
        before = _sample("jobtracker_http_requests_total", labels)

        client.get("/api/v1/jobs/424242", headers=auth_headers)

        assert _sample("jobtracker_http_requests_total", labels) == before + 1


class TestRecorders:
    def test_set_app_info(self) -> None:
        set_app_info("9.9.9", "test")
        assert REGISTRY.get_sample_value(
            "jobtracker_app_info", {"version": "9.9.9", "environment": "test"}
        ) == 1.0

    @pytest.mark.parametrize("success, status", [(True, "success"), (False, "failure")])
    def test_record_auth_attempt(self, success, status) -> None:
        labels = {"action": "login", "status": status}
        before = _sample("jobtracker_auth_attempts_total", labels)

        record_auth_attempt("login", success=success)

        assert _sample("jobtracker_auth_attempts_total", labels) == before + 1

    def test_job_mutations_are_counted(self, client, auth_headers) -> None:
        labels = {"operation": "create"}
        before = _sample("jobtracker_jobs_mutations_total", labels)

        client.post(
            "/api/v1/jobs", json={"company": "Hooli", "position": "Engineer"}, headers=auth_headers
        )
        record_job_mutation("create")

        assert _sample("jobtracker_jobs_mutations_total", labels) == before + 2


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/api/v1/jobs", "/api/v1/jobs"),
        ("/api/v1/jobs/17", "/api/v1/jobs/{id}"),
        ("/api/v1/jobs/stats", "/api/v1/jobs/stats"),
    ],
)
def test_normalize_endpoint(path, expected):
    assert normalize_endpoint(path) == expected
