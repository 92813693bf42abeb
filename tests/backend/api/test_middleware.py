"""
Tests for the metrics and request logging middleware.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

from backend.chirpy.api.middleware import MetricsMiddleware, RequestLoggingMiddleware
from backend.chirpy.api.services.metrics import HitCounter


class TestMetricsMiddleware:
    """Fileserver requests are counted, everything else is not."""

    def test_static_file_is_served_and_counted(self, client, hit_counter):
        response = client.get("/app/logo.txt")

        assert response.status_code == 200
        assert response.text == "chirp chirp"
        assert hit_counter.read() == 1

    def test_index_page_is_served(self, client):
        response = client.get("/app/")

        assert response.status_code == 200
        assert "Welcome to Chirpy" in response.text

    def test_bare_prefix_redirect_is_counted_once(self, client, hit_counter):
        response = client.get("/app")

        assert response.status_code == 200
        assert "Welcome to Chirpy" in response.text
        assert hit_counter.read() == 1

    def test_missing_static_file_still_counts(self, client, hit_counter):
        response = client.get("/app/missing.png")

        assert response.status_code == 404
        assert hit_counter.read() == 1

    def test_api_and_admin_routes_are_not_counted(self, client, hit_counter):
        client.get("/api/healthz")
        client.get("/api/chirps")
        client.get("/admin/metrics")

        assert hit_counter.read() == 0

    def test_prefix_must_match_a_whole_segment(self):
        middleware = MetricsMiddleware(app=None, counter=HitCounter(), prefix="/app/")

        assert middleware._is_static("/app/")
        assert middleware._is_static("/app/index.html")
        assert not middleware._is_static("/app")
        assert not middleware._is_static("/application")
        assert not middleware._is_static("/api/chirps")

    def test_concurrent_requests_are_all_counted(self, client, hit_counter):
        workers, per_worker = 8, 50

        def fetch_many(_):
            return [client.get("/app/logo.txt").status_code for _ in range(per_worker)]

        with ThreadPoolExecutor(max_workers=workers) as pool:
            statuses = [code for batch in pool.map(fetch_many, range(workers)) for code in batch]

        assert statuses == [200] * (workers * per_worker)
        assert hit_counter.read() == workers * per_worker
        assert "visited 400 times!" in client.get("/admin/metrics").text


class TestRequestLoggingMiddleware:
    """Responses carry tracing headers; the log level is per middleware."""

    def test_request_id_header(self, client):
        first = client.get("/api/healthz")
        second = client.get("/api/healthz")

        assert "X-Request-ID" in first.headers
        assert "X-Processing-Time" in first.headers
        assert first.headers["X-Request-ID"] != second.headers["X-Request-ID"]

    def test_log_level_does_not_touch_module_logger(self):
        module_logger = logging.getLogger("backend.chirpy.api.middleware")
        level_before = module_logger.level
        config = MagicMock()
        config.get.return_value = "debug"

        middleware = RequestLoggingMiddleware(app=None, config=config)

        assert middleware.log_level == logging.DEBUG
        assert module_logger.level == level_before

    def test_unknown_log_level_falls_back_to_info(self):
        config = MagicMock()
        config.get.return_value = "chatty"

        middleware = RequestLoggingMiddleware(app=None, config=config)

        assert middleware.log_level == logging.INFO

    def test_requests_logged_at_configured_level(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="backend.chirpy.api.middleware"):
            client.get("/api/healthz")

        request_lines = [
            r for r in caplog.records
            if r.name == "backend.chirpy.api.middleware" and "/api/healthz" in r.getMessage()
        ]
        assert len(request_lines) == 2
        assert all(r.levelno == logging.INFO for r in request_lines)
