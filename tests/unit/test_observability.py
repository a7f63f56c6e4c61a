"""可观测性模块的单元测试：logging、metrics、http_trace。"""

import json
import logging

import pytest
import structlog

from lesson_client.observability.http_trace import (
    body_preview,
    mask_headers,
    mask_sensitive,
    truncate,
)
from lesson_client.observability.logging import (
    api_call_context,
    configure_logging,
    get_logger,
    mask_event_secrets,
)
from lesson_client.observability.metrics import (
    api_errors_total,
    api_request_seconds,
    api_requests_total,
)


@pytest.fixture
def restore_logging():
    yield
    client_logger = logging.getLogger("lesson_client")
    for handler in list(client_logger.handlers):
        handler.close()
    client_logger.handlers.clear()
    client_logger.propagate = True
    structlog.reset_defaults()


# ---------------------------------------------------------------------------
# logging
# ---------------------------------------------------------------------------


class TestApiCallContext:
    def test_binds_and_unbinds(self):
        with api_call_context("GET", "/lesson/api/course/list?pageNum=1") as call_id:
            bound = structlog.contextvars.get_contextvars()
            assert bound["call_id"] == call_id
            assert bound["http_method"] == "GET"
            assert bound["api_path"] == "/lesson/api/course/list"
        assert "call_id" not in structlog.contextvars.get_contextvars()

    def test_call_ids_unique(self):
        with api_call_context("GET", "/a") as first:
            pass
        with api_call_context("GET", "/a") as second:
            pass
        assert first != second


class TestMaskEventSecrets:
    def test_masks_sensitive_fields(self):
        result = mask_event_secrets(None, "info", {"event": "login_success", "token": "abc", "phone": "138"})
        assert result == {"event": "login_success", "token": "***", "phone": "138"}

    def test_masks_nested(self):
        result = mask_event_secrets(None, "info", {"event": "x", "body": {"newPassword": "p"}})
        assert result["body"]["newPassword"] == "***"


class TestConfigureLogging:
    def test_creates_log_dir(self, tmp_path, restore_logging):
        log_dir = tmp_path / "test_logs"
        configure_logging("INFO", str(log_dir))
        assert log_dir.is_dir()

    def test_writes_json_lines(self, tmp_path, restore_logging):
        configure_logging("INFO", str(tmp_path))
        logger = get_logger("lesson_client.tests")
        logger.info("api_request_finish", method="GET", code=200)
        logger.error("api_network_error", error="connection refused")

        lines = (tmp_path / "client.log").read_text(encoding="utf-8").strip().splitlines()
        events = [json.loads(line)["event"] for line in lines]
        assert events == ["api_request_finish", "api_network_error"]

        errors = (tmp_path / "error.log").read_text(encoding="utf-8").strip().splitlines()
        assert [json.loads(line)["event"] for line in errors] == ["api_network_error"]

    def test_records_carry_call_context_and_mask_secrets(self, tmp_path, restore_logging):
        configure_logging("INFO", str(tmp_path))
        with api_call_context("POST", "/lesson/api/auth/login") as call_id:
            get_logger("lesson_client.tests").info("login_success", token="tok-secret")

        record = json.loads((tmp_path / "client.log").read_text(encoding="utf-8").strip())
        assert record["call_id"] == call_id
        assert record["http_method"] == "POST"
        assert record["api_path"] == "/lesson/api/auth/login"
        assert record["token"] == "***"

    def test_level_filters_debug(self, tmp_path, restore_logging):
        configure_logging("INFO", str(tmp_path))
        get_logger("lesson_client.tests").debug("too_verbose")
        content = (tmp_path / "client.log").read_text(encoding="utf-8")
        assert "too_verbose" not in content

    def test_handlers_not_duplicated(self, tmp_path, restore_logging):
        configure_logging("INFO", str(tmp_path))
        configure_logging("INFO", str(tmp_path))
        assert len(logging.getLogger("lesson_client").handlers) == 2


# ---------------------------------------------------------------------------
# metrics
# ---------------------------------------------------------------------------


class TestMetrics:
    def test_request_counter_labels(self):
        api_requests_total.labels(method="GET", outcome="success")

    def test_request_histogram(self):
        api_request_seconds.labels(method="GET").observe(0.2)

    def test_error_counter_labels(self):
        api_errors_total.labels(error_type="timeout")


# ---------------------------------------------------------------------------
# http_trace helpers
# ---------------------------------------------------------------------------


class TestHttpTraceHelpers:
    def test_mask_sensitive(self):
        data = {"password": "secret", "phone": "13800000000", "nested": {"Token": "abc"}}
        result = mask_sensitive(data)
        assert result["password"] == "***"
        assert result["phone"] == "13800000000"
        assert result["nested"]["Token"] == "***"

    def test_mask_sensitive_list(self):
        result = mask_sensitive([{"newPassword": "x"}, {"name": "ok"}])
        assert result[0]["newPassword"] == "***"
        assert result[1]["name"] == "ok"

    def test_truncate(self):
        assert truncate("hello", 100) == "hello"
        result = truncate("x" * 3000, 100)
        assert len(result) < 200
        assert "truncated" in result

    def test_body_preview_dict(self):
        result = body_preview({"phone": "13800000000", "password": "secret"})
        assert "***" in result
        assert "secret" not in result

    def test_body_preview_json_bytes(self):
        result = body_preview(b'{"token": "abc", "name": "test"}')
        assert "abc" not in result
        assert "test" in result

    def test_body_preview_empty(self):
        assert body_preview(None) is None
        assert body_preview(b"") is None
        assert body_preview("   ") is None

    def test_body_preview_non_json(self):
        assert body_preview(b"plain text body") == "plain text body"

    def test_mask_headers(self):
        masked = mask_headers({"Authorization": "tok", "cookie": "s=1", "Content-Type": "application/json"})
        assert masked == {"Authorization": "***", "cookie": "***", "Content-Type": "application/json"}
