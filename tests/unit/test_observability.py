"""
Name: Observability Tests

Responsibilities:
  - Validate JSON log formatting, context enrichment and secret redaction
  - Validate metrics label normalization
  - Validate FeedError -> HTTP exception mapping
"""

import json
import logging
import sys

import pytest

from kudos.application.use_cases import FeedError, FeedErrorCode
from kudos.context import clear_context, request_id_var, user_id_var
from kudos.error_mapping import raise_feed_error
from kudos.error_responses import AppHTTPException, ErrorCode
from kudos.logger import JSONFormatter
from kudos.metrics import _normalize_endpoint, _status_bucket


pytestmark = pytest.mark.unit


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="kudos",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="Recognition created",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_includes_context_and_extra_fields(self):
        request_id_var.set("req-1")
        user_id_var.set("user1")
        try:
            payload = json.loads(JSONFormatter().format(_record(recognition_id="r1")))
        finally:
            clear_context()

        assert payload["message"] == "Recognition created"
        assert payload["level"] == "INFO"
        assert payload["request_id"] == "req-1"
        assert payload["user_id"] == "user1"
        assert payload["recognition_id"] == "r1"

    def test_redacts_sensitive_keys(self):
        payload = json.loads(
            JSONFormatter().format(
                _record(webhook_url="https://hooks.slack.test/x", Authorization="Bearer a")
            )
        )

        assert payload["webhook_url"] == "***REDACTED***"
        assert payload["Authorization"] == "***REDACTED***"

    def test_exception_info(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = _record()
            record.exc_info = sys.exc_info()

        payload = json.loads(JSONFormatter().format(record))

        assert payload["exception"]["type"] == "RuntimeError"
        assert payload["exception"]["message"] == "boom"


class TestMetricsLabels:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/v1/analytics/teams/team1", "/v1/analytics/teams/{id}"),
            ("/v1/subscriptions/users/user10", "/v1/subscriptions/users/{id}"),
            (
                "/v1/recognitions/3f2b8c1e-9d4a-4c7b-8e21-0a5b6c7d8e9f",
                "/v1/recognitions/{id}",
            ),
            ("/v1/recognitions", "/v1/recognitions"),
        ],
    )
    def test_normalize_endpoint(self, path, expected):
        assert _normalize_endpoint(path) == expected

    def test_status_bucket(self):
        assert _status_bucket(201) == "2xx"
        assert _status_bucket(404) == "4xx"
        assert _status_bucket(503) == "5xx"
        assert _status_bucket(302) == "other"


class TestFeedErrorMapping:
    @pytest.mark.parametrize(
        "code, status, error_code",
        [
            (FeedErrorCode.UNAUTHENTICATED, 401, ErrorCode.UNAUTHORIZED),
            (FeedErrorCode.FORBIDDEN, 403, ErrorCode.FORBIDDEN),
            (FeedErrorCode.NOT_FOUND, 404, ErrorCode.NOT_FOUND),
            (FeedErrorCode.VALIDATION_ERROR, 422, ErrorCode.VALIDATION_ERROR),
        ],
    )
    def test_mapping(self, code, status, error_code):
        with pytest.raises(AppHTTPException) as exc_info:
            raise_feed_error(FeedError(code=code, message="nope"))

        assert exc_info.value.status_code == status
        assert exc_info.value.code == error_code
        assert exc_info.value.detail == "nope"
