"""Unit tests for rate limit header parsing."""

from __future__ import annotations

from email.utils import formatdate

import pytest

from vultr_api.retry.headers import parse_rate_limit_headers, parse_retry_after


class TestParseRetryAfter:
    """Tests for parse_retry_after."""

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_absent(self, value):
        assert parse_retry_after(value) is None

    def test_delta_seconds(self):
        assert parse_retry_after("2") == 2.0
        assert parse_retry_after("1.5") == 1.5

    def test_negative_ignored(self):
        assert parse_retry_after("-3") is None

    def test_garbage_ignored(self):
        assert parse_retry_after("soon") is None

    def test_http_date(self):
        now = 1_700_000_000.0
        value = formatdate(now + 30, usegmt=True)
        assert parse_retry_after(value, now=now) == pytest.approx(30.0)

    def test_http_date_in_past_is_zero(self):
        now = 1_700_000_000.0
        value = formatdate(now - 60, usegmt=True)
        assert parse_retry_after(value, now=now) == 0.0


class TestParseRateLimitHeaders:
    """Tests for parse_rate_limit_headers."""

    def test_empty_headers(self):
        info = parse_rate_limit_headers({})
        assert info.limit is None
        assert info.remaining is None
        assert info.reset is None
        assert info.retry_after is None

    def test_case_insensitive(self):
        info = parse_rate_limit_headers(
            {
                "Retry-After": "3",
                "X-RateLimit-Limit": "30",
                "X-RateLimit-Remaining": "0",
                "X-RateLimit-Reset": "1700000000",
            },
        )
        assert info.retry_after == 3.0
        assert info.limit == 30
        assert info.remaining == 0
        assert info.reset == 1_700_000_000.0

    def test_malformed_values_treated_as_absent(self):
        info = parse_rate_limit_headers({"x-ratelimit-limit": "lots", "x-ratelimit-reset": "?"})
        assert info.limit is None
        assert info.reset is None

    def test_str_lists_every_value(self):
        info = parse_rate_limit_headers({"x-ratelimit-limit": "30", "retry-after": "2"})
        assert str(info) == "limit=30 remaining=None reset=None retry_after=2.0"
