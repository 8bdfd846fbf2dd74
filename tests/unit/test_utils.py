import asyncio
import httpx
import pytest
import requests
from batchfetch.fetch.utils import build_targets, describe_error, mock_body, utc_now_iso

TEMPLATE = "https://example.com/data/{index}"

class TestBuildTargets:
    """Unit tests for target list construction"""

    def test_default_batch(self):
        urls = build_targets(10, TEMPLATE)
        assert len(urls) == 10
        assert urls[0] == "https://example.com/data/0"
        assert urls[-1] == "https://example.com/data/9"

    def test_order_follows_index(self):
        assert build_targets(3, TEMPLATE) == (
            "https://example.com/data/0",
            "https://example.com/data/1",
            "https://example.com/data/2",
        )

    def test_zero_count(self):
        assert build_targets(0, TEMPLATE) == ()

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            build_targets(-1, TEMPLATE)

    def test_custom_template(self):
        assert build_targets(1, "http://localhost:8080/item?id={index}") == ("http://localhost:8080/item?id=0",)

class TestDescribeError:
    """Unit tests for failure reason formatting"""

    url = "https://example.com/data/3"

    def test_httpx_timeout(self):
        exc = httpx.ReadTimeout("timed out", request=httpx.Request("GET", self.url))
        assert describe_error(exc, self.url) == f"Timeout while fetching {self.url}"

    def test_httpx_status_error(self):
        request = httpx.Request("GET", self.url)
        response = httpx.Response(503, request=request)
        exc = httpx.HTTPStatusError("boom", request=request, response=response)
        assert describe_error(exc, self.url) == "HTTP error 503"

    def test_requests_timeout(self):
        assert describe_error(requests.ConnectTimeout("slow"), self.url) == f"Timeout while fetching {self.url}"

    def test_requests_http_error(self):
        response = requests.Response()
        response.status_code = 404
        exc = requests.HTTPError("not found", response=response)
        assert describe_error(exc, self.url) == "HTTP error 404"

    def test_overall_deadline_timeout(self):
        assert describe_error(asyncio.TimeoutError(), self.url) == f"Timeout while fetching {self.url}"

    def test_plain_message(self):
        assert describe_error(ConnectionError("connection refused"), self.url) == "connection refused"

    def test_empty_message_falls_back_to_class_name(self):
        assert describe_error(RuntimeError(), self.url) == "RuntimeError"

class TestHelpers:

    def test_mock_body_names_url(self):
        assert "https://example.com/data/1" in mock_body("https://example.com/data/1")

    def test_utc_timestamp_format(self):
        stamp = utc_now_iso()
        assert stamp.endswith("Z")
        assert "T" in stamp
