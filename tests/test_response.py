"""Tests for segmux.http.response — Response chaining."""

import pytest

from segmux.http.response import Response


class TestResponse:
    def test_defaults(self) -> None:
        r = Response()
        assert r.body == ""
        assert r.status == 200
        assert r.content_type == "text/html; charset=utf-8"
        assert r.headers == ()

    def test_with_status(self) -> None:
        assert Response().with_status(201).status == 201

    def test_with_header(self) -> None:
        r = Response().with_header("X-Custom", "value")
        assert r.headers == (("X-Custom", "value"),)

    def test_chained_headers(self) -> None:
        r = Response().with_header("A", "1").with_header("B", "2")
        assert r.headers == (("A", "1"), ("B", "2"))

    def test_with_headers_dict(self) -> None:
        r = Response().with_headers({"A": "1", "B": "2"})
        assert ("A", "1") in r.headers
        assert ("B", "2") in r.headers

    def test_with_content_type(self) -> None:
        assert Response().with_content_type("application/json").content_type == "application/json"

    def test_chaining_returns_new_objects(self) -> None:
        r1 = Response("x")
        r2 = r1.with_status(404)
        assert r1 is not r2
        assert r1.status == 200

    def test_header_lookup_case_insensitive(self) -> None:
        r = Response().with_header("X-Thing", "1")
        assert r.header("x-thing") == "1"
        assert r.header("missing") is None
        assert r.header("missing", "default") == "default"

    def test_body_bytes_and_text(self) -> None:
        assert Response("héllo").body_bytes == "héllo".encode()
        assert Response(b"raw").text == "raw"
        assert Response(b"raw").body_bytes == b"raw"

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Response().status = 500  # type: ignore[misc]
