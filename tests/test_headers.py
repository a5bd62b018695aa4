"""Tests for segmux.http.headers — read-only, case-insensitive Headers."""

import pytest

from segmux.http.headers import Headers


def _h(*pairs: tuple[str, str]) -> Headers:
    """Shorthand: build Headers from string pairs."""
    raw = tuple((k.encode("latin-1"), v.encode("latin-1")) for k, v in pairs)
    return Headers(raw)


class TestHeaders:
    def test_case_insensitive(self) -> None:
        h = _h(("Content-Type", "text/html"))
        assert h["content-type"] == "text/html"
        assert h["CONTENT-TYPE"] == "text/html"

    def test_missing_key_raises(self) -> None:
        with pytest.raises(KeyError):
            _h(("Accept", "*/*"))["X-Missing"]

    def test_contains(self) -> None:
        h = _h(("Accept", "*/*"))
        assert "Accept" in h
        assert "x-missing" not in h
        assert 42 not in h  # type: ignore[operator]

    def test_first_value_wins(self) -> None:
        h = _h(("X-A", "1"), ("x-a", "2"))
        assert h["X-A"] == "1"
        assert h.get_list("x-a") == ["1", "2"]

    def test_iter_and_len_dedupe(self) -> None:
        h = _h(("X-A", "1"), ("x-a", "2"), ("Accept", "*/*"))
        assert list(h) == ["x-a", "accept"]
        assert len(h) == 2

    def test_get_default(self) -> None:
        h = _h()
        assert h.get("x") is None
        assert h.get("x", "d") == "d"

    def test_raw(self) -> None:
        raw = ((b"accept", b"*/*"),)
        assert Headers(raw).raw == raw
