"""Tests for segmux.config — MuxConfig defaults and immutability."""

import pytest

from segmux.config import MuxConfig


class TestMuxConfig:
    def test_defaults(self) -> None:
        config = MuxConfig()
        assert config.debug is False
        assert config.not_found_body == "404 page not found\n"
        assert config.not_found_content_type == "text/plain; charset=utf-8"

    def test_override(self) -> None:
        assert MuxConfig(debug=True).debug is True

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            MuxConfig().debug = True  # type: ignore[misc]
