"""Tests for the lazy top-level segmux API."""

import pytest

import segmux


class TestLazyImports:
    def test_public_names_resolve(self) -> None:
        for name in segmux.__all__:
            assert getattr(segmux, name) is not None

    def test_mux_is_class(self) -> None:
        from segmux.mux import Mux

        assert segmux.Mux is Mux

    def test_accessors(self) -> None:
        from segmux.routing.params import param, param_int

        assert segmux.param is param
        assert segmux.param_int is param_int

    def test_unknown_name(self) -> None:
        with pytest.raises(AttributeError, match="no attribute 'nope'"):
            _ = segmux.nope  # type: ignore[attr-defined]
