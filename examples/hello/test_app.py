"""Tests for the hello example."""

from segmux.testing import TestClient


class TestHelloApp:
    """Verify every route in the hello example works through the ASGI interface."""

    async def test_index(self, example_mux) -> None:
        async with TestClient(example_mux) as client:
            response = await client.get("/")
            assert response.status == 200
            assert response.text == "Hello, World!"

    async def test_greet_with_path_param(self, example_mux) -> None:
        async with TestClient(example_mux) as client:
            response = await client.get("/greet/alice")
            assert response.text == "Hello, alice!"

    async def test_square(self, example_mux) -> None:
        async with TestClient(example_mux) as client:
            response = await client.get("/square/12")
            assert "application/json" in response.content_type
            assert response.text == '{"n": 12, "square": 144}'

    async def test_square_non_numeric_is_zero(self, example_mux) -> None:
        async with TestClient(example_mux) as client:
            response = await client.get("/square/twelve")
            assert response.text == '{"n": 0, "square": 0}'

    async def test_post_root(self, example_mux) -> None:
        async with TestClient(example_mux) as client:
            response = await client.post("/")
            assert response.status == 201
            assert ("x-custom", "segmux") in response.headers

    async def test_custom_not_found(self, example_mux) -> None:
        async with TestClient(example_mux) as client:
            response = await client.get("/nonexistent")
            assert response.status == 404
            assert response.text == "Nothing at /nonexistent"
