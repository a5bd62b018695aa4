"""Hello World — the simplest segmux app.

Demonstrates verb shortcuts, path parameters, return-value conversion,
Response chaining and a custom not-found handler.

Run:
    uvicorn app:mux
"""

from segmux import Mux, Request, Response, param, param_int

mux = Mux()


@mux.get("/")
def index(request: Request):
    return "Hello, World!"


@mux.get("/greet/:name")
def greet(request: Request):
    return f"Hello, {param(request, 'name')}!"


@mux.get("/square/:n")
def square(request: Request):
    n = param_int(request, "n")
    return {"n": n, "square": n * n}


@mux.post("/")
def create(request: Request):
    return Response("Created").with_status(201).with_header("X-Custom", "segmux")


@mux.not_found
def not_found(request: Request):
    return f"Nothing at {request.path}", 404
