"""Greeting written to any text stream, also served over HTTP."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable
from typing import Any, TextIO
from wsgiref.simple_server import make_server

DEFAULT_PORT = 5000


def greet(writer: TextIO, name: str) -> None:
    """Write ``Hello, <name>`` to ``writer``."""
    writer.write(f"Hello, {name}")


def greeter_app(
    environ: dict[str, Any], start_response: Callable[..., Any]
) -> Iterable[bytes]:
    """WSGI application that greets the world."""
    body = "Hello, world".encode("utf-8")
    start_response(
        "200 OK",
        [
            ("Content-Type", "text/plain; charset=utf-8"),
            ("Content-Length", str(len(body))),
        ],
    )
    return [body]


def main(argv: list[str] | None = None) -> int:
    """Serve the greeter over HTTP until interrupted."""
    parser = argparse.ArgumentParser(description="Serve a greeting over HTTP.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    with make_server("", args.port, greeter_app) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())