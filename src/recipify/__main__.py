"""Serve the recipify WSGI app locally.

    python -m recipify [--host 127.0.0.1] [--port 8000]
"""

from __future__ import annotations

import argparse
from wsgiref.simple_server import make_server

from recipify.api import create_app
from recipify.observability import get_logger

log = get_logger("recipify.server")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="recipify", description=__doc__)
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)

    app = create_app()
    with make_server(args.host, args.port, app) as server:
        log.info(
            "Serving recipify",
            extra={"extra_fields": {"host": args.host, "port": args.port}},
        )
        server.serve_forever()


if __name__ == "__main__":
    main()
