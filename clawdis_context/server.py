#!/usr/bin/env python3
"""CLI entrypoint for running the context service with Uvicorn."""

import argparse
import logging

import uvicorn

from .config import get_settings


def main() -> None:
    settings = get_settings()
    default_host = settings.server_host
    default_port = settings.server_port

    parser = argparse.ArgumentParser(description="Clawdis context compaction service")
    parser.add_argument("--host", default=default_host, help=f"Host to bind (default: {default_host})")
    parser.add_argument("--port", type=int, default=default_port, help=f"Port to bind (default: {default_port})")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    args = parser.parse_args()

    # Only warnings and errors from the access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn").setLevel(logging.INFO)

    # Reload mode needs an import string rather than the app object
    target = "clawdis_context.app:app" if args.reload else _load_app()
    uvicorn.run(
        target,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
        access_log=False,
    )


def _load_app():
    from .app import app

    return app


if __name__ == "__main__":  # pragma: no cover - CLI invocation guard
    main()
