"""Bind the listening socket and run the API under uvicorn."""

from __future__ import annotations

import socket
from typing import Optional

from uvicorn import Config, Server

from .config import Settings, get_settings
from .logging_utils import get_logger, resolve_log_level
from .main import app

logger = get_logger("server")


def bind_socket(host: str, port: int) -> socket.socket:
    """Return a socket bound to ``(host, port)``; bind errors propagate."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
    except OSError:
        sock.close()
        logger.exception("Unable to bind %s:%d.", host, port)
        raise
    sock.set_inheritable(True)
    return sock


def serve(settings: Optional[Settings] = None) -> None:
    """Serve the application until uvicorn is asked to stop."""
    settings = settings or get_settings()
    sock = bind_socket(settings.host, settings.port)
    port = sock.getsockname()[1]
    logger.info("Server running on port %d", port)
    logger.info("Health check: http://localhost:%d/health", port)

    config = Config(
        app,
        host=settings.host,
        port=port,
        log_level=resolve_log_level(),
    )
    try:
        Server(config).run(sockets=[sock])
    finally:
        sock.close()


def main() -> None:
    serve()
