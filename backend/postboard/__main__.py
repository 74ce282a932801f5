"""
Postboard Backend — Server Entry Point
========================================

Usage:
    python -m postboard                      # host/port from settings
    BACKEND_PORT=9000 python -m postboard

Runs uvicorn on the configured address. An address that is already taken
is reported in one log line and the process exits with status 1.
"""

import errno
import logging
import socket
import sys

import uvicorn

from postboard.config import settings
from postboard.main import setup_logging

logger = logging.getLogger("postboard")


def port_in_use(host: str, port: int) -> bool:
    """True if binding host:port fails with EADDRINUSE."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((host, port))
        except OSError as e:
            if e.errno == errno.EADDRINUSE:
                return True
            raise
    return False


def main() -> int:
    setup_logging()
    if port_in_use(settings.backend_host, settings.backend_port):
        logger.error(
            "Port %d is already in use. Stop the other process or set BACKEND_PORT.",
            settings.backend_port,
        )
        return 1

    uvicorn.run(
        "postboard.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
