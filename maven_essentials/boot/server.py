"""
Embedded Server
===============

Runs uvicorn on a background thread so the caller's thread is free once the
server accepts connections.

Startup sequence:
1. Bind the listening socket in the caller's thread (bind errors surface here)
2. Start uvicorn.Server on a non-daemon thread
3. Wait until uvicorn reports started, the thread dies, or the timeout elapses

The thread is non-daemon: it keeps the process alive after the entry point
returns, until stop() is called.
"""
import errno
import logging
import socket
import threading
import time
from typing import Optional

import uvicorn
from fastapi import FastAPI

from maven_essentials.core.config import Settings
from maven_essentials.core.errors import StartupError

logger = logging.getLogger(__name__)

_POLL_INTERVAL_SECONDS = 0.05


def _bind_socket(host: str, port: int) -> socket.socket:
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(2048)
    except OSError as e:
        sock.close()
        if e.errno == errno.EADDRINUSE:
            raise StartupError(f"Port {port} on {host} is already in use") from e
        raise StartupError(f"Could not bind {host}:{port}: {e}") from e
    sock.set_inheritable(True)
    return sock


class EmbeddedServer:
    """uvicorn server owned by the application context."""

    def __init__(self, app: FastAPI, settings: Settings) -> None:
        self.host = settings.server_host
        self.requested_port = settings.server_port
        self.startup_timeout_seconds = settings.server_startup_timeout_seconds
        self._config = uvicorn.Config(
            app,
            host=settings.server_host,
            port=settings.server_port,
            lifespan="on",
            log_level=settings.log_level.lower(),
            # Keep our logging configuration; uvicorn loggers propagate to root
            log_config=None,
        )
        self._server = uvicorn.Server(self._config)
        self._thread: Optional[threading.Thread] = None
        self._stopped = False
        self.port: Optional[int] = None

    def start(self) -> None:
        """
        Bind, start the server thread and block until it accepts connections.

        Raises:
            StartupError: bind failure, server failure or startup timeout
        """
        if self._thread is not None:
            raise StartupError("Embedded server already started")

        sock = _bind_socket(self.host, self.requested_port)
        self.port = sock.getsockname()[1]

        self._thread = threading.Thread(
            target=self._serve,
            args=(sock,),
            name="embedded-server",
            daemon=False,
        )
        self._thread.start()

        deadline = time.monotonic() + self.startup_timeout_seconds
        while not self._server.started:
            if not self._thread.is_alive():
                raise StartupError("Embedded server exited during startup")
            if time.monotonic() >= deadline:
                # Lifespan startup does not check should_exit; force_exit skips graceful waits
                self._server.force_exit = True
                self.stop(timeout=self.startup_timeout_seconds)
                raise StartupError(
                    f"Embedded server did not start within {self.startup_timeout_seconds} seconds"
                )
            time.sleep(_POLL_INTERVAL_SECONDS)

        logger.info("Embedded server started on http://%s:%s", self.host, self.port)

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def stop(self, timeout: Optional[float] = None) -> None:
        """
        Ask uvicorn to exit and wait for the server thread. Safe to call twice.

        With a timeout the wait is bounded; a thread still alive afterwards
        is left to finish on its own.
        """
        if self._thread is None or self._stopped:
            return
        self._stopped = True
        self._server.should_exit = True
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join(timeout)
        if self._thread.is_alive():
            logger.warning("Embedded server thread still running after %s seconds", timeout)
        else:
            logger.info("Embedded server stopped")

    def _serve(self, sock: socket.socket) -> None:
        # The listening socket lives as long as the server thread
        try:
            self._server.run(sockets=[sock])
        finally:
            sock.close()
