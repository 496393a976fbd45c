"""
Application Context
===================

Runtime container created by the bootstrap routine. Owns the DI container,
the web application and the embedded server, and tears them down on close().
"""
import logging
import signal
import threading
from datetime import datetime
from typing import Any, Dict, Optional, Type, TypeVar, Union

from fastapi import FastAPI

from maven_essentials.boot.definition import ApplicationDefinition
from maven_essentials.boot.server import EmbeddedServer
from maven_essentials.core.arguments import ApplicationArguments
from maven_essentials.core.config import Settings
from maven_essentials.di.container import ApplicationContainer

logger = logging.getLogger(__name__)

T = TypeVar("T")

_SHUTDOWN_SIGNALS = tuple(
    sig for sig in (getattr(signal, "SIGINT", None), getattr(signal, "SIGTERM", None)) if sig is not None
)


class ApplicationContext:
    """Running application: components plus the optional embedded server."""

    def __init__(
        self,
        container: ApplicationContainer,
        server: Optional[EmbeddedServer],
        started_at: datetime,
    ) -> None:
        self.container = container
        self.server = server
        self.started_at = started_at
        self._closed = False
        self._close_lock = threading.Lock()
        self._previous_handlers: Dict[int, Any] = {}

    @property
    def definition(self) -> ApplicationDefinition:
        return self.container.get(ApplicationDefinition)

    @property
    def arguments(self) -> ApplicationArguments:
        return self.container.get(ApplicationArguments)

    @property
    def settings(self) -> Settings:
        return self.container.get(Settings)

    @property
    def app(self) -> FastAPI:
        return self.container.get(FastAPI)

    @property
    def name(self) -> str:
        return self.settings.application_name or self.definition.name

    @property
    def port(self) -> Optional[int]:
        """Port the embedded server listens on; None when there is no server."""
        return self.server.port if self.server is not None else None

    @property
    def is_active(self) -> bool:
        return not self._closed

    def get(self, interface: Union[Type[T], str]) -> T:
        return self.container.get(interface)

    def register_shutdown_hook(self) -> bool:
        """
        Close the context on SIGINT/SIGTERM.

        Signal handlers can only be installed from the main thread; returns
        False when called from any other thread.
        """
        if threading.current_thread() is not threading.main_thread():
            logger.debug("Not on the main thread, shutdown hook not registered")
            return False

        for sig in _SHUTDOWN_SIGNALS:
            self._previous_handlers[sig] = signal.signal(sig, self._handle_signal)
        return True

    def _handle_signal(self, signum: int, frame) -> None:
        logger.info("Received %s, closing application context", signal.Signals(signum).name)
        self.close()

    def close(self) -> None:
        """Stop the embedded server and restore signal handlers. Idempotent."""
        with self._close_lock:
            if self._closed:
                return
            self._closed = True

        logger.info("Closing application context '%s'", self.name)
        if self.server is not None:
            self.server.stop()

        if self._previous_handlers and threading.current_thread() is threading.main_thread():
            for sig, handler in self._previous_handlers.items():
                signal.signal(sig, handler)
            self._previous_handlers.clear()

    def __enter__(self) -> "ApplicationContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
