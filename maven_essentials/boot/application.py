"""
Bootstrap Routine
=================

run(definition, args) starts an application and returns its context.

Startup sequence:
1. Parse command-line arguments
2. Resolve settings (command-line properties → environment → .env)
3. Configure logging
4. Wire the container (configuration → web application)
5. Start the embedded server (unless main.web-application-type=none)
6. Register the shutdown hook (unless main.register-shutdown-hook=false)

Any failure is logged and re-raised as StartupError; nothing is retried.
"""
import logging
import time
from typing import Optional, Sequence

from fastapi import FastAPI

from maven_essentials.boot.context import ApplicationContext
from maven_essentials.boot.definition import ApplicationDefinition
from maven_essentials.boot.server import EmbeddedServer
from maven_essentials.core.arguments import ApplicationArguments
from maven_essentials.core.config import Settings
from maven_essentials.core.errors import StartupError
from maven_essentials.core.logging_config import configure_logging
from maven_essentials.di.container import ApplicationContainer
from maven_essentials.utils.datetime_utils import now

logger = logging.getLogger(__name__)


def run(definition: ApplicationDefinition, args: Sequence[str] = ()) -> ApplicationContext:
    """
    Start the application described by ``definition``.

    Args:
        definition: Root application marker (metadata and routers)
        args: Command-line arguments, passed through unmodified

    Returns:
        The running ApplicationContext

    Raises:
        StartupError: configuration is invalid or the server cannot start
    """
    started = time.perf_counter()
    server: Optional[EmbeddedServer] = None
    succeeded = False
    try:
        arguments = ApplicationArguments(args)
        settings = Settings(overrides=arguments.as_properties())
        configure_logging(settings.log_level)

        app_name = settings.application_name or definition.name
        logger.info("Starting %s v%s", app_name, definition.version)
        if arguments.non_option_args:
            logger.debug("Non-option arguments: %s", arguments.non_option_args)

        container = ApplicationContainer(definition, arguments, settings)

        if settings.web_enabled:
            server = EmbeddedServer(container.get(FastAPI), settings)
            server.start()
        else:
            logger.info("Web application type is 'none', embedded server not started")

        context = ApplicationContext(container, server, started_at=now(settings.timezone))
        if settings.register_shutdown_hook:
            context.register_shutdown_hook()
        succeeded = True
    except StartupError as e:
        logger.error("Application run failed: %s", e)
        raise
    except Exception as e:
        logger.exception("Application run failed")
        raise StartupError(str(e)) from e
    finally:
        # Also runs on KeyboardInterrupt; the non-daemon server thread must not outlive a failed run
        if not succeeded and server is not None:
            server.stop(timeout=server.startup_timeout_seconds)

    logger.info("Started %s in %.3f seconds", context.name, time.perf_counter() - started)
    return context
