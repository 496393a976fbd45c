"""
Application Entry Point
=======================

Starts the application context, then prints the diagnostic line.

Startup failures are not handled here: they propagate and end the process
with a non-zero exit status.
"""
import sys
from typing import Optional, Sequence

from maven_essentials import __version__
from maven_essentials.api.v1 import system_router
from maven_essentials.boot.application import run
from maven_essentials.boot.definition import ApplicationDefinition, RouterMount

DIAGNOSTIC_LINE = "maven essentials"

MavenEssentialsApplication = ApplicationDefinition(
    name="maven-essentials",
    title="Maven Essentials API",
    description="Application bootstrap with an embedded web server",
    version=__version__,
    routers=(RouterMount(system_router),),
)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    Process entry point.

    Args:
        argv: Command-line arguments; defaults to sys.argv[1:]. Forwarded to
            the bootstrap routine unmodified.
    """
    args = sys.argv[1:] if argv is None else argv
    run(MavenEssentialsApplication, args)
    print(DIAGNOSTIC_LINE, flush=True)
