"""
Application Definition
======================

Explicit description of an application handed to the bootstrap routine:
its name, API metadata and the routers to mount.
"""
from dataclasses import dataclass, field
from typing import Sequence, Tuple

from fastapi import APIRouter


@dataclass(frozen=True)
class RouterMount:
    """A router and the path prefix it is mounted under."""
    router: APIRouter
    prefix: str = ""
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ApplicationDefinition:
    """
    Root application marker.

    Attributes:
        name: Application name used in logs (overridable with application.name)
        title: OpenAPI title
        description: OpenAPI description
        version: Reported application version
        routers: Routers mounted on the web application, in order
    """
    name: str
    title: str
    version: str
    description: str = ""
    routers: Sequence[RouterMount] = field(default_factory=tuple)
