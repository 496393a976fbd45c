"""
Request Dependencies
====================

FastAPI dependencies that resolve components from the container attached
to the running application.
"""
from fastapi import Request

from maven_essentials.boot.definition import ApplicationDefinition
from maven_essentials.core.config import Settings
from maven_essentials.di.base_container import BaseContainer


def get_container(request: Request) -> BaseContainer:
    """Container the application was built from."""
    return request.app.state.container


def get_settings(request: Request) -> Settings:
    return get_container(request).get(Settings)


def get_definition(request: Request) -> ApplicationDefinition:
    return get_container(request).get(ApplicationDefinition)
