from typing import TYPE_CHECKING

from fastapi import FastAPI

from ...boot.definition import ApplicationDefinition
from ...boot.web import create_application
from ...core.config import Settings

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class WebProvider:
    """Web provider - registers the FastAPI application"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Build the FastAPI application from the registered definition and
        settings. The application keeps a reference to the container so
        request dependencies can resolve components from it.
        """
        application = create_application(
            definition=container.get(ApplicationDefinition),
            settings=container.get(Settings),
        )
        application.state.container = container

        container.register_singleton(FastAPI, application)
