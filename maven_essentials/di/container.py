# Local application imports
from maven_essentials.boot.definition import ApplicationDefinition
from maven_essentials.core.arguments import ApplicationArguments
from maven_essentials.core.config import Settings

from .base_container import BaseContainer
from .providers import ConfigurationProvider, WebProvider


class ApplicationContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Configuration (ConfigurationProvider) - definition, arguments, settings
    2. Web application (WebProvider) - depends on configuration
    """

    def __init__(
        self,
        definition: ApplicationDefinition,
        arguments: ApplicationArguments,
        settings: Settings,
    ) -> None:
        super().__init__()
        self.setup(definition, arguments, settings)

    def setup(
        self,
        definition: ApplicationDefinition,
        arguments: ApplicationArguments,
        settings: Settings,
    ) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: configuration → web
        """
        ConfigurationProvider.register(self, definition, arguments, settings)
        WebProvider.register(self)
