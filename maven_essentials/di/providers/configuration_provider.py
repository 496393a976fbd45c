from typing import TYPE_CHECKING

from ...boot.definition import ApplicationDefinition
from ...core.arguments import ApplicationArguments
from ...core.config import Settings

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ConfigurationProvider:
    """Configuration provider - registers what the application was started with"""

    @staticmethod
    def register(
        container: "BaseContainer",
        definition: ApplicationDefinition,
        arguments: ApplicationArguments,
        settings: Settings,
    ) -> None:
        """
        Register the application definition, the command-line arguments and
        the resolved settings. Every other provider reads from these.
        """
        container.register_singleton(ApplicationDefinition, definition)
        container.register_singleton(ApplicationArguments, arguments)
        container.register_singleton(Settings, settings)
