from typing import Optional


class MavenEssentialsError(Exception):
    """Base exception for this project."""


class StartupError(MavenEssentialsError):
    """Raised when the application context cannot be started."""


class ConfigError(StartupError):
    """Raised when a configuration property is invalid."""

    def __init__(self, message: str, *, key: Optional[str] = None):
        super().__init__(f"{key}: {message}" if key else message)
        self.key = key


class ComponentNotFoundError(MavenEssentialsError):
    """Raised when the container has no registration for a key."""
