"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .configuration_provider import ConfigurationProvider
from .web_provider import WebProvider

__all__ = [
    "ConfigurationProvider",
    "WebProvider",
]
