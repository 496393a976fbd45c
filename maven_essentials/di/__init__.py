"""
Dependency Injection
====================

Container holding the components of the application context.
"""
from .base_container import BaseContainer
from .container import ApplicationContainer

__all__ = ["BaseContainer", "ApplicationContainer"]
