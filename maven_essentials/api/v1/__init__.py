"""
API v1 Package
===============

Version 1 API controllers.
"""
from .system_controller import router as system_router

__all__ = ["system_router"]
