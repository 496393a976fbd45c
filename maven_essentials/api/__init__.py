"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.

Contains:
- Controllers: FastAPI route handlers
- Schemas: Pydantic models for responses
- Dependencies: resolve components from the application container
"""
