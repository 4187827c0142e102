"""Mini README: Web interface package for the pasture map service.

Exposes ``create_application`` so uvicorn and tests can build the FastAPI
app without importing route internals.
"""

from .web_app import create_application

__all__ = ["create_application"]
